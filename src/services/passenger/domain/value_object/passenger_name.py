from dataclasses import dataclass


@dataclass(frozen=True)
class PassengerName:
    """乗客名

    保存済みデータとの互換のため空文字も許容する（空白のみの拒否は API 入力側で行う）。
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Passenger name must be a string: {self.value!r}")

    def __str__(self) -> str:
        return self.value
