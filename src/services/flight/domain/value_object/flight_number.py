from dataclasses import dataclass


@dataclass(frozen=True)
class FlightNumber:
    """フライト番号（flights テーブルのパーティションキー）

    事前投入されたキーをそのまま使う。形式の検証・大文字化は行わない。
    例: BA100, flight-1
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"FlightNumber must be a string: {self.value!r}")
        if not self.value:
            raise ValueError("FlightNumber cannot be empty")

    def __str__(self) -> str:
        return self.value
