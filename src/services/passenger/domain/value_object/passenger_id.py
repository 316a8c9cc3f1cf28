from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class PassengerId:
    """乗客ID

    作成時に一度だけ採番される UUID 文字列。
    例: "3f1c2a9e-5b7d-4e0a-9c1b-2d8e6f4a7b3c"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("PassengerId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> PassengerId:
        """新しい一意な PassengerId を生成する"""

        return cls(value=str(uuid.uuid4()))
