from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class TableDescriptor:
    """DynamoDB テーブルの記述子

    テーブル名とパーティションキー名を型で束ねる。
    例: TableDescriptor(name="flights", key_name="number")
    """

    name: str
    key_name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Table name cannot be empty")
        if not self.key_name:
            raise ValueError("Partition key name cannot be empty")

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_env(cls, env_var: str, default: str, key_name: str) -> TableDescriptor:
        """環境変数でテーブル名を上書きできる記述子を生成する"""

        return cls(name=os.getenv(env_var) or default, key_name=key_name)

    def key(self, value: str) -> dict[str, str]:
        """パーティションキーの Key 引数を組み立てる"""
        return {self.key_name: value}


@dataclass(frozen=True)
class StringSetAttribute:
    """テーブル上の文字列セット (SS) 属性"""

    table: TableDescriptor
    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Set attribute name cannot be empty")

    def __str__(self) -> str:
        return f"{self.table.name}.{self.name}"
