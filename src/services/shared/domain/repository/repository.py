from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Repository 基底クラス

    - テーブル単位の永続化を抽象化する
    - 全件取得はページングしない（小規模テーブル前提）
    """

    @abstractmethod
    def find_all(self) -> list[T]:
        """全件を取得する"""
        raise NotImplementedError
