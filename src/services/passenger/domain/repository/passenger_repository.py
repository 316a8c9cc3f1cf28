from abc import abstractmethod
from typing import Optional

from services.passenger.domain.entity import Passenger
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import Repository


class PassengerRepository(Repository[Passenger]):
    """乗客レポジトリ"""

    @abstractmethod
    def save(self, passenger: Passenger) -> None:
        """永続化する（同じIDがあれば上書き）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, passenger_id: PassengerId) -> Optional[Passenger]:
        """乗客IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, passenger_id: PassengerId) -> None:
        """削除する。存在しなくてもエラーにしない"""
        raise NotImplementedError
