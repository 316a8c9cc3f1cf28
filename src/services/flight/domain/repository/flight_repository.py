from abc import abstractmethod

from services.flight.domain.entity import Flight
from services.flight.domain.value_object import FlightNumber
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import Repository


class FlightRepository(Repository[Flight]):
    """フライトレポジトリ

    乗客セットの変更はアイテム単位のアトミックな更新で行い、
    同じ値の追加・存在しない値の削除は何もしない（セットの意味論）。
    """

    @abstractmethod
    def add_passenger(
        self, flight_number: FlightNumber, passenger_id: PassengerId
    ) -> None:
        """フライトの乗客セットに乗客IDを追加する"""
        raise NotImplementedError

    @abstractmethod
    def remove_passenger(
        self, flight_number: FlightNumber, passenger_id: PassengerId
    ) -> None:
        """フライトの乗客セットから乗客IDを削除する"""
        raise NotImplementedError
