from services.passenger.domain.entity import Passenger
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import PassengerId


class GetPassengerService:
    def __init__(self, repository: PassengerRepository) -> None:
        self._repository = repository

    def get(self, passenger_id: PassengerId) -> Passenger | None:
        """乗客を取得する。存在しない場合は None"""
        return self._repository.find_by_id(passenger_id)
