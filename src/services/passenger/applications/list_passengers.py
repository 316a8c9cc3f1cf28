from services.passenger.domain.entity import Passenger
from services.passenger.domain.repository import PassengerRepository


class ListPassengersService:
    def __init__(self, repository: PassengerRepository) -> None:
        self._repository = repository

    def list(self) -> list[Passenger]:
        """全乗客を取得する"""
        return self._repository.find_all()
