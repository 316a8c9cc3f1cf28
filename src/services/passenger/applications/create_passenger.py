from services.passenger.domain.entity import Passenger
from services.passenger.domain.factory import PassengerFactory
from services.passenger.domain.repository import PassengerRepository


class CreatePassengerService:
    """乗客登録のユースケース"""

    def __init__(
        self, repository: PassengerRepository, factory: PassengerFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def create(self, name: str) -> Passenger:
        """乗客を登録する"""

        passenger = self._factory.create(name)
        self._repository.save(passenger)
        return passenger
