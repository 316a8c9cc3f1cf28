from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightNumber
from services.passenger.domain.value_object import PassengerId


class BookFlightService:
    """フライト予約のユースケース

    乗客の存在確認・定員チェックは行わない。
    """

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def book(self, flight_number: FlightNumber, passenger_id: PassengerId) -> bool:
        """フライトに乗客を追加する（冪等）"""
        self._repository.add_passenger(flight_number, passenger_id)
        return True
