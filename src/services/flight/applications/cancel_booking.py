from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightNumber
from services.passenger.domain.value_object import PassengerId


class CancelBookingService:
    """フライト予約キャンセルのユースケース"""

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def cancel(self, flight_number: FlightNumber, passenger_id: PassengerId) -> bool:
        """フライトから乗客を外す。予約が無くてもエラーにしない"""
        self._repository.remove_passenger(flight_number, passenger_id)
        return True
