import pytest

from services.flight.domain.entity import Flight
from services.flight.domain.value_object import FlightNumber
from services.passenger.domain.value_object import PassengerId


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        number: str = "BA100",
        capacity: int = 180,
        captain: str = "Jane Smith",
        plane: str = "A320",
        passenger_ids: tuple[str, ...] = (),
    ) -> Flight:
        return Flight(
            id=FlightNumber(value=number),
            capacity=capacity,
            captain=captain,
            plane=plane,
            passenger_ids=frozenset(PassengerId(value=p) for p in passenger_ids),
        )

    return _factory
