from services.flight.domain.value_object import FlightNumber
from services.passenger.domain.value_object import PassengerId


class TestFlight:
    """Flight Entity のテスト"""

    def test_properties(self, create_flight):
        flight = create_flight(passenger_ids=("p-1", "p-2"))

        assert flight.number == FlightNumber("BA100")
        assert flight.capacity == 180
        assert flight.captain == "Jane Smith"
        assert flight.plane == "A320"
        assert flight.passenger_ids == {PassengerId("p-1"), PassengerId("p-2")}

    def test_default_passenger_set_is_empty(self, create_flight):
        assert create_flight().passenger_ids == frozenset()

    def test_identity_is_flight_number(self, create_flight):
        """乗客セットが違っても同じフライト番号なら同一"""
        assert create_flight() == create_flight(passenger_ids=("p-1",))
