from services.passenger.domain.entity import Passenger
from services.passenger.domain.value_object import PassengerId, PassengerName


class TestPassenger:
    """Passenger Entity のテスト"""

    def test_identity_is_based_on_id(self, create_passenger):
        """同じ ID なら名前が違っても同一の乗客"""
        assert create_passenger(name="Alice") == create_passenger(name="Alicia")

    def test_different_id_is_not_equal(self, create_passenger):
        assert create_passenger(passenger_id="p-1") != create_passenger(
            passenger_id="p-2"
        )

    def test_properties(self):
        passenger = Passenger(id=PassengerId("p-1"), name=PassengerName("Alice"))
        assert passenger.id == PassengerId("p-1")
        assert passenger.name == PassengerName("Alice")
