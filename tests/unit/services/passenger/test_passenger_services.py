import pytest

from services.passenger.applications.create_passenger import CreatePassengerService
from services.passenger.applications.delete_passenger import DeletePassengerService
from services.passenger.applications.get_passenger import GetPassengerService
from services.passenger.applications.list_passengers import ListPassengersService
from services.passenger.domain.entity import Passenger
from services.passenger.domain.factory import PassengerFactory
from services.passenger.domain.value_object import PassengerId
from services.shared.domain.exception import StoreException


class TestCreatePassengerService:
    """CreatePassengerService のテスト"""

    def test_create_saves_passenger(self, mock_repository):
        """乗客が生成され、Repository に保存され、Entity が返される"""

        # Arrange
        service = CreatePassengerService(
            repository=mock_repository, factory=PassengerFactory()
        )

        # Act
        passenger = service.create("Alice")

        # Assert
        assert isinstance(passenger, Passenger)
        assert str(passenger.name) == "Alice"
        mock_repository.save.assert_called_once_with(passenger)

    def test_store_error_propagates(self, mock_repository):
        """保存に失敗した場合は例外がそのまま伝播する"""
        mock_repository.save.side_effect = StoreException("PutItem failed")
        service = CreatePassengerService(
            repository=mock_repository, factory=PassengerFactory()
        )

        with pytest.raises(StoreException):
            service.create("Alice")


class TestDeletePassengerService:
    """DeletePassengerService のテスト"""

    def test_delete_returns_true(self, mock_repository):
        service = DeletePassengerService(repository=mock_repository)

        assert service.delete(PassengerId("p-1")) is True
        mock_repository.delete.assert_called_once_with(PassengerId("p-1"))


class TestGetPassengerService:
    """GetPassengerService のテスト"""

    def test_get_returns_passenger(self, mock_repository, create_passenger):
        passenger = create_passenger()
        mock_repository.find_by_id.return_value = passenger
        service = GetPassengerService(repository=mock_repository)

        assert service.get(passenger.id) is passenger

    def test_get_returns_none_when_not_found(self, mock_repository):
        mock_repository.find_by_id.return_value = None
        service = GetPassengerService(repository=mock_repository)

        assert service.get(PassengerId("missing")) is None


class TestListPassengersService:
    def test_list_returns_all(self, mock_repository, create_passenger):
        passengers = [
            create_passenger(passenger_id="p-1"),
            create_passenger(passenger_id="p-2"),
        ]
        mock_repository.find_all.return_value = passengers
        service = ListPassengersService(repository=mock_repository)

        assert service.list() == passengers
