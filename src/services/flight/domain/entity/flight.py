from services.flight.domain.value_object import FlightNumber
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import Entity


class Flight(Entity[FlightNumber]):
    """フライトエンティティ

    フライト自体は事前投入される。このサービスが変更するのは
    乗客IDのセットのみで、それも DynamoDB のセット更新で行う。
    """

    def __init__(
        self,
        id: FlightNumber,
        capacity: int,
        captain: str,
        plane: str,
        passenger_ids: frozenset[PassengerId] = frozenset(),
    ) -> None:
        super().__init__(id)
        self._capacity = capacity
        self._captain = captain
        self._plane = plane
        self._passenger_ids = passenger_ids

    @property
    def number(self) -> FlightNumber:
        return self._id

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def captain(self) -> str:
        return self._captain

    @property
    def plane(self) -> str:
        return self._plane

    @property
    def passenger_ids(self) -> frozenset[PassengerId]:
        return self._passenger_ids
