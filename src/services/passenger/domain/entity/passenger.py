from services.passenger.domain.value_object import PassengerId, PassengerName
from services.shared.domain import Entity


class Passenger(Entity[PassengerId]):
    """乗客エンティティ

    更新操作は持たない（削除と再作成のみ）。
    """

    def __init__(self, id: PassengerId, name: PassengerName) -> None:
        super().__init__(id)
        self._name = name

    @property
    def name(self) -> PassengerName:
        return self._name
