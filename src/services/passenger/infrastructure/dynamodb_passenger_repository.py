from services.passenger.domain.entity import Passenger
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import PassengerId, PassengerName
from services.shared.domain.exception import UnmarshalException
from services.shared.infrastructure import DynamoDBStoreClient, TableDescriptor

PASSENGERS_TABLE = TableDescriptor.from_env(
    "PASSENGERS_TABLE_NAME", default="passengers", key_name="id"
)


class DynamoDBPassengerRepository(PassengerRepository):
    """DynamoDBを使用したPassengerRepository の具象実装"""

    def __init__(
        self,
        store: DynamoDBStoreClient,
        table: TableDescriptor = PASSENGERS_TABLE,
    ) -> None:
        self._store = store
        self._table = table

    def save(self, passenger: Passenger) -> None:
        """乗客をDBに保存する"""
        self._store.put(self._table, self._to_item(passenger))

    def find_by_id(self, passenger_id: PassengerId) -> Passenger | None:
        """乗客IDで検索"""
        item = self._store.get_by_key(self._table, str(passenger_id))
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Passenger]:
        """全乗客を取得する（順序は DynamoDB の返却順）"""
        return [self._to_entity(item) for item in self._store.scan_all(self._table)]

    def delete(self, passenger_id: PassengerId) -> None:
        """乗客を削除する"""
        self._store.delete_by_key(self._table, str(passenger_id))

    def _to_item(self, passenger: Passenger) -> dict:
        return {
            "id": str(passenger.id),
            "name": str(passenger.name),
        }

    def _to_entity(self, item: dict) -> Passenger:
        """DynamoDB アイテムをドメインエンティティに変換する（name が無ければ空文字）"""
        try:
            return Passenger(
                id=PassengerId(value=item["id"]),
                name=PassengerName(value=item.get("name", "")),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise UnmarshalException(f"Cannot unmarshal passenger item: {e}") from e
