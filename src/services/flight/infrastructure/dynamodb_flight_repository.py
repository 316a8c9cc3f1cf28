from decimal import Decimal

from services.flight.domain.entity import Flight
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightNumber
from services.passenger.domain.value_object import PassengerId
from services.shared.domain.exception import UnmarshalException
from services.shared.infrastructure import (
    DynamoDBStoreClient,
    StringSetAttribute,
    TableDescriptor,
)

FLIGHTS_TABLE = TableDescriptor.from_env(
    "FLIGHTS_TABLE_NAME", default="flights", key_name="number"
)


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装"""

    def __init__(
        self,
        store: DynamoDBStoreClient,
        table: TableDescriptor = FLIGHTS_TABLE,
    ) -> None:
        self._store = store
        self._table = table
        self._passengers = StringSetAttribute(table=table, name="passengers")

    def find_all(self) -> list[Flight]:
        """全フライトを取得する"""
        return [self._to_entity(item) for item in self._store.scan_all(self._table)]

    def add_passenger(
        self, flight_number: FlightNumber, passenger_id: PassengerId
    ) -> None:
        self._store.add_to_set(
            self._passengers, str(flight_number), str(passenger_id)
        )

    def remove_passenger(
        self, flight_number: FlightNumber, passenger_id: PassengerId
    ) -> None:
        self._store.remove_from_set(
            self._passengers, str(flight_number), str(passenger_id)
        )

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する

        キー以外の属性が無い場合はゼロ値（0, ""）とする。
        空の文字列セットは保存できないため、passengers 属性が無い場合は空セットとみなす。
        """
        try:
            return Flight(
                id=FlightNumber(value=item["number"]),
                capacity=_to_int(item.get("capacity", 0)),
                captain=_to_str(item.get("captain", "")),
                plane=_to_str(item.get("plane", "")),
                passenger_ids=frozenset(
                    PassengerId(value=value) for value in item.get("passengers", ())
                ),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise UnmarshalException(f"Cannot unmarshal flight item: {e}") from e


def _to_int(value: object) -> int:
    # Number 型は Decimal で返る
    if isinstance(value, bool) or not isinstance(value, (int, Decimal)):
        raise TypeError(f"Expected a number, got {type(value).__name__}")
    return int(value)


def _to_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {type(value).__name__}")
    return value
