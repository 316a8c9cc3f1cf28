import copy
import os
from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

# handler モジュールは import 時に boto3 リソースを生成するためリージョンが必要
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "flight-booking-test")

from services.flight.infrastructure import DynamoDBFlightRepository  # noqa: E402
from services.passenger.domain.entity import Passenger  # noqa: E402
from services.passenger.domain.value_object import (  # noqa: E402
    PassengerId,
    PassengerName,
)
from services.passenger.infrastructure import (  # noqa: E402
    DynamoDBPassengerRepository,
)
from services.shared.infrastructure import DynamoDBStoreClient  # noqa: E402


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_passenger():
    """Passenger を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        passenger_id: str = "3f1c2a9e-5b7d-4e0a-9c1b-2d8e6f4a7b3c",
        name: str = "Alice",
    ) -> Passenger:
        return Passenger(id=PassengerId(value=passenger_id), name=PassengerName(name))

    return _factory


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    """Powertools Logger が参照する LambdaContext の代替"""
    return FakeLambdaContext()


class FakeTable:
    """DynamoDB Table リソースのインメモリ実装

    set 更新は attribute_exists 条件付きの ADD / DELETE のみを解釈する。
    """

    def __init__(self, key_name: str) -> None:
        self.key_name = key_name
        self.items: dict[str, dict] = {}

    def put_item(self, Item: dict) -> dict:
        self.items[Item[self.key_name]] = copy.deepcopy(Item)
        return {}

    def get_item(self, Key: dict) -> dict:
        item = self.items.get(Key[self.key_name])
        if item is None:
            return {}
        return {"Item": copy.deepcopy(item)}

    def delete_item(self, Key: dict) -> dict:
        self.items.pop(Key[self.key_name], None)
        return {}

    def scan(self) -> dict:
        return {"Items": [copy.deepcopy(item) for item in self.items.values()]}

    def update_item(
        self,
        Key: dict,
        UpdateExpression: str,
        ExpressionAttributeNames: dict,
        ExpressionAttributeValues: dict,
        ConditionExpression: object = None,
    ) -> dict:
        item = self.items.get(Key[self.key_name])
        if item is None:
            raise ClientError(
                {
                    "Error": {
                        "Code": "ConditionalCheckFailedException",
                        "Message": "The conditional request failed",
                    }
                },
                "UpdateItem",
            )

        action = UpdateExpression.split()[0]
        attribute = ExpressionAttributeNames["#0"]
        values = ExpressionAttributeValues[":0"]

        current = set(item.get(attribute, set()))
        current = current | values if action == "ADD" else current - values

        # DynamoDB は空のセットを保持できない
        if current:
            item[attribute] = current
        else:
            item.pop(attribute, None)
        return {}


class FakeDynamoDB:
    """boto3.resource("dynamodb") の代替"""

    def __init__(self) -> None:
        self.tables = {
            "flights": FakeTable(key_name="number"),
            "passengers": FakeTable(key_name="id"),
        }

    def Table(self, name: str) -> FakeTable:
        return self.tables[name]


@pytest.fixture
def fake_dynamodb():
    """BA100 と NH001 が投入済みのインメモリ DynamoDB"""
    dynamodb = FakeDynamoDB()
    dynamodb.tables["flights"].put_item(
        Item={
            "number": "BA100",
            "capacity": Decimal("180"),
            "captain": "Jane Smith",
            "plane": "A320",
        }
    )
    dynamodb.tables["flights"].put_item(
        Item={
            "number": "NH001",
            "capacity": Decimal("250"),
            "captain": "Taro Yamada",
            "plane": "B787",
        }
    )
    return dynamodb


@pytest.fixture
def store(fake_dynamodb):
    return DynamoDBStoreClient(fake_dynamodb)


@pytest.fixture
def passenger_repository(store):
    return DynamoDBPassengerRepository(store)


@pytest.fixture
def flight_repository(store):
    return DynamoDBFlightRepository(store)
