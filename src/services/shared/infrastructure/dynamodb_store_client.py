from __future__ import annotations

from typing import Any, Callable

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from services.shared.domain.exception import (
    ItemNotFoundException,
    MarshalException,
    StoreException,
)
from services.shared.infrastructure.table import StringSetAttribute, TableDescriptor
from services.shared.utils.logger import get_logger

logger = get_logger("dynamodb-store-client")

Item = dict[str, Any]


class DynamoDBStoreClient:
    """DynamoDB のテーブル単位のプリミティブ操作を提供するアダプタ

    - boto3 の ServiceResource を1つだけ保持し、全リポジトリで共有する
    - boto3 / botocore の例外をドメイン例外に変換する
    - リトライは botocore の標準動作に任せる
    """

    def __init__(self, dynamodb: Any) -> None:
        self._dynamodb = dynamodb
        self._tables: dict[str, Any] = {}

    @classmethod
    def from_env(cls) -> DynamoDBStoreClient:
        """環境変数（AWS_REGION 等）から ServiceResource を生成する"""
        return cls(boto3.resource("dynamodb"))

    def put(self, table: TableDescriptor, item: Item) -> None:
        """アイテムを作成または置換する（上書きガードなし）"""
        self._call(table, "PutItem", lambda t: t.put_item(Item=item))

    def delete_by_key(self, table: TableDescriptor, key_value: str) -> None:
        """アイテムを削除する。存在しなくても成功とする"""
        self._call(
            table, "DeleteItem", lambda t: t.delete_item(Key=table.key(key_value))
        )

    def get_by_key(self, table: TableDescriptor, key_value: str) -> Item | None:
        """パーティションキーで1件取得する。存在しない場合は None"""
        response = self._call(
            table, "GetItem", lambda t: t.get_item(Key=table.key(key_value))
        )
        return response.get("Item")

    def scan_all(self, table: TableDescriptor) -> list[Item]:
        """テーブルを1回の Scan で全件取得する

        ページングは行わない。LastEvaluatedKey が返った場合は
        1ページ目のみを返し、警告ログを出す。
        """
        response = self._call(table, "Scan", lambda t: t.scan())
        items = response.get("Items", [])
        if "LastEvaluatedKey" in response:
            logger.warning(
                "Scan result truncated",
                extra={"table": table.name, "returned": len(items)},
            )
        return items

    def add_to_set(
        self, attribute: StringSetAttribute, key_value: str, member: str
    ) -> None:
        """文字列セットに要素を追加する（ADD、既存なら何もしない）"""
        self._update_set("ADD", attribute, key_value, member)

    def remove_from_set(
        self, attribute: StringSetAttribute, key_value: str, member: str
    ) -> None:
        """文字列セットから要素を削除する（DELETE、存在しなければ何もしない）"""
        self._update_set("DELETE", attribute, key_value, member)

    def _update_set(
        self,
        action: str,
        attribute: StringSetAttribute,
        key_value: str,
        member: str,
    ) -> None:
        table = attribute.table

        # 存在しないアイテムへの UpdateItem はキーだけのアイテムを作ってしまう
        def update(t: Any) -> Any:
            return t.update_item(
                Key=table.key(key_value),
                UpdateExpression=f"{action} #0 :0",
                ExpressionAttributeNames={"#0": attribute.name},
                ExpressionAttributeValues={":0": {member}},
                ConditionExpression=Attr(table.key_name).exists(),
            )

        try:
            self._call(table, "UpdateItem", update)
        except StoreException as e:
            if e.code == "ConditionalCheckFailedException":
                raise ItemNotFoundException(
                    f"Item not found: {table.name}.{table.key_name}={key_value}",
                    code=e.code,
                ) from e
            raise

    def _table(self, table: TableDescriptor) -> Any:
        if table.name not in self._tables:
            self._tables[table.name] = self._dynamodb.Table(table.name)
        return self._tables[table.name]

    def _call(
        self, table: TableDescriptor, operation: str, request: Callable[[Any], Any]
    ) -> Any:
        """リクエストを実行し、例外をドメイン例外に変換する"""
        try:
            return request(self._table(table))
        except TypeError as e:
            logger.error(
                "Failed to marshal request",
                extra={"table": table.name, "operation": operation, "error": str(e)},
            )
            raise MarshalException(
                f"Cannot marshal {operation} request for {table.name}: {e}"
            ) from e
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code != "ConditionalCheckFailedException":
                logger.error(
                    "DynamoDB call failed",
                    extra={"table": table.name, "operation": operation, "code": code},
                )
            raise StoreException(
                f"{operation} on {table.name} failed: {e}", code=code
            ) from e
        except BotoCoreError as e:
            logger.error(
                "DynamoDB call failed",
                extra={"table": table.name, "operation": operation, "error": str(e)},
            )
            raise StoreException(f"{operation} on {table.name} failed: {e}") from e
