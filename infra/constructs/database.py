from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct


class Database(Construct):
    """DynamoDB Construct

    - flights: パーティションキー number（乗客IDは文字列セット passengers に保持）
    - passengers: パーティションキー id
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.flights_table = self._create_table("FlightsTable", "flights", "number")
        self.passengers_table = self._create_table(
            "PassengersTable", "passengers", "id"
        )

    def _create_table(
        self, id: str, table_name: str, partition_key: str
    ) -> dynamodb.Table:
        return dynamodb.Table(
            self,
            id,
            table_name=table_name,
            partition_key=dynamodb.Attribute(
                name=partition_key, type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )
