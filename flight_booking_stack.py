from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions


class FlightBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")

        fns = Functions(
            self,
            "Functions",
            flights_table=database.flights_table,
            passengers_table=database.passengers_table,
        )

        api = Api(self, "Api", functions=fns)

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
