from aws_cdk import Stack
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# Powertools 公式レイヤー（pydantic を同梱）
POWERTOOLS_LAYER_ARN = (
    "arn:aws:lambda:{region}:017000801446:layer:"
    "AWSLambdaPowertoolsPythonV3-python313-x86_64:7"
)


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        flights_table: dynamodb.Table,
        passengers_table: dynamodb.Table,
    ) -> None:
        super().__init__(scope, id)

        self._environment = {
            "FLIGHTS_TABLE_NAME": flights_table.table_name,
            "PASSENGERS_TABLE_NAME": passengers_table.table_name,
        }
        self._powertools_layer = _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            POWERTOOLS_LAYER_ARN.format(region=Stack.of(self).region),
        )

        self.create_passenger = self._create_function(
            "CreatePassengerLambda",
            "services.passenger.handlers.create.lambda_handler",
            "passenger-service",
        )
        self.get_passenger = self._create_function(
            "GetPassengerLambda",
            "services.passenger.handlers.get.lambda_handler",
            "passenger-service",
        )
        self.delete_passenger = self._create_function(
            "DeletePassengerLambda",
            "services.passenger.handlers.delete.lambda_handler",
            "passenger-service",
        )
        self.list_passengers = self._create_function(
            "ListPassengersLambda",
            "services.passenger.handlers.list_passengers.lambda_handler",
            "passenger-service",
        )

        passengers_table.grant_read_write_data(self.create_passenger)
        passengers_table.grant_read_write_data(self.delete_passenger)
        passengers_table.grant_read_data(self.get_passenger)
        passengers_table.grant_read_data(self.list_passengers)

        self.book_flight = self._create_function(
            "BookFlightLambda",
            "services.flight.handlers.book.lambda_handler",
            "flight-service",
        )
        self.cancel_booking = self._create_function(
            "CancelBookingLambda",
            "services.flight.handlers.cancel.lambda_handler",
            "flight-service",
        )
        self.list_flights = self._create_function(
            "ListFlightsLambda",
            "services.flight.handlers.list_flights.lambda_handler",
            "flight-service",
        )

        flights_table.grant_read_write_data(self.book_flight)
        flights_table.grant_read_write_data(self.cancel_booking)
        flights_table.grant_read_data(self.list_flights)
        passengers_table.grant_read_data(self.list_flights)

    def _create_function(
        self, id: str, handler: str, service_name: str
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._powertools_layer],
            environment={
                **self._environment,
                "POWERTOOLS_SERVICE_NAME": service_name,
            },
        )
