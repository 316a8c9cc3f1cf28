from aws_cdk import aws_apigateway as apigw
from constructs import Construct

from infra.constructs.functions import Functions


class Api(Construct):
    """API Gateway Construct"""

    def __init__(self, scope: Construct, id: str, functions: Functions) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "FlightBookingRestApi",
            rest_api_name="Flight Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        # /passengers
        passengers = self.rest_api.root.add_resource("passengers")
        passengers.add_method(
            "POST", apigw.LambdaIntegration(functions.create_passenger)
        )
        passengers.add_method("GET", apigw.LambdaIntegration(functions.list_passengers))

        # /passengers/{passenger_id}
        passenger = passengers.add_resource("{passenger_id}")
        passenger.add_method("GET", apigw.LambdaIntegration(functions.get_passenger))
        passenger.add_method(
            "DELETE", apigw.LambdaIntegration(functions.delete_passenger)
        )

        # /flights
        flights = self.rest_api.root.add_resource("flights")
        flights.add_method("GET", apigw.LambdaIntegration(functions.list_flights))

        # /flights/{flight_number}/passengers/{passenger_id}
        booking = (
            flights.add_resource("{flight_number}")
            .add_resource("passengers")
            .add_resource("{passenger_id}")
        )
        booking.add_method("PUT", apigw.LambdaIntegration(functions.book_flight))
        booking.add_method("DELETE", apigw.LambdaIntegration(functions.cancel_booking))
