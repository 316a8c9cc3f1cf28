from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.flight.applications.cancel_booking import CancelBookingService
from services.flight.domain.value_object import FlightNumber
from services.flight.handlers.request_models import BookingPathParameters
from services.flight.handlers.response_models import to_booking_response
from services.flight.infrastructure import DynamoDBFlightRepository
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import DomainException, ItemNotFoundException
from services.shared.infrastructure import DynamoDBStoreClient
from services.shared.utils import api_response, error_response

logger = Logger()

store = DynamoDBStoreClient.from_env()
repository = DynamoDBFlightRepository(store)
service = CancelBookingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト予約キャンセル Lambda Handler

    DELETE /flights/{flight_number}/passengers/{passenger_id}
    """

    try:
        params = BookingPathParameters.model_validate(event.path_parameters or {})
    except ValidationError as e:
        logger.warning("Invalid cancel booking request", extra={"error": str(e)})
        return error_response(400, "Invalid flight_number or passenger_id")

    logger.info(
        "Cancelling booking",
        extra={
            "flight_number": params.flight_number,
            "passenger_id": params.passenger_id,
        },
    )

    try:
        service.cancel(
            FlightNumber(value=params.flight_number),
            PassengerId(value=params.passenger_id),
        )
    except ItemNotFoundException:
        return error_response(404, f"Flight not found: {params.flight_number}")
    except DomainException:
        logger.exception("Failed to cancel booking")
        return error_response(500, "Internal server error")

    return api_response(
        200, to_booking_response(params.flight_number, params.passenger_id)
    )
