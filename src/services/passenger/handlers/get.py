from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.passenger.applications.get_passenger import GetPassengerService
from services.passenger.domain.value_object import PassengerId
from services.passenger.handlers.request_models import PassengerPathParameters
from services.passenger.handlers.response_models import to_response
from services.passenger.infrastructure import DynamoDBPassengerRepository
from services.shared.domain import DomainException
from services.shared.infrastructure import DynamoDBStoreClient
from services.shared.utils import api_response, error_response

logger = Logger()

store = DynamoDBStoreClient.from_env()
repository = DynamoDBPassengerRepository(store)
service = GetPassengerService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客取得 Lambda Handler (GET /passengers/{passenger_id})"""

    try:
        params = PassengerPathParameters.model_validate(event.path_parameters or {})
    except ValidationError:
        return error_response(400, "passenger_id is required")

    logger.info("Fetching passenger", extra={"passenger_id": params.passenger_id})

    try:
        passenger = service.get(PassengerId(value=params.passenger_id))
    except DomainException:
        logger.exception("Failed to fetch passenger")
        return error_response(500, "Internal server error")

    if passenger is None:
        return error_response(404, f"Passenger not found: {params.passenger_id}")

    return api_response(200, to_response(passenger))
