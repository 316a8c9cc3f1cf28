from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.passenger.applications.create_passenger import CreatePassengerService
from services.passenger.domain.factory import PassengerFactory
from services.passenger.handlers.request_models import CreatePassengerRequest
from services.passenger.handlers.response_models import to_response
from services.passenger.infrastructure import DynamoDBPassengerRepository
from services.shared.domain import DomainException
from services.shared.infrastructure import DynamoDBStoreClient
from services.shared.utils import api_response, error_response

logger = Logger()

store = DynamoDBStoreClient.from_env()
repository = DynamoDBPassengerRepository(store)
service = CreatePassengerService(repository=repository, factory=PassengerFactory())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客登録 Lambda Handler (POST /passengers)"""

    logger.info("Received create passenger request")

    try:
        request = CreatePassengerRequest.model_validate(event.json_body or {})
    except ValueError as e:
        logger.warning("Invalid create passenger request", extra={"error": str(e)})
        return error_response(400, "Invalid request body")

    try:
        passenger = service.create(request.name)
    except DomainException:
        logger.exception("Failed to create passenger")
        return error_response(500, "Internal server error")

    logger.info("Passenger created", extra={"passenger_id": str(passenger.id)})
    return api_response(201, to_response(passenger))
