from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.passenger.applications.list_passengers import ListPassengersService
from services.passenger.handlers.response_models import to_list_response
from services.passenger.infrastructure import DynamoDBPassengerRepository
from services.shared.domain import DomainException
from services.shared.infrastructure import DynamoDBStoreClient
from services.shared.utils import api_response, error_response

logger = Logger()

store = DynamoDBStoreClient.from_env()
repository = DynamoDBPassengerRepository(store)
service = ListPassengersService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客一覧取得 Lambda Handler (GET /passengers)"""

    logger.info("Listing all passengers")

    try:
        passengers = service.list()
    except DomainException:
        logger.exception("Failed to list passengers")
        return error_response(500, "Internal server error")

    return api_response(200, to_list_response(passengers))
