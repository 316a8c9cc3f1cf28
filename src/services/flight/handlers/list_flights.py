from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.list_flights import ListFlightsService
from services.flight.handlers.response_models import to_list_response
from services.flight.infrastructure import DynamoDBFlightRepository
from services.passenger.infrastructure import DynamoDBPassengerRepository
from services.shared.domain import DomainException
from services.shared.infrastructure import DynamoDBStoreClient
from services.shared.utils import api_response, error_response

logger = Logger()

# フライトと乗客のリポジトリで同じ接続を共有する
store = DynamoDBStoreClient.from_env()
service = ListFlightsService(
    flight_repository=DynamoDBFlightRepository(store),
    passenger_repository=DynamoDBPassengerRepository(store),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト一覧取得 Lambda Handler (GET /flights)"""

    logger.info("Listing all flights")

    try:
        flights = service.list()
    except DomainException:
        logger.exception("Failed to list flights")
        return error_response(500, "Internal server error")

    return api_response(200, to_list_response(flights))
