from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.passenger.applications.delete_passenger import DeletePassengerService
from services.passenger.domain.value_object import PassengerId
from services.passenger.handlers.request_models import PassengerPathParameters
from services.passenger.handlers.response_models import DeletePassengerResponse
from services.passenger.infrastructure import DynamoDBPassengerRepository
from services.shared.domain import DomainException
from services.shared.infrastructure import DynamoDBStoreClient
from services.shared.utils import api_response, error_response

logger = Logger()

store = DynamoDBStoreClient.from_env()
repository = DynamoDBPassengerRepository(store)
service = DeletePassengerService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗客削除 Lambda Handler (DELETE /passengers/{passenger_id})

    存在しない乗客の削除も成功として扱う。
    """

    try:
        params = PassengerPathParameters.model_validate(event.path_parameters or {})
    except ValidationError:
        return error_response(400, "passenger_id is required")

    logger.info("Deleting passenger", extra={"passenger_id": params.passenger_id})

    try:
        deleted = service.delete(PassengerId(value=params.passenger_id))
    except DomainException:
        logger.exception("Failed to delete passenger")
        return error_response(500, "Internal server error")

    return api_response(200, DeletePassengerResponse(deleted=deleted).model_dump())
