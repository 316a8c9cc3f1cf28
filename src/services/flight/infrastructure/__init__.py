from .dynamodb_flight_repository import (
    DynamoDBFlightRepository as DynamoDBFlightRepository,
)
