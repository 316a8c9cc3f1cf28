from .dynamodb_passenger_repository import (
    DynamoDBPassengerRepository as DynamoDBPassengerRepository,
)
