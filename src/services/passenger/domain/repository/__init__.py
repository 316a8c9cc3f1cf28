from .passenger_repository import PassengerRepository as PassengerRepository
