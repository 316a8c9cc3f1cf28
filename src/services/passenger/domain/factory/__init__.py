from .passenger_factory import PassengerFactory as PassengerFactory
