from .entity import Passenger as Passenger
from .factory import PassengerFactory as PassengerFactory
from .repository import PassengerRepository as PassengerRepository
from .value_object import PassengerId as PassengerId
from .value_object import PassengerName as PassengerName
