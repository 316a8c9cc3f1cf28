from .entity import Flight as Flight
from .read_model import FlightWithPassengers as FlightWithPassengers
from .repository import FlightRepository as FlightRepository
from .value_object import FlightNumber as FlightNumber
