from .passenger import Passenger as Passenger
