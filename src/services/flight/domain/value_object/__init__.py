from .flight_number import FlightNumber as FlightNumber
