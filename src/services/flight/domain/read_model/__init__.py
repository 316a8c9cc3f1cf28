from .flight_with_passengers import FlightWithPassengers as FlightWithPassengers
