from __future__ import annotations

from pydantic import BaseModel

from services.flight.domain.read_model import FlightWithPassengers
from services.passenger.handlers.response_models import PassengerData


class FlightData(BaseModel):
    """乗客を展開したフライトのレスポンスモデル"""

    number: str
    capacity: int
    captain: str
    plane: str
    passengers: list[PassengerData]

    @classmethod
    def from_read_model(cls, view: FlightWithPassengers) -> FlightData:
        flight = view.flight
        return cls(
            number=str(flight.number),
            capacity=flight.capacity,
            captain=flight.captain,
            plane=flight.plane,
            passengers=[PassengerData.from_entity(p) for p in view.passengers],
        )


class FlightListResponse(BaseModel):
    status: str = "success"
    data: list[FlightData]
    count: int


class BookingData(BaseModel):
    """予約・キャンセル結果のレスポンスモデル"""

    flight_number: str
    passenger_id: str


class BookingResponse(BaseModel):
    status: str = "success"
    data: BookingData


def to_list_response(flights: list[FlightWithPassengers]) -> dict:
    data = [FlightData.from_read_model(f) for f in flights]
    return FlightListResponse(data=data, count=len(data)).model_dump()


def to_booking_response(flight_number: str, passenger_id: str) -> dict:
    return BookingResponse(
        data=BookingData(flight_number=flight_number, passenger_id=passenger_id)
    ).model_dump()
