from __future__ import annotations

from pydantic import BaseModel

from services.passenger.domain.entity import Passenger


class PassengerData(BaseModel):
    """乗客データのレスポンスモデル"""

    id: str
    name: str

    @classmethod
    def from_entity(cls, passenger: Passenger) -> PassengerData:
        return cls(id=str(passenger.id), name=str(passenger.name))


class PassengerResponse(BaseModel):
    status: str = "success"
    data: PassengerData


class PassengerListResponse(BaseModel):
    status: str = "success"
    data: list[PassengerData]
    count: int


class DeletePassengerResponse(BaseModel):
    status: str = "success"
    deleted: bool


def to_response(passenger: Passenger) -> dict:
    """Passenger エンティティをレスポンス辞書に変換する"""
    return PassengerResponse(data=PassengerData.from_entity(passenger)).model_dump()


def to_list_response(passengers: list[Passenger]) -> dict:
    data = [PassengerData.from_entity(p) for p in passengers]
    return PassengerListResponse(data=data, count=len(data)).model_dump()
