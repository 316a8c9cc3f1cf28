from pydantic import BaseModel, Field


class BookingPathParameters(BaseModel):
    """/flights/{flight_number}/passengers/{passenger_id} のパスパラメータ"""

    flight_number: str = Field(
        ...,
        min_length=1,
        description="フライト番号（flights テーブルのキーそのまま）",
        examples=["BA100", "flight-1"],
    )

    passenger_id: str = Field(..., min_length=1, description="乗客ID")
