from pydantic import BaseModel, Field, field_validator


class CreatePassengerRequest(BaseModel):
    """乗客登録リクエストスキーマ"""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="乗客名",
        examples=["Alice"],
    )

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, v: str) -> str:
        """空白のみの名前を拒否する"""
        if not v.strip():
            raise ValueError("name cannot be blank")
        return v

    model_config = {"json_schema_extra": {"examples": [{"name": "Alice"}]}}


class PassengerPathParameters(BaseModel):
    """/passengers/{passenger_id} のパスパラメータ"""

    passenger_id: str = Field(..., min_length=1)
