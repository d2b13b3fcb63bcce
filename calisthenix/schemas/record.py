from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from calisthenix.schemas.common import ApiModel, naive_utc


class PersonalRecordCreate(ApiModel):
    exercise_name: str = Field(min_length=1, max_length=200)
    value: str = Field(min_length=1, max_length=100)
    achieved_at: Optional[datetime] = None

    @field_validator("achieved_at")
    @classmethod
    def normalize_achieved_at(cls, value):
        return naive_utc(value)


class PersonalRecordResponse(ApiModel):
    id: int
    user_id: int
    exercise_name: str
    value: str
    achieved_at: datetime
