from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from calisthenix.schemas.common import ApiModel, naive_utc


class JournalEntryCreate(ApiModel):
    date: Optional[datetime] = None
    energy_level: int = Field(ge=1, le=10)
    mood: int = Field(ge=1, le=10)
    notes: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, max_length=2048)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value):
        return naive_utc(value)


class JournalEntryUpdate(ApiModel):
    date: Optional[datetime] = None
    energy_level: Optional[int] = Field(default=None, ge=1, le=10)
    mood: Optional[int] = Field(default=None, ge=1, le=10)
    notes: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, max_length=2048)

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value):
        return naive_utc(value)


class JournalEntryResponse(ApiModel):
    id: int
    user_id: int
    date: datetime
    energy_level: int
    mood: int
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    created_at: Optional[datetime] = None
