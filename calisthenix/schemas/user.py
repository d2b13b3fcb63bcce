from datetime import datetime
from typing import Optional

from pydantic import Field

from calisthenix.schemas.common import ApiModel


class UserRead(ApiModel):
    id: int
    email: Optional[str] = None
    display_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    current_level: int = 0
    level_progress: int = 0
    streak: int = 0
    weight: Optional[int] = None
    last_workout_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserMeResponse(UserRead):
    workout_count: int = 0


class UserProfileUpdate(ApiModel):
    display_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    weight: Optional[int] = Field(default=None, gt=0, lt=500)
    current_level: Optional[int] = Field(default=None, ge=0, le=4)
    level_progress: Optional[int] = Field(default=None, ge=0, le=100)
