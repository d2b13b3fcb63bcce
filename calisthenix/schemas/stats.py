from typing import Optional

from calisthenix.schemas.common import ApiModel


class PersonalRecordHighlight(ApiModel):
    exercise: str
    value: str


class ProfileStats(ApiModel):
    total_workouts: int
    active_minutes: int
    active_time: str
    current_streak: int
    favorite_workout: Optional[str] = None
    pr: Optional[PersonalRecordHighlight] = None


class DailyVolume(ApiModel):
    date: str
    day: str
    volume: int
