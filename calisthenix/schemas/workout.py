from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from calisthenix.models.workout import WorkoutStatusEnum
from calisthenix.schemas.common import ApiModel, naive_utc


class WorkoutSet(ApiModel):
    reps: int = Field(ge=0, strict=True)
    weight: Optional[float] = Field(default=None, ge=0)
    rpe: Optional[float] = Field(default=None, ge=1, le=10)
    completed: bool = False


class WorkoutExerciseCreate(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    sets: List[WorkoutSet] = []
    order: int = Field(default=0, ge=0)


class WorkoutExerciseUpdate(ApiModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    sets: Optional[List[WorkoutSet]] = None
    order: Optional[int] = Field(default=None, ge=0)


class WorkoutExerciseResponse(ApiModel):
    id: int
    workout_id: int
    name: str
    sets: List[WorkoutSet]
    order: int


class WorkoutCreate(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    notes: Optional[str] = None
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value):
        return naive_utc(value)


class WorkoutUpdate(ApiModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    notes: Optional[str] = None
    duration_seconds: Optional[int] = Field(default=None, ge=0)
    total_volume: Optional[int] = Field(default=None, ge=0)
    status: Optional[WorkoutStatusEnum] = None


class WorkoutResponse(ApiModel):
    id: int
    user_id: int
    name: str
    date: datetime
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    duration_seconds: Optional[int] = Field(default=None, validation_alias="duration")
    total_volume: int = 0
    status: WorkoutStatusEnum
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class WorkoutDetailResponse(WorkoutResponse):
    exercises: List[WorkoutExerciseResponse] = []
