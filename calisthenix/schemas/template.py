from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from calisthenix.models.exercise_library import DifficultyEnum
from calisthenix.models.template import TemplateCategoryEnum
from calisthenix.schemas.common import ApiModel
from calisthenix.schemas.exercise import ExerciseSummary


class TemplateExerciseInput(ApiModel):
    exercise_id: int
    order_index: int = Field(ge=0)
    default_sets: Optional[int] = Field(default=None, ge=1, le=20)
    default_reps: Optional[int] = Field(default=None, ge=1, le=1000)
    default_rest_seconds: Optional[int] = Field(default=None, ge=0, le=3600)
    notes: Optional[str] = None


class TemplateCreate(ApiModel):
    name: str = Field(max_length=200)
    description: Optional[str] = None
    difficulty: Optional[DifficultyEnum] = None
    category: Optional[TemplateCategoryEnum] = None
    exercises: List[TemplateExerciseInput] = []

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value


class TemplateUpdate(TemplateCreate):
    pass


class TemplateExerciseResponse(ApiModel):
    id: int
    exercise_id: int
    order_index: int
    default_sets: Optional[int] = None
    default_reps: Optional[int] = None
    default_rest_seconds: Optional[int] = None
    notes: Optional[str] = None
    exercise: Optional[ExerciseSummary] = None


class TemplateListItem(ApiModel):
    id: int
    name: str
    description: Optional[str] = None
    difficulty: Optional[DifficultyEnum] = None
    category: Optional[TemplateCategoryEnum] = None
    created_at: Optional[datetime] = None
    is_public: bool = False
    is_owner: bool = False
    exercise_count: int = 0


class TemplateDetail(ApiModel):
    id: int
    name: str
    description: Optional[str] = None
    difficulty: Optional[DifficultyEnum] = None
    category: Optional[TemplateCategoryEnum] = None
    created_at: Optional[datetime] = None
    is_public: bool = False
    is_owner: bool = False
    exercises: List[TemplateExerciseResponse] = []
