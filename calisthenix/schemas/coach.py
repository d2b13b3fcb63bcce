import enum
from typing import List, Optional

from pydantic import Field, field_validator

from calisthenix.models.exercise_library import DifficultyEnum
from calisthenix.models.template import TemplateCategoryEnum
from calisthenix.schemas.common import ApiModel


class ChatRole(str, enum.Enum):
    user = "user"
    model = "model"


class ChatMessage(ApiModel):
    role: ChatRole
    content: str


class CoachChatRequest(ApiModel):
    message: str = Field(max_length=4000)
    history: List[ChatMessage] = []

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message is required")
        return value


class CoachChatResponse(ApiModel):
    reply: str
    suggested_follow_ups: List[str]


class CoachSuggestionsResponse(ApiModel):
    suggestions: List[str]


class GenerateTemplateRequest(ApiModel):
    goal: str = Field(min_length=1, max_length=1000)
    level: DifficultyEnum = DifficultyEnum.beginner
    focus_areas: List[str] = []
    name: Optional[str] = Field(default=None, max_length=200)


class GeneratedTemplateResponse(ApiModel):
    template_id: int
    template_name: str


# Shape the coach is asked to return when drafting a template

class GeneratedExercise(ApiModel):
    slug: str
    sets: int = Field(default=3, ge=1, le=10)
    reps: int = Field(default=10, ge=1, le=100)
    rest_seconds: int = Field(default=60, ge=0, le=600)
    notes: Optional[str] = None


class GeneratedTemplate(ApiModel):
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    difficulty: Optional[DifficultyEnum] = None
    category: Optional[TemplateCategoryEnum] = None
    exercises: List[GeneratedExercise] = Field(min_length=1)
