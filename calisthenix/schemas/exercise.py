from typing import List, Optional

from calisthenix.models.exercise_library import ExerciseCategoryEnum, DifficultyEnum
from calisthenix.schemas.common import ApiModel


class ExerciseSummary(ApiModel):
    id: int
    name: str
    slug: str
    category: ExerciseCategoryEnum
    difficulty: DifficultyEnum
    demo_image_url: Optional[str] = None


class ExerciseDetail(ExerciseSummary):
    short_description: Optional[str] = None
    long_description: Optional[str] = None
    muscles_primary: List[str] = []
    muscles_secondary: List[str] = []
    equipment: List[str] = []
    progressions: List[str] = []
    regressions: List[str] = []
    tips: List[str] = []
    demo_gif_url: Optional[str] = None
