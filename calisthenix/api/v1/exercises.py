from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.db import get_db
from calisthenix.core.dependencies import get_current_user
from calisthenix.core.exceptions import ValidationFailed, NotFound
from calisthenix.models.exercise_library import ExerciseCategoryEnum, DifficultyEnum
from calisthenix.models.user import User
from calisthenix.repositories.exercise_repository import ExerciseRepository
from calisthenix.schemas.exercise import ExerciseSummary, ExerciseDetail

router = APIRouter(prefix="/exercises", tags=["exercises"])

ALL = "all"


def parse_filter(value: Optional[str], enum_cls, field: str) -> Optional[str]:
    """'all' and empty values mean no filter."""
    if not value or value.lower() == ALL:
        return None
    try:
        return enum_cls(value.lower()).value
    except ValueError:
        raise ValidationFailed(f"{field}: unknown value '{value}'")


@router.get("", response_model=List[ExerciseSummary])
async def list_exercises(
        q: Optional[str] = Query(None, max_length=100),
        category: Optional[str] = Query(None),
        difficulty: Optional[str] = Query(None),
        limit: int = Query(50, ge=1, le=200),
        offset: int = Query(0, ge=0),
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    return await ExerciseRepository(db).search(
        q=q,
        category=parse_filter(category, ExerciseCategoryEnum, "category"),
        difficulty=parse_filter(difficulty, DifficultyEnum, "difficulty"),
        limit=limit,
        offset=offset,
    )


@router.get("/{slug}", response_model=ExerciseDetail)
async def get_exercise(
        slug: str,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    entry = await ExerciseRepository(db).get_by_slug(slug)
    if entry is None:
        raise NotFound("Exercise not found")
    return entry
