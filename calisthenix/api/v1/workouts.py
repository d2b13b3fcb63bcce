import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.db import get_db
from calisthenix.core.dependencies import get_current_user
from calisthenix.models.user import User
from calisthenix.models.workout import Workout, WorkoutExercise
from calisthenix.repositories.workout_repository import WorkoutRepository
from calisthenix.schemas.workout import (
    WorkoutCreate,
    WorkoutUpdate,
    WorkoutResponse,
    WorkoutDetailResponse,
    WorkoutExerciseCreate,
    WorkoutExerciseUpdate,
    WorkoutExerciseResponse,
)
from calisthenix.services.workout_service import WorkoutService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


# ==========================
# HELPERS
# ==========================

def workout_detail(workout: Workout, exercises: List[WorkoutExercise]) -> WorkoutDetailResponse:
    """Exercises are passed in explicitly so the ORM relationship is never lazy-loaded."""
    base = WorkoutResponse.model_validate(workout)
    return WorkoutDetailResponse(
        **base.model_dump(),
        exercises=[WorkoutExerciseResponse.model_validate(e) for e in exercises],
    )


# ==========================
# WORKOUTS
# ==========================

@router.get("", response_model=List[WorkoutResponse])
async def list_workouts(
        limit: int = Query(50, ge=1, le=200),
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    """Workouts of the current user, newest first"""
    return await WorkoutRepository(db).list_for_user(current_user.id, limit=limit)


@router.get("/{workout_id}", response_model=WorkoutDetailResponse)
async def get_workout(
        workout_id: int,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    repo = WorkoutRepository(db)
    workout = await repo.get_owned(workout_id, current_user.id)
    return workout_detail(workout, await repo.list_exercises(workout.id))


@router.post("", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED)
async def create_workout(
        data: WorkoutCreate,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    workout = await WorkoutService(db).create_workout(current_user, data)
    logger.info(f"User {current_user.id} started workout {workout.id}")
    return workout


@router.patch("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
        workout_id: int,
        data: WorkoutUpdate,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    service = WorkoutService(db)
    workout = await service.workouts.get_owned(workout_id, current_user.id)
    return await service.update_workout(workout, data)


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(
        workout_id: int,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    repo = WorkoutRepository(db)
    workout = await repo.get_owned(workout_id, current_user.id)
    await repo.delete(workout)
    logger.info(f"User {current_user.id} deleted workout {workout_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==========================
# EXERCISES INSIDE A WORKOUT
# ==========================

@router.post(
    "/{workout_id}/exercises",
    response_model=WorkoutExerciseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_exercise(
        workout_id: int,
        data: WorkoutExerciseCreate,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    service = WorkoutService(db)
    workout = await service.workouts.get_owned(workout_id, current_user.id)
    exercise = await service.workouts.add_exercise(
        workout_id=workout.id,
        name=data.name,
        sets=[s.model_dump() for s in data.sets],
        order=data.order,
    )
    await service.sync_volume(workout)
    return exercise


@router.put("/{workout_id}/exercises/{exercise_id}", response_model=WorkoutExerciseResponse)
async def update_exercise(
        workout_id: int,
        exercise_id: int,
        data: WorkoutExerciseUpdate,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    service = WorkoutService(db)
    workout = await service.workouts.get_owned(workout_id, current_user.id)
    exercise = await service.workouts.get_exercise(workout.id, exercise_id)

    updates = {}
    if data.name is not None:
        updates["name"] = data.name
    if data.sets is not None:
        updates["sets"] = [s.model_dump() for s in data.sets]
    if data.order is not None:
        updates["order"] = data.order

    exercise = await service.workouts.update_exercise(exercise, updates)
    await service.sync_volume(workout)
    return exercise


@router.delete("/{workout_id}/exercises/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exercise(
        workout_id: int,
        exercise_id: int,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    service = WorkoutService(db)
    workout = await service.workouts.get_owned(workout_id, current_user.id)
    exercise = await service.workouts.get_exercise(workout.id, exercise_id)
    await service.workouts.delete_exercise(exercise)
    await service.sync_volume(workout)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
