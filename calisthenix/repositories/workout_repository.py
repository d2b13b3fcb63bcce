from datetime import datetime
from typing import Dict, List, Optional, Sequence

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.exceptions import NotAuthorized, NotFound
from calisthenix.models.workout import Workout, WorkoutExercise, WorkoutStatusEnum


class WorkoutRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ---------------------------------------------------------------------------
    # Workouts
    # ---------------------------------------------------------------------------

    async def get(self, workout_id: int) -> Optional[Workout]:
        result = await self.db.execute(select(Workout).where(Workout.id == workout_id))
        return result.scalar_one_or_none()

    async def get_owned(self, workout_id: int, user_id: int) -> Workout:
        """Load a workout for mutation: 404 when missing, 403 when someone else's."""
        workout = await self.get(workout_id)
        if workout is None:
            raise NotFound("Workout not found")
        if workout.user_id != user_id:
            raise NotAuthorized()
        return workout

    async def list_for_user(self, user_id: int, limit: int = 50) -> List[Workout]:
        result = await self.db.execute(
            select(Workout)
            .where(Workout.user_id == user_id)
            .order_by(Workout.date.desc(), Workout.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def list_between(self, user_id: int, start: datetime, end: datetime) -> List[Workout]:
        result = await self.db.execute(
            select(Workout)
            .where(
                Workout.user_id == user_id,
                Workout.date >= start,
                Workout.date < end,
            )
            .order_by(Workout.date.asc())
        )
        return list(result.scalars().all())

    async def count_for_user(self, user_id: int) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Workout).where(Workout.user_id == user_id)
        )
        return result.scalar_one()

    async def create(
            self,
            user_id: int,
            name: str,
            notes: Optional[str] = None,
            date: Optional[datetime] = None,
    ) -> Workout:
        now = datetime.utcnow()
        workout = Workout(
            user_id=user_id,
            name=name,
            notes=notes,
            date=date or now,
            started_at=now,
            status=WorkoutStatusEnum.in_progress,
            total_volume=0,
        )
        self.db.add(workout)
        await self.db.commit()
        await self.db.refresh(workout)
        return workout

    async def save(self, workout: Workout) -> Workout:
        await self.db.commit()
        await self.db.refresh(workout)
        return workout

    async def delete(self, workout: Workout) -> None:
        workout_id = workout.id
        await self.db.execute(delete(WorkoutExercise).where(WorkoutExercise.workout_id == workout_id))
        await self.db.execute(delete(Workout).where(Workout.id == workout_id))
        await self.db.commit()

    # ---------------------------------------------------------------------------
    # Exercises inside a workout
    # ---------------------------------------------------------------------------

    async def list_exercises(self, workout_id: int) -> List[WorkoutExercise]:
        result = await self.db.execute(
            select(WorkoutExercise)
            .where(WorkoutExercise.workout_id == workout_id)
            .order_by(WorkoutExercise.order.asc(), WorkoutExercise.id.asc())
        )
        return list(result.scalars().all())

    async def list_exercises_for(self, workout_ids: Sequence[int]) -> Dict[int, List[WorkoutExercise]]:
        grouped: Dict[int, List[WorkoutExercise]] = {workout_id: [] for workout_id in workout_ids}
        if not workout_ids:
            return grouped
        result = await self.db.execute(
            select(WorkoutExercise)
            .where(WorkoutExercise.workout_id.in_(list(workout_ids)))
            .order_by(WorkoutExercise.workout_id, WorkoutExercise.order, WorkoutExercise.id)
        )
        for exercise in result.scalars().all():
            grouped.setdefault(exercise.workout_id, []).append(exercise)
        return grouped

    async def get_exercise(self, workout_id: int, exercise_id: int) -> WorkoutExercise:
        result = await self.db.execute(
            select(WorkoutExercise).where(
                WorkoutExercise.id == exercise_id,
                WorkoutExercise.workout_id == workout_id,
            )
        )
        exercise = result.scalar_one_or_none()
        if exercise is None:
            raise NotFound("Exercise not found")
        return exercise

    async def add_exercise(self, workout_id: int, name: str, sets: List[dict], order: int = 0,
                           commit: bool = True) -> WorkoutExercise:
        exercise = WorkoutExercise(workout_id=workout_id, name=name, sets=sets, order=order)
        self.db.add(exercise)
        if commit:
            await self.db.commit()
            await self.db.refresh(exercise)
        else:
            await self.db.flush()
        return exercise

    async def update_exercise(self, exercise: WorkoutExercise, updates: dict) -> WorkoutExercise:
        for field, value in updates.items():
            setattr(exercise, field, value)
        await self.db.commit()
        await self.db.refresh(exercise)
        return exercise

    async def delete_exercise(self, exercise: WorkoutExercise) -> None:
        await self.db.execute(delete(WorkoutExercise).where(WorkoutExercise.id == exercise.id))
        await self.db.commit()
