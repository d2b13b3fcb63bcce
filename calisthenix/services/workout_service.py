import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.models.user import User
from calisthenix.models.workout import Workout, WorkoutStatusEnum
from calisthenix.repositories.user_repository import UserRepository
from calisthenix.repositories.workout_repository import WorkoutRepository
from calisthenix.schemas.workout import WorkoutCreate, WorkoutUpdate
from calisthenix.services.streak import compute_streak
from calisthenix.services.volume import total_volume

logger = logging.getLogger(__name__)


class WorkoutService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.workouts = WorkoutRepository(db)
        self.users = UserRepository(db)

    async def create_workout(self, user: User, data: WorkoutCreate) -> Workout:
        workout = await self.workouts.create(
            user_id=user.id,
            name=data.name,
            notes=data.notes,
            date=data.date,
        )
        # Separate commit: the workout stays even if the streak write fails
        await self.record_streak(user.id, workout.date)
        return workout

    async def record_streak(self, user_id: int, workout_date: datetime) -> Optional[User]:
        user = await self.users.get_by_id(user_id)
        if user is None:
            return None
        update = compute_streak(user.streak, user.last_workout_date, workout_date)
        logger.info(f"User {user_id} streak {user.streak} -> {update.streak}")
        await self.users.update_streak(user, update.streak, update.last_workout_date)
        return user

    async def update_workout(self, workout: Workout, data: WorkoutUpdate) -> Workout:
        updates = data.model_dump(exclude_unset=True)

        if "name" in updates and updates["name"] is not None:
            workout.name = updates["name"]
        if "notes" in updates:
            workout.notes = updates["notes"]
        if updates.get("duration_seconds") is not None:
            workout.duration = updates["duration_seconds"]

        finishing = (
            updates.get("status") == WorkoutStatusEnum.completed
            and workout.status != WorkoutStatusEnum.completed
        )
        if finishing:
            await self.finish(workout)
            declared = updates.get("total_volume")
            if declared is not None and declared != workout.total_volume:
                logger.debug(
                    f"Workout {workout.id} declared volume {declared} replaced by computed {workout.total_volume}"
                )
        elif updates.get("status") is not None:
            workout.status = updates["status"]
            if workout.status == WorkoutStatusEnum.in_progress:
                workout.completed_at = None
        if not finishing and updates.get("total_volume") is not None \
                and workout.status == WorkoutStatusEnum.in_progress:
            workout.total_volume = updates["total_volume"]

        return await self.workouts.save(workout)

    async def finish(self, workout: Workout) -> None:
        """Stamp completion and store volume computed from the persisted sets."""
        exercises = await self.workouts.list_exercises(workout.id)
        workout.total_volume = total_volume(exercises)
        workout.status = WorkoutStatusEnum.completed
        workout.completed_at = datetime.utcnow()
        logger.info(
            f"Workout {workout.id} finished: volume={workout.total_volume} duration={workout.duration}s"
        )

    async def sync_volume(self, workout: Workout) -> Workout:
        """Keep the stored total of a finished workout in line after its sets were edited."""
        if workout.status != WorkoutStatusEnum.completed:
            return workout
        exercises = await self.workouts.list_exercises(workout.id)
        workout.total_volume = total_volume(exercises)
        return await self.workouts.save(workout)
