import logging
from collections import Counter
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.models.personal_record import PersonalRecord
from calisthenix.models.user import User
from calisthenix.models.workout import Workout
from calisthenix.repositories.workout_repository import WorkoutRepository
from calisthenix.schemas.stats import DailyVolume, PersonalRecordHighlight, ProfileStats

logger = logging.getLogger(__name__)

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def format_active_time(minutes: int) -> str:
    hours, rest = divmod(max(minutes, 0), 60)
    return f"{hours}h {rest}m"


def favorite_name(names: List[str]) -> Optional[str]:
    """Most frequent workout name; ties go to the one seen first."""
    if not names:
        return None
    return Counter(names).most_common(1)[0][0]


class StatsService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.workouts = WorkoutRepository(db)

    async def profile_stats(self, user: User) -> ProfileStats:
        result = await self.db.execute(
            select(func.count(Workout.id), func.coalesce(func.sum(Workout.duration), 0))
            .where(Workout.user_id == user.id)
        )
        total_workouts, total_seconds = result.one()
        active_minutes = int(total_seconds or 0) // 60

        names_result = await self.db.execute(
            select(Workout.name).where(Workout.user_id == user.id).order_by(Workout.date.desc())
        )
        favorite = favorite_name(list(names_result.scalars().all()))

        record_result = await self.db.execute(
            select(PersonalRecord)
            .where(PersonalRecord.user_id == user.id)
            .order_by(PersonalRecord.achieved_at.desc(), PersonalRecord.id.desc())
            .limit(1)
        )
        record = record_result.scalar_one_or_none()

        return ProfileStats(
            total_workouts=total_workouts or 0,
            active_minutes=active_minutes,
            active_time=format_active_time(active_minutes),
            current_streak=user.streak or 0,
            favorite_workout=favorite,
            pr=PersonalRecordHighlight(exercise=record.exercise_name, value=record.value) if record else None,
        )

    async def weekly_volume(self, user: User, days: int = 7, today: Optional[datetime] = None) -> List[DailyVolume]:
        """Stored workout volume per calendar day, oldest day first, today included."""
        today = (today or datetime.utcnow()).replace(hour=0, minute=0, second=0, microsecond=0)
        start = today - timedelta(days=days - 1)
        end = today + timedelta(days=1)

        workouts = await self.workouts.list_between(user.id, start, end)
        buckets = {}
        for workout in workouts:
            key = workout.date.date()
            buckets[key] = buckets.get(key, 0) + (workout.total_volume or 0)

        series = []
        for offset in range(days):
            day = (start + timedelta(days=offset)).date()
            series.append(DailyVolume(
                date=day.isoformat(),
                day=DAY_NAMES[day.weekday()],
                volume=buckets.get(day, 0),
            ))
        logger.debug(f"Weekly volume for user {user.id}: {len(workouts)} workouts over {days} days")
        return series
