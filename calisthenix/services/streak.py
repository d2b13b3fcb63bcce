"""Incremental workout streak.

The streak is updated from the previous ``last_workout_date`` and the new
workout's date only; history is never rescanned. Days are calendar days,
so a workout at 23:50 followed by one at 00:10 is a consecutive-day streak.
"""
import logging
from datetime import date, datetime
from typing import NamedTuple, Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


class StreakUpdate(NamedTuple):
    streak: int
    last_workout_date: Optional[datetime]


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def calendar_days_between(earlier: DateLike, later: DateLike) -> int:
    return (_as_date(later) - _as_date(earlier)).days


def compute_streak(
        previous_streak: int,
        last_workout_date: Optional[datetime],
        workout_date: datetime,
) -> StreakUpdate:
    if last_workout_date is None:
        return StreakUpdate(1, workout_date)

    days = calendar_days_between(last_workout_date, workout_date)
    if days == 1:
        return StreakUpdate((previous_streak or 0) + 1, workout_date)
    if days > 1:
        return StreakUpdate(1, workout_date)
    if days == 0:
        # Extra session on the same day keeps the streak, the date moves forward
        return StreakUpdate(previous_streak or 0, max(last_workout_date, workout_date))

    # Back-dated workout: the newer date stays authoritative
    logger.debug(f"Back-dated workout {workout_date} before {last_workout_date}, streak unchanged")
    return StreakUpdate(previous_streak or 0, last_workout_date)
