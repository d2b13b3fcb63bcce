"""Volume accounting for workout sets.

Only completed sets count. A set contributes ``reps * weight``; bodyweight sets
(weight missing or zero) count as ``reps * 1`` so that calisthenics work still
shows up in the totals.
"""
from typing import Any, Iterable, Mapping, Union

SetLike = Union[Mapping[str, Any], Any]


def _field(item: SetLike, name: str, default=None):
    if isinstance(item, Mapping):
        return item.get(name, default)
    return getattr(item, name, default)


def set_volume(workout_set: SetLike) -> float:
    if not _field(workout_set, "completed", False):
        return 0
    reps = _field(workout_set, "reps", 0) or 0
    weight = _field(workout_set, "weight")
    return reps * (weight if weight else 1)


def exercise_volume(sets: Iterable[SetLike]) -> float:
    return sum(set_volume(s) for s in sets or [])


def total_volume(exercises: Iterable[Any]) -> int:
    """Sum completed-set volume over exercises (ORM rows, schemas or dicts with ``sets``)."""
    total = sum(exercise_volume(_field(exercise, "sets", [])) for exercise in exercises)
    return int(round(total))
