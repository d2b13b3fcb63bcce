"""
Unit tests for workout volume accounting.

Covered:
- set_volume: completed sets only, bodyweight sets count as reps * 1
- exercise_volume / total_volume over dicts, schemas and ORM rows
- total_volume rounds fractional weights to an integer
"""

import pytest

from calisthenix.models.workout import WorkoutExercise
from calisthenix.schemas.workout import WorkoutExerciseCreate, WorkoutSet
from calisthenix.services.volume import exercise_volume, set_volume, total_volume

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# set_volume
# ---------------------------------------------------------------------------

def test_set_volume_completed_weighted_set():
    assert set_volume({"reps": 10, "weight": 20, "completed": True}) == 200


def test_set_volume_ignores_incomplete_set():
    assert set_volume({"reps": 8, "weight": 20, "completed": False}) == 0


def test_set_volume_missing_completed_flag_counts_as_incomplete():
    assert set_volume({"reps": 8, "weight": 20}) == 0


@pytest.mark.parametrize("weight", [None, 0])
def test_set_volume_bodyweight_set_counts_reps(weight):
    """No added load: each rep counts once."""
    assert set_volume({"reps": 12, "weight": weight, "completed": True}) == 12


def test_set_volume_accepts_schema_objects():
    assert set_volume(WorkoutSet(reps=5, weight=10.0, completed=True)) == 50


# ---------------------------------------------------------------------------
# exercise_volume / total_volume
# ---------------------------------------------------------------------------

def test_exercise_volume_only_completed_sets():
    sets = [
        {"reps": 10, "weight": 20, "completed": True},
        {"reps": 8, "weight": 20, "completed": False},
    ]
    assert exercise_volume(sets) == 200


def test_exercise_volume_empty():
    assert exercise_volume([]) == 0
    assert exercise_volume(None) == 0


def test_total_volume_over_orm_rows():
    exercises = [
        WorkoutExercise(name="Pull-up", sets=[{"reps": 10, "weight": 20, "completed": True}], order=0),
        WorkoutExercise(name="Push-up", sets=[{"reps": 15, "weight": None, "completed": True}], order=1),
    ]
    assert total_volume(exercises) == 215


def test_total_volume_over_request_schemas():
    exercise = WorkoutExerciseCreate(name="Dip", sets=[WorkoutSet(reps=6, weight=12.5, completed=True)])
    assert total_volume([exercise]) == 75


def test_total_volume_rounds_to_int():
    exercises = [{"sets": [{"reps": 3, "weight": 2.5, "completed": True}]}]
    result = total_volume(exercises)
    assert result == 8
    assert isinstance(result, int)


def test_total_volume_no_exercises_is_zero():
    assert total_volume([]) == 0
