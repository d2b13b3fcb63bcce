"""
Unit tests for small service helpers.

Covered:
- materialize_sets: template defaults to set dicts, fallbacks when defaults are missing
- is_visible: public or owned templates only
- format_active_time / favorite_name used by the profile stats
- format_validation_errors: field paths without the body/query prefix
"""

import pytest

from calisthenix.core.exceptions import format_validation_errors
from calisthenix.models.template import WorkoutTemplate
from calisthenix.services.stats_service import favorite_name, format_active_time
from calisthenix.services.template_service import is_visible, materialize_sets

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

def test_materialize_sets_from_defaults():
    sets = materialize_sets(2, 12)
    assert sets == [
        {"reps": 12, "weight": 0, "rpe": 7, "completed": False},
        {"reps": 12, "weight": 0, "rpe": 7, "completed": False},
    ]
    sets[0]["reps"] = 1
    assert sets[1]["reps"] == 12


def test_materialize_sets_fallbacks():
    sets = materialize_sets(None, None)
    assert len(sets) == 3
    assert all(s["reps"] == 10 for s in sets)


@pytest.mark.parametrize("owner_id, is_public, expected", [
    (1, False, True),
    (2, False, False),
    (2, True, True),
    (None, True, True),
])
def test_is_visible(owner_id, is_public, expected):
    template = WorkoutTemplate(user_id=owner_id, name="T", is_public=is_public)
    assert is_visible(template, 1) is expected


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("minutes, expected", [(0, "0h 0m"), (59, "0h 59m"), (61, "1h 1m"), (600, "10h 0m")])
def test_format_active_time(minutes, expected):
    assert format_active_time(minutes) == expected


def test_favorite_name():
    assert favorite_name([]) is None
    assert favorite_name(["Pull", "Push", "Push"]) == "Push"
    assert favorite_name(["Legs", "Core"]) == "Legs"


# ---------------------------------------------------------------------------
# Validation messages
# ---------------------------------------------------------------------------

def test_format_validation_errors():
    errors = [
        {"loc": ("body", "sets", 0, "reps"), "msg": "Input should be a valid integer"},
        {"loc": ("query", "days"), "msg": "Input should be greater than or equal to 1"},
    ]
    assert format_validation_errors(errors) == (
        "sets.0.reps: Input should be a valid integer; days: Input should be greater than or equal to 1"
    )


def test_format_validation_errors_without_location():
    assert format_validation_errors([{"loc": ("body",), "msg": "Field required"}]) == "request: Field required"
    assert format_validation_errors([]) == "Invalid request"
