"""
Integration tests for /api/workout-templates/*.

Covered:
- GET list: seeded public templates plus own ones, isOwner / exerciseCount, filters
- GET detail: ordered exercises with library summaries, private foreign template -> 404
- POST / PUT / DELETE: validation, unknown exercise -> 400, owner-only mutation -> 403
- POST duplicate: "(Copy)" suffix, private, owned by the caller, same exercises, source unchanged
- DELETE removes the template exercise rows with the template
- POST start: workout materialized from defaults, template untouched, streak counted
"""

import pytest
from sqlalchemy import func, select

from calisthenix.models.template import WorkoutTemplateExercise

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def exercise_id(client, slug: str) -> int:
    response = await client.get(f"/api/exercises/{slug}")
    assert response.status_code == 200, response.text
    return response.json()["id"]


async def public_template(client, name: str = "Push Day Fundamentals") -> dict:
    templates = (await client.get("/api/workout-templates")).json()
    return next(t for t in templates if t["name"] == name)


async def create_template(client, **body) -> dict:
    payload = {
        "name": "My Pull Session",
        "description": "Two pull movements",
        "difficulty": "beginner",
        "category": "pull",
        "exercises": [
            {"exerciseId": await exercise_id(client, "ring-row"), "orderIndex": 2,
             "defaultSets": 3, "defaultReps": 12, "defaultRestSeconds": 60},
            {"exerciseId": await exercise_id(client, "chin-up"), "orderIndex": 1,
             "defaultSets": 4, "defaultReps": 5, "defaultRestSeconds": 120, "notes": "slow negatives"},
        ],
    }
    payload.update(body)
    response = await client.post("/api/workout-templates", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def template_exercise_rows(session_factory, template_id: int) -> int:
    async with session_factory() as session:
        result = await session.execute(
            select(func.count(WorkoutTemplateExercise.id))
            .where(WorkoutTemplateExercise.template_id == template_id)
        )
        return result.scalar_one()


def exercise_fields(exercise: dict) -> tuple:
    return (
        exercise["exerciseId"],
        exercise["orderIndex"],
        exercise["defaultSets"],
        exercise["defaultReps"],
        exercise["defaultRestSeconds"],
        exercise["notes"],
    )


# ---------------------------------------------------------------------------
# List / detail
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_contains_seeded_public_templates(db_client, seeded):
    response = await db_client.get("/api/workout-templates")

    assert response.status_code == 200
    templates = response.json()
    assert len(templates) == 7
    assert all(t["isPublic"] and not t["isOwner"] for t in templates)
    push = next(t for t in templates if t["name"] == "Push Day Fundamentals")
    assert push["exerciseCount"] == 4


@pytest.mark.asyncio
async def test_list_filters_by_difficulty_and_category(db_client):
    response = await db_client.get("/api/workout-templates", params={"difficulty": "beginner", "category": "push"})
    assert [t["name"] for t in response.json()] == ["Push Day Fundamentals"]


@pytest.mark.asyncio
async def test_list_includes_own_but_not_foreign_private(db_client, other_client):
    await create_template(db_client, name="Mine")
    await create_template(other_client, name="Theirs")

    names = {t["name"]: t for t in (await db_client.get("/api/workout-templates")).json()}

    assert "Mine" in names and names["Mine"]["isOwner"] is True
    assert names["Mine"]["exerciseCount"] == 2
    assert "Theirs" not in names


@pytest.mark.asyncio
async def test_detail_orders_exercises_with_library_summary(db_client):
    created = await create_template(db_client)

    response = await db_client.get(f"/api/workout-templates/{created['id']}")

    assert response.status_code == 200
    exercises = response.json()["exercises"]
    assert [e["exercise"]["slug"] for e in exercises] == ["chin-up", "ring-row"]
    assert exercises[0]["notes"] == "slow negatives"
    assert exercises[0]["exercise"]["category"] == "pull"


@pytest.mark.asyncio
async def test_foreign_private_template_is_not_found(db_client, other_client):
    theirs = await create_template(other_client, name="Secret")

    response = await db_client.get(f"/api/workout-templates/{theirs['id']}")

    assert response.status_code == 404
    assert (await db_client.put(f"/api/workout-templates/{theirs['id']}", json={"name": "x"})).status_code == 404


# ---------------------------------------------------------------------------
# Create / update / delete
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_template_returns_detail(db_client):
    created = await create_template(db_client)

    assert created["name"] == "My Pull Session"
    assert created["isPublic"] is False
    assert created["isOwner"] is True
    assert len(created["exercises"]) == 2


@pytest.mark.asyncio
async def test_create_template_unknown_exercise_returns_400(db_client):
    response = await db_client.post("/api/workout-templates", json={
        "name": "Broken",
        "exercises": [{"exerciseId": 99999, "orderIndex": 1}],
    })

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid exercise reference: 99999"}
    names = [t["name"] for t in (await db_client.get("/api/workout-templates")).json()]
    assert "Broken" not in names


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"name": "   "},
    {"name": "Bad level", "difficulty": "expert"},
    {"name": "Bad category", "category": "cardio"},
    {"name": "Zero sets", "exercises": [{"exerciseId": 1, "orderIndex": 0, "defaultSets": 0}]},
    {"name": "Negative rest", "exercises": [{"exerciseId": 1, "orderIndex": 0, "defaultRestSeconds": -1}]},
])
async def test_create_template_validation_returns_400(db_client, payload):
    response = await db_client.post("/api/workout-templates", json=payload)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_template_replaces_exercises(db_client):
    created = await create_template(db_client)
    squat = await exercise_id(db_client, "squat")

    response = await db_client.put(f"/api/workout-templates/{created['id']}", json={
        "name": "Leg Session",
        "difficulty": "intermediate",
        "category": "legs",
        "exercises": [{"exerciseId": squat, "orderIndex": 1, "defaultSets": 5, "defaultReps": 20}],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Leg Session"
    assert body["category"] == "legs"
    assert [e["exercise"]["slug"] for e in body["exercises"]] == ["squat"]


@pytest.mark.asyncio
async def test_update_public_template_returns_403(db_client):
    template = await public_template(db_client)

    response = await db_client.put(f"/api/workout-templates/{template['id']}", json={"name": "Hijacked"})

    assert response.status_code == 403
    assert (await db_client.delete(f"/api/workout-templates/{template['id']}")).status_code == 403


@pytest.mark.asyncio
async def test_delete_own_template(db_client, session_factory):
    created = await create_template(db_client)
    assert await template_exercise_rows(session_factory, created["id"]) == 2

    response = await db_client.delete(f"/api/workout-templates/{created['id']}")

    assert response.status_code == 204
    assert (await db_client.get(f"/api/workout-templates/{created['id']}")).status_code == 404
    assert await template_exercise_rows(session_factory, created["id"]) == 0


# ---------------------------------------------------------------------------
# Duplicate / start
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_duplicate_public_template(db_client):
    template = await public_template(db_client)
    original = (await db_client.get(f"/api/workout-templates/{template['id']}")).json()

    response = await db_client.post(f"/api/workout-templates/{template['id']}/duplicate")

    assert response.status_code == 201
    copy = response.json()
    assert copy["id"] != template["id"]
    assert copy["name"] == "Push Day Fundamentals (Copy)"
    assert copy["isPublic"] is False
    assert copy["isOwner"] is True
    assert [exercise_fields(e) for e in copy["exercises"]] == [exercise_fields(e) for e in original["exercises"]]

    source = (await db_client.get(f"/api/workout-templates/{template['id']}")).json()
    assert source == original


@pytest.mark.asyncio
async def test_start_template_materializes_workout(db_client):
    template = await public_template(db_client)
    detail = (await db_client.get(f"/api/workout-templates/{template['id']}")).json()

    response = await db_client.post(f"/api/workout-templates/{template['id']}/start")

    assert response.status_code == 201
    workout = response.json()
    assert workout["name"] == "Push Day Fundamentals"
    assert workout["status"] == "in_progress"
    assert len(workout["exercises"]) == len(detail["exercises"])
    for exercise, source in zip(workout["exercises"], detail["exercises"]):
        assert exercise["name"] == source["exercise"]["name"]
        assert len(exercise["sets"]) == source["defaultSets"]
        assert all(
            s == {"reps": source["defaultReps"], "weight": 0.0, "rpe": 7.0, "completed": False}
            for s in exercise["sets"]
        )

    after = (await db_client.get(f"/api/workout-templates/{template['id']}")).json()
    assert after == detail
    assert (await db_client.get("/api/users/me")).json()["streak"] == 1


@pytest.mark.asyncio
async def test_start_template_without_defaults_falls_back(db_client):
    created = await create_template(db_client, exercises=[
        {"exerciseId": await exercise_id(db_client, "plank"), "orderIndex": 0},
    ])

    workout = (await db_client.post(f"/api/workout-templates/{created['id']}/start")).json()

    sets = workout["exercises"][0]["sets"]
    assert len(sets) == 3
    assert all(s["reps"] == 10 for s in sets)
