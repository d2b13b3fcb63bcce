"""
Integration tests for the user profile and stats endpoints.

Covered:
- GET /auth/user, /users/me (workoutCount), /user/profile
- PATCH /user/profile: partial update and range validation
- GET /stats/profile: totals, active time, favorite workout, latest PR
- GET /stats/weekly-volume: one row per calendar day, volumes bucketed by date
"""

import pytest
from datetime import datetime, timedelta

from calisthenix.services.stats_service import DAY_NAMES

pytestmark = pytest.mark.integration


async def finished_workout(client, name: str, date: datetime, duration: int, reps: int = 10) -> dict:
    workout = (await client.post("/api/workouts", json={"name": name, "date": date.isoformat()})).json()
    await client.post(f"/api/workouts/{workout['id']}/exercises", json={
        "name": "Push-up", "sets": [{"reps": reps, "completed": True}],
    })
    response = await client.patch(
        f"/api/workouts/{workout['id']}",
        json={"status": "completed", "durationSeconds": duration},
    )
    return response.json()


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_auth_user_returns_current_identity(db_client, db_user):
    response = await db_client.get("/api/auth/user")

    assert response.status_code == 200
    assert response.json()["id"] == db_user.id
    assert response.json()["email"] == "athlete@example.com"


@pytest.mark.asyncio
async def test_users_me_counts_workouts(db_client):
    await db_client.post("/api/workouts", json={"name": "A"})
    await db_client.post("/api/workouts", json={"name": "B"})

    body = (await db_client.get("/api/users/me")).json()

    assert body["workoutCount"] == 2
    assert body["displayName"] == "Athlete"


@pytest.mark.asyncio
async def test_patch_profile(db_client):
    response = await db_client.patch("/api/user/profile", json={
        "displayName": "  Bar Athlete ", "weight": 72, "currentLevel": 2, "levelProgress": 40,
    })

    assert response.status_code == 200
    body = response.json()
    assert body["displayName"] == "Bar Athlete"
    assert body["weight"] == 72
    assert body["currentLevel"] == 2
    assert body["levelProgress"] == 40

    assert (await db_client.get("/api/user/profile")).json()["weight"] == 72


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"currentLevel": 5}, {"levelProgress": 101}, {"weight": 0}])
async def test_patch_profile_validation(db_client, payload):
    response = await db_client.patch("/api/user/profile", json=payload)
    assert response.status_code == 400


# ---------------------------------------------------------------------------
# Stats
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_profile_stats_empty(db_client):
    body = (await db_client.get("/api/stats/profile")).json()

    assert body == {
        "totalWorkouts": 0,
        "activeMinutes": 0,
        "activeTime": "0h 0m",
        "currentStreak": 0,
        "favoriteWorkout": None,
        "pr": None,
    }


@pytest.mark.asyncio
async def test_profile_stats_aggregates(db_client):
    now = datetime.utcnow()
    await finished_workout(db_client, "Push", now - timedelta(days=2), duration=3600)
    await finished_workout(db_client, "Pull", now - timedelta(days=1), duration=1800)
    await finished_workout(db_client, "Push", now, duration=600)
    await db_client.post("/api/records", json={
        "exerciseName": "Pull-up", "value": "10 reps", "achievedAt": (now - timedelta(days=5)).isoformat(),
    })
    await db_client.post("/api/records", json={"exerciseName": "Muscle-up", "value": "1 rep"})

    body = (await db_client.get("/api/stats/profile")).json()

    assert body["totalWorkouts"] == 3
    assert body["activeMinutes"] == 100
    assert body["activeTime"] == "1h 40m"
    assert body["currentStreak"] == 3
    assert body["favoriteWorkout"] == "Push"
    assert body["pr"] == {"exercise": "Muscle-up", "value": "1 rep"}


@pytest.mark.asyncio
async def test_weekly_volume_buckets_by_day(db_client):
    today = datetime.utcnow().replace(hour=12, minute=0, second=0, microsecond=0)
    await finished_workout(db_client, "Today 1", today, duration=60, reps=10)
    await finished_workout(db_client, "Today 2", today, duration=60, reps=5)
    await finished_workout(db_client, "Three days ago", today - timedelta(days=3), duration=60, reps=20)
    await finished_workout(db_client, "Too old", today - timedelta(days=10), duration=60, reps=50)

    response = await db_client.get("/api/stats/weekly-volume")

    assert response.status_code == 200
    series = response.json()
    assert len(series) == 7
    assert series[-1]["date"] == today.date().isoformat()
    assert series[-1]["day"] == DAY_NAMES[today.weekday()]
    assert series[-1]["volume"] == 15
    assert series[-4]["volume"] == 20
    assert sum(row["volume"] for row in series) == 35


@pytest.mark.asyncio
@pytest.mark.parametrize("days", [0, 32])
async def test_weekly_volume_days_out_of_range(db_client, days):
    response = await db_client.get("/api/stats/weekly-volume", params={"days": days})
    assert response.status_code == 400
