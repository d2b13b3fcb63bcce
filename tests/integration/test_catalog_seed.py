"""
Integration tests for database bootstrap.

Covered:
- seed_catalog: loads the exercise library and the public system templates once
- async_database_url: driver rewrite for plain postgres URLs
- build_engine: single shared connection for in-memory SQLite only
- /health on the application factory
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import func, select
from sqlalchemy.pool import StaticPool

from calisthenix.core.database import seed_catalog
from calisthenix.core.db import async_database_url, build_engine
from calisthenix.core.initial_exercises import INITIAL_EXERCISES, INITIAL_TEMPLATES
from calisthenix.main import create_app
from calisthenix.models.template import WorkoutTemplate, WorkoutTemplateExercise

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_seed_catalog_runs_once(db_session):
    assert await seed_catalog(db_session) == len(INITIAL_EXERCISES)
    assert await seed_catalog(db_session) == 0

    templates = (await db_session.execute(select(WorkoutTemplate))).scalars().all()
    assert len(templates) == len(INITIAL_TEMPLATES)
    assert all(t.is_public and t.user_id is None for t in templates)

    rows = (await db_session.execute(select(func.count(WorkoutTemplateExercise.id)))).scalar_one()
    assert rows == sum(len(t["exercises"]) for t in INITIAL_TEMPLATES)


def test_seed_templates_reference_known_slugs():
    slugs = {e["slug"] for e in INITIAL_EXERCISES}
    assert len(slugs) == len(INITIAL_EXERCISES)
    for template in INITIAL_TEMPLATES:
        assert {ex["slug"] for ex in template["exercises"]} <= slugs


@pytest.mark.parametrize("url, expected", [
    ("postgresql://u:p@db:5432/app", "postgresql+asyncpg://u:p@db:5432/app"),
    ("postgres://u:p@db/app", "postgresql+asyncpg://u:p@db/app"),
    ("sqlite+aiosqlite:///./calisthenix.db", "sqlite+aiosqlite:///./calisthenix.db"),
])
def test_async_database_url(url, expected):
    assert async_database_url(url) == expected


@pytest.mark.asyncio
async def test_build_engine_shares_one_connection_for_in_memory_sqlite():
    engine = build_engine("sqlite+aiosqlite://")
    assert isinstance(engine.sync_engine.pool, StaticPool)
    await engine.dispose()


@pytest.mark.asyncio
async def test_build_engine_file_sqlite_and_postgres_use_regular_pools():
    file_engine = build_engine("sqlite+aiosqlite:///./calisthenix.db")
    pg_engine = build_engine("postgresql://u:p@db:5432/app")

    assert not isinstance(file_engine.sync_engine.pool, StaticPool)
    assert pg_engine.url.drivername == "postgresql+asyncpg"

    await file_engine.dispose()
    await pg_engine.dispose()


@pytest.mark.asyncio
async def test_health_endpoint():
    app = create_app(use_lifespan=False)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
