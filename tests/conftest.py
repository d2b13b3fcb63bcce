"""
Shared fixtures for the Calisthenix test suite.

Strategy:
- The test FastAPI application is built without lifespan events (no Postgres, no seeding on startup).
- Integration tests run against an in-memory SQLite database (aiosqlite + StaticPool),
  tables created from the models and the exercise catalog seeded per test.
- get_db is overridden with sessions of the test database; the auth strategy is overridden
  with StaticIdentityStrategy for the fixture user, so the real get_current_user path runs.
- DB-less endpoint tests override get_db with mock_db and get_current_user with the user fixture.
- The LLM client is replaced with FakeLLM, which records the messages it was sent.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI
from datetime import datetime
from typing import AsyncGenerator, List

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from calisthenix.api.router import api_router
from calisthenix.core.auth import BearerTokenStrategy, StaticIdentityStrategy
from calisthenix.core.base import Base
from calisthenix.core.database import seed_catalog
from calisthenix.core.db import build_engine, build_session_factory, get_db
from calisthenix.core.dependencies import get_auth_strategy, get_current_user
from calisthenix.core.exceptions import register_exception_handlers
from calisthenix.models.user import User
from calisthenix.services.llm_client import get_llm_client

TEST_SECRET = "test-secret"
TEST_ALGORITHM = "HS256"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def create_test_app() -> FastAPI:
    """Test FastAPI application without lifespan events."""
    test_app = FastAPI(title="Calisthenix Test App")
    register_exception_handlers(test_app)
    test_app.include_router(api_router, prefix="/api")
    return test_app


class FakeLLM:
    """Stands in for LLMClient: returns canned replies in order and keeps every request."""

    def __init__(self, replies: List[str] = None, configured: bool = True):
        self.replies = list(replies or ["Keep your core tight and progress slowly."])
        self.configured = configured
        self.calls = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate(self, messages):
        self.calls.append(messages)
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]


def make_client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest.fixture
async def engine():
    test_engine = build_engine("sqlite+aiosqlite://")
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker:
    return build_session_factory(engine)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded(session_factory) -> int:
    """Exercise library and system templates loaded; returns the number of library entries."""
    async with session_factory() as session:
        return await seed_catalog(session)


async def insert_user(session_factory, **fields) -> User:
    async with session_factory() as session:
        user = User(**fields)
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

@pytest.fixture
async def db_user(session_factory) -> User:
    """Regular user stored in the test database."""
    return await insert_user(session_factory, email="athlete@example.com", display_name="Athlete")


@pytest.fixture
async def other_user(session_factory) -> User:
    """A second user, for ownership checks."""
    return await insert_user(session_factory, email="rival@example.com", display_name="Rival")


@pytest.fixture
def user_fixture() -> User:
    """Detached user for DB-less endpoint tests."""
    return User(
        id=1,
        email="test@example.com",
        display_name="Tester",
        current_level=1,
        level_progress=10,
        streak=0,
        created_at=datetime.utcnow(),
        updated_at=datetime.utcnow(),
    )


# ---------------------------------------------------------------------------
# Dependency fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def mock_db() -> MagicMock:
    """
    Mocked DB session for endpoints that reach get_db directly.
    execute() returns a MagicMock with the usual result methods preset.
    """
    session = AsyncMock()
    default_result = MagicMock()
    default_result.scalar_one_or_none.return_value = None
    default_result.scalar_one.return_value = 0
    default_result.scalars.return_value.all.return_value = []
    session.execute.return_value = default_result
    session.add = MagicMock()
    return session


@pytest.fixture
def app_factory(session_factory, fake_llm):
    """Build a test app bound to the in-memory database and the fake LLM."""

    def build(strategy) -> FastAPI:
        app = create_test_app()

        async def override_get_db():
            async with session_factory() as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_auth_strategy] = lambda: strategy
        app.dependency_overrides[get_llm_client] = lambda: fake_llm
        return app

    return build


# ---------------------------------------------------------------------------
# HTTP clients
# ---------------------------------------------------------------------------

@pytest.fixture
async def db_client(app_factory, db_user, seeded) -> AsyncGenerator[AsyncClient, None]:
    """Client acting as db_user through the static identity strategy."""
    app = app_factory(StaticIdentityStrategy(db_user.email, db_user.display_name))
    async with make_client(app) as ac:
        yield ac


@pytest.fixture
async def other_client(app_factory, other_user, seeded) -> AsyncGenerator[AsyncClient, None]:
    """Client acting as other_user, sharing the database with db_client."""
    app = app_factory(StaticIdentityStrategy(other_user.email, other_user.display_name))
    async with make_client(app) as ac:
        yield ac


@pytest.fixture
def token_strategy() -> BearerTokenStrategy:
    return BearerTokenStrategy(TEST_SECRET, TEST_ALGORITHM)


@pytest.fixture
async def token_client(app_factory, token_strategy, seeded) -> AsyncGenerator[AsyncClient, None]:
    """Client behind the bearer-token strategy; sends no Authorization header by itself."""
    app = app_factory(token_strategy)
    async with make_client(app) as ac:
        yield ac


@pytest.fixture
async def user_client(user_fixture, mock_db) -> AsyncGenerator[AsyncClient, None]:
    """
    DB-less client authenticated as user_fixture.
    get_current_user -> user_fixture, get_db -> mock_db.
    """
    app = create_test_app()
    app.dependency_overrides[get_current_user] = lambda: user_fixture
    app.dependency_overrides[get_db] = lambda: mock_db
    async with make_client(app) as ac:
        yield ac
