import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from calisthenix.core.config import settings

logger = logging.getLogger(__name__)


def async_database_url(url: str) -> str:
    """Plain postgres URLs are switched to the asyncpg driver, async URLs pass through."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    return url


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Engine for Postgres (pooled, pre-pinged) or SQLite via aiosqlite.

    In-memory SQLite keeps a single shared connection, otherwise every
    checkout would see an empty database.
    """
    url = async_database_url(url)
    if not url.startswith("sqlite"):
        return create_async_engine(url, echo=echo, pool_pre_ping=True)

    options = {"connect_args": {"check_same_thread": False}}
    database = make_url(url).database
    if not database or database == ":memory:":
        options["poolclass"] = StaticPool
    return create_async_engine(url, echo=echo, **options)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=bind, class_=AsyncSession, autoflush=False, expire_on_commit=False)


DATABASE_URL = async_database_url(settings.DATABASE_URL)
engine = build_engine(DATABASE_URL, echo=settings.DATABASE_ECHO)
AsyncSessionLocal = build_session_factory(engine)


def safe_database_url() -> str:
    return make_url(DATABASE_URL).render_as_string(hide_password=True)


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session
