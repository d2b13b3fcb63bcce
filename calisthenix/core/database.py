import logging

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.base import Base
from calisthenix.core.config import settings
from calisthenix.core.db import engine, AsyncSessionLocal, safe_database_url
from calisthenix.core.initial_exercises import INITIAL_EXERCISES, INITIAL_TEMPLATES

# Every model has to be imported before create_all
from calisthenix.models import (
    ExerciseLibraryEntry,
    WorkoutTemplate,
    WorkoutTemplateExercise,
)

logger = logging.getLogger(__name__)


async def init_database():
    """Create tables, optionally dropping them first, then seed the catalog."""
    logger.info(f"Using database {safe_database_url()}")
    async with engine.begin() as conn:
        if settings.RESET_DATABASE:
            logger.warning("RESET_DATABASE=true, dropping all tables")
            await conn.run_sync(Base.metadata.drop_all)

        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created/verified")

    if settings.SEED_DATABASE:
        async with AsyncSessionLocal() as session:
            await seed_catalog(session)


async def seed_catalog(db: AsyncSession) -> int:
    """Load the exercise library and the public system templates into an empty database.

    Returns the number of library entries inserted (0 when already seeded).
    """
    result = await db.execute(select(func.count()).select_from(ExerciseLibraryEntry))
    existing = result.scalar_one()
    if existing > 0:
        logger.info(f"Exercise library already holds {existing} entries, skipping seed")
        return 0

    slug_to_entry = {}
    for data in INITIAL_EXERCISES:
        entry = ExerciseLibraryEntry(
            name=data["name"],
            slug=data["slug"],
            category=data["category"],
            difficulty=data["difficulty"],
            short_description=data.get("short_description"),
            long_description=data.get("long_description"),
            muscles_primary=data.get("muscles_primary", []),
            muscles_secondary=data.get("muscles_secondary", []),
            equipment=data.get("equipment", []),
            progressions=data.get("progressions", []),
            regressions=data.get("regressions", []),
            tips=data.get("tips", []),
            demo_image_url=data.get("demo_image_url"),
            demo_gif_url=data.get("demo_gif_url"),
        )
        db.add(entry)
        slug_to_entry[entry.slug] = entry
    await db.flush()

    for template_data in INITIAL_TEMPLATES:
        template = WorkoutTemplate(
            user_id=None,
            name=template_data["name"],
            description=template_data["description"],
            difficulty=template_data["difficulty"],
            category=template_data["category"],
            is_public=True,
        )
        db.add(template)
        await db.flush()

        for index, ex in enumerate(template_data["exercises"], start=1):
            db.add(WorkoutTemplateExercise(
                template_id=template.id,
                exercise_id=slug_to_entry[ex["slug"]].id,
                order_index=index,
                default_sets=ex["sets"],
                default_reps=ex["reps"],
                default_rest_seconds=ex["rest"],
                notes=ex["notes"],
            ))

    await db.commit()
    logger.info(f"Seeded {len(INITIAL_EXERCISES)} exercises and {len(INITIAL_TEMPLATES)} system templates")
    return len(INITIAL_EXERCISES)
