from typing import Dict, Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.models.exercise_library import ExerciseLibraryEntry


class ExerciseRepository:
    """Read-only access to the seeded exercise library."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def search(
            self,
            q: Optional[str] = None,
            category: Optional[str] = None,
            difficulty: Optional[str] = None,
            limit: int = 50,
            offset: int = 0,
    ) -> List[ExerciseLibraryEntry]:
        query = select(ExerciseLibraryEntry)
        if q:
            query = query.where(ExerciseLibraryEntry.name.ilike(f"%{q.strip()}%"))
        if category:
            query = query.where(ExerciseLibraryEntry.category == category)
        if difficulty:
            query = query.where(ExerciseLibraryEntry.difficulty == difficulty)
        query = query.order_by(ExerciseLibraryEntry.name.asc()).offset(offset).limit(limit)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_by_slug(self, slug: str) -> Optional[ExerciseLibraryEntry]:
        result = await self.db.execute(
            select(ExerciseLibraryEntry).where(ExerciseLibraryEntry.slug == slug)
        )
        return result.scalar_one_or_none()

    async def get_many(self, ids: Iterable[int]) -> Dict[int, ExerciseLibraryEntry]:
        ids = list(set(ids))
        if not ids:
            return {}
        result = await self.db.execute(
            select(ExerciseLibraryEntry).where(ExerciseLibraryEntry.id.in_(ids))
        )
        return {entry.id: entry for entry in result.scalars().all()}

    async def list_all(self) -> List[ExerciseLibraryEntry]:
        result = await self.db.execute(select(ExerciseLibraryEntry).order_by(ExerciseLibraryEntry.name))
        return list(result.scalars().all())
