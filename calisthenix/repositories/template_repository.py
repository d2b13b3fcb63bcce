from typing import Dict, List, Optional

from sqlalchemy import select, delete, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.models.template import WorkoutTemplate, WorkoutTemplateExercise


class TemplateRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, template_id: int) -> Optional[WorkoutTemplate]:
        result = await self.db.execute(select(WorkoutTemplate).where(WorkoutTemplate.id == template_id))
        return result.scalar_one_or_none()

    async def list_visible(
            self,
            user_id: int,
            difficulty: Optional[str] = None,
            category: Optional[str] = None,
    ) -> List[WorkoutTemplate]:
        """Templates owned by the user plus every public one."""
        query = select(WorkoutTemplate).where(
            or_(WorkoutTemplate.user_id == user_id, WorkoutTemplate.is_public.is_(True))
        )
        if difficulty:
            query = query.where(WorkoutTemplate.difficulty == difficulty)
        if category:
            query = query.where(WorkoutTemplate.category == category)
        query = query.order_by(WorkoutTemplate.created_at.desc(), WorkoutTemplate.id.desc())

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def list_owned(self, user_id: int, limit: int = 5) -> List[WorkoutTemplate]:
        result = await self.db.execute(
            select(WorkoutTemplate)
            .where(WorkoutTemplate.user_id == user_id)
            .order_by(WorkoutTemplate.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def exercise_counts(self, template_ids: List[int]) -> Dict[int, int]:
        if not template_ids:
            return {}
        result = await self.db.execute(
            select(WorkoutTemplateExercise.template_id, func.count(WorkoutTemplateExercise.id))
            .where(WorkoutTemplateExercise.template_id.in_(template_ids))
            .group_by(WorkoutTemplateExercise.template_id)
        )
        return {template_id: count for template_id, count in result.all()}

    async def list_exercises(self, template_id: int) -> List[WorkoutTemplateExercise]:
        result = await self.db.execute(
            select(WorkoutTemplateExercise)
            .where(WorkoutTemplateExercise.template_id == template_id)
            .order_by(WorkoutTemplateExercise.order_index.asc(), WorkoutTemplateExercise.id.asc())
        )
        return list(result.scalars().all())

    async def add(self, template: WorkoutTemplate) -> WorkoutTemplate:
        self.db.add(template)
        await self.db.flush()
        return template

    async def replace_exercises(self, template_id: int, rows: List[WorkoutTemplateExercise]) -> None:
        """Delete-then-reinsert; the caller commits."""
        await self.db.execute(
            delete(WorkoutTemplateExercise).where(WorkoutTemplateExercise.template_id == template_id)
        )
        for row in rows:
            row.template_id = template_id
            self.db.add(row)
        await self.db.flush()

    async def delete(self, template: WorkoutTemplate) -> None:
        await self.db.execute(
            delete(WorkoutTemplateExercise).where(WorkoutTemplateExercise.template_id == template.id)
        )
        await self.db.execute(delete(WorkoutTemplate).where(WorkoutTemplate.id == template.id))
        await self.db.commit()
