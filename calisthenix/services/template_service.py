import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.exceptions import InvalidExerciseReference, NotAuthorized, NotFound
from calisthenix.models.template import WorkoutTemplate, WorkoutTemplateExercise
from calisthenix.models.user import User
from calisthenix.models.workout import Workout, WorkoutExercise
from calisthenix.repositories.exercise_repository import ExerciseRepository
from calisthenix.repositories.template_repository import TemplateRepository
from calisthenix.repositories.workout_repository import WorkoutRepository
from calisthenix.schemas.exercise import ExerciseSummary
from calisthenix.schemas.template import (
    TemplateCreate,
    TemplateDetail,
    TemplateExerciseInput,
    TemplateExerciseResponse,
    TemplateListItem,
    TemplateUpdate,
)
from calisthenix.services.workout_service import WorkoutService

logger = logging.getLogger(__name__)

# Target effort seeded into every set materialized from a template
DEFAULT_TARGET_RPE = 7
FALLBACK_SETS = 3
FALLBACK_REPS = 10


def materialize_sets(default_sets: Optional[int], default_reps: Optional[int]) -> List[dict]:
    sets = default_sets or FALLBACK_SETS
    reps = default_reps or FALLBACK_REPS
    return [
        {"reps": reps, "weight": 0, "rpe": DEFAULT_TARGET_RPE, "completed": False}
        for _ in range(sets)
    ]


def is_visible(template: WorkoutTemplate, user_id: int) -> bool:
    return template.is_public or template.user_id == user_id


class TemplateService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.templates = TemplateRepository(db)
        self.library = ExerciseRepository(db)
        self.workouts = WorkoutRepository(db)

    # ---------------------------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------------------------

    async def get_visible(self, template_id: int, user_id: int) -> WorkoutTemplate:
        """Private templates of other users are reported as missing."""
        template = await self.templates.get(template_id)
        if template is None or not is_visible(template, user_id):
            raise NotFound("Workout template not found")
        return template

    async def get_owned(self, template_id: int, user_id: int) -> WorkoutTemplate:
        template = await self.get_visible(template_id, user_id)
        if template.user_id != user_id:
            raise NotAuthorized("Only the owner can modify this template")
        return template

    async def list_templates(
            self,
            user_id: int,
            difficulty: Optional[str] = None,
            category: Optional[str] = None,
    ) -> List[TemplateListItem]:
        templates = await self.templates.list_visible(user_id, difficulty, category)
        counts = await self.templates.exercise_counts([t.id for t in templates])
        return [self.list_item(t, user_id, counts.get(t.id, 0)) for t in templates]

    @staticmethod
    def list_item(template: WorkoutTemplate, user_id: int, exercise_count: int) -> TemplateListItem:
        return TemplateListItem(
            id=template.id,
            name=template.name,
            description=template.description,
            difficulty=template.difficulty,
            category=template.category,
            created_at=template.created_at,
            is_public=template.is_public,
            is_owner=template.user_id == user_id,
            exercise_count=exercise_count,
        )

    async def detail(self, template: WorkoutTemplate, user_id: int) -> TemplateDetail:
        rows = await self.templates.list_exercises(template.id)
        entries = await self.library.get_many(row.exercise_id for row in rows)
        exercises = []
        for row in rows:
            entry = entries.get(row.exercise_id)
            exercises.append(TemplateExerciseResponse(
                id=row.id,
                exercise_id=row.exercise_id,
                order_index=row.order_index,
                default_sets=row.default_sets,
                default_reps=row.default_reps,
                default_rest_seconds=row.default_rest_seconds,
                notes=row.notes,
                exercise=ExerciseSummary.model_validate(entry) if entry else None,
            ))
        return TemplateDetail(
            id=template.id,
            name=template.name,
            description=template.description,
            difficulty=template.difficulty,
            category=template.category,
            created_at=template.created_at,
            is_public=template.is_public,
            is_owner=template.user_id == user_id,
            exercises=exercises,
        )

    # ---------------------------------------------------------------------------
    # Create / update / delete / duplicate
    # ---------------------------------------------------------------------------

    async def _check_exercise_references(self, exercises: List[TemplateExerciseInput]) -> None:
        requested = [ex.exercise_id for ex in exercises]
        found = await self.library.get_many(requested)
        for exercise_id in requested:
            if exercise_id not in found:
                raise InvalidExerciseReference(exercise_id)

    @staticmethod
    def _rows(exercises: List[TemplateExerciseInput]) -> List[WorkoutTemplateExercise]:
        return [
            WorkoutTemplateExercise(
                exercise_id=ex.exercise_id,
                order_index=ex.order_index,
                default_sets=ex.default_sets,
                default_reps=ex.default_reps,
                default_rest_seconds=ex.default_rest_seconds,
                notes=ex.notes,
            )
            for ex in sorted(exercises, key=lambda ex: ex.order_index)
        ]

    async def _commit_or_invalid_reference(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            # A library row removed between the check and the insert
            await self.db.rollback()
            logger.warning(f"Template exercise insert rejected by the database: {e.orig}")
            raise InvalidExerciseReference("unknown") from e

    async def create_template(self, user: User, data: TemplateCreate, is_public: bool = False) -> WorkoutTemplate:
        await self._check_exercise_references(data.exercises)

        template = await self.templates.add(WorkoutTemplate(
            user_id=user.id,
            name=data.name,
            description=data.description,
            difficulty=data.difficulty,
            category=data.category,
            is_public=is_public,
        ))
        await self.templates.replace_exercises(template.id, self._rows(data.exercises))
        await self._commit_or_invalid_reference()
        await self.db.refresh(template)
        logger.info(f"User {user.id} created template {template.id} with {len(data.exercises)} exercises")
        return template

    async def update_template(self, template: WorkoutTemplate, data: TemplateUpdate) -> WorkoutTemplate:
        await self._check_exercise_references(data.exercises)

        template.name = data.name
        template.description = data.description
        template.difficulty = data.difficulty
        template.category = data.category
        await self.templates.replace_exercises(template.id, self._rows(data.exercises))
        await self._commit_or_invalid_reference()
        await self.db.refresh(template)
        return template

    async def delete_template(self, template: WorkoutTemplate) -> None:
        await self.templates.delete(template)

    async def duplicate_template(self, template: WorkoutTemplate, user: User) -> WorkoutTemplate:
        source_rows = await self.templates.list_exercises(template.id)
        copy = await self.templates.add(WorkoutTemplate(
            user_id=user.id,
            name=f"{template.name} (Copy)",
            description=template.description,
            difficulty=template.difficulty,
            category=template.category,
            is_public=False,
        ))
        await self.templates.replace_exercises(copy.id, [
            WorkoutTemplateExercise(
                exercise_id=row.exercise_id,
                order_index=row.order_index,
                default_sets=row.default_sets,
                default_reps=row.default_reps,
                default_rest_seconds=row.default_rest_seconds,
                notes=row.notes,
            )
            for row in source_rows
        ])
        await self.db.commit()
        await self.db.refresh(copy)
        return copy

    # ---------------------------------------------------------------------------
    # Start a workout from a template
    # ---------------------------------------------------------------------------

    async def start_workout(self, template: WorkoutTemplate, user: User) -> Tuple[Workout, List[WorkoutExercise]]:
        """Copy the template's defaults into a fresh in-progress workout; the template is not touched."""
        rows = await self.templates.list_exercises(template.id)
        entries = await self.library.get_many(row.exercise_id for row in rows)

        workout = await self.workouts.create(user_id=user.id, name=template.name)
        exercises = []
        for position, row in enumerate(rows):
            entry = entries.get(row.exercise_id)
            exercises.append(await self.workouts.add_exercise(
                workout_id=workout.id,
                name=entry.name if entry else f"Exercise {row.exercise_id}",
                sets=materialize_sets(row.default_sets, row.default_reps),
                order=position,
                commit=False,
            ))
        await self.db.commit()
        for exercise in exercises:
            await self.db.refresh(exercise)

        await WorkoutService(self.db).record_streak(user.id, workout.date)
        logger.info(f"User {user.id} started workout {workout.id} from template {template.id}")
        return workout, exercises
