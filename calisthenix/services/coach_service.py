import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.exceptions import TemplateGenerationFailed
from calisthenix.models.exercise_library import DifficultyEnum
from calisthenix.models.personal_record import PersonalRecord
from calisthenix.models.template import TemplateCategoryEnum, WorkoutTemplate
from calisthenix.models.user import LEVEL_NAMES, User
from calisthenix.repositories.exercise_repository import ExerciseRepository
from calisthenix.repositories.template_repository import TemplateRepository
from calisthenix.repositories.workout_repository import WorkoutRepository
from calisthenix.schemas.coach import (
    ChatMessage,
    ChatRole,
    CoachChatRequest,
    CoachChatResponse,
    GeneratedTemplate,
    GenerateTemplateRequest,
)
from calisthenix.schemas.template import TemplateCreate, TemplateExerciseInput
from calisthenix.services.llm_client import LLMClient
from calisthenix.services.template_service import TemplateService

logger = logging.getLogger(__name__)

COACH_SYSTEM_PROMPT = """You are Calisthenix Coach, an expert AI fitness assistant specializing in calisthenics and bodyweight training. Your role is to:

1. Provide personalized workout advice based on the user's current fitness level and goals
2. Help users progress through calisthenics skills (push-ups, pull-ups, dips, muscle-ups, handstands, etc.)
3. Offer form tips, progression strategies and recovery advice
4. Motivate and encourage users while being realistic about their capabilities
5. Analyze their workout history to provide data-driven recommendations

Communication style:
- Be friendly, supportive and encouraging
- Use clear, actionable language
- Keep responses concise but informative
- Reference the user's actual workout data when relevant
- Suggest specific exercises or progressions based on their level

Always prioritize safety and proper form. If unsure about something medical, recommend consulting a healthcare professional."""

RECENT_WORKOUTS = 7
OWNED_TEMPLATES = 5
RECENT_RECORDS = 10
MAX_FOLLOW_UPS = 3

FOLLOW_UP_RULES = [
    (("workout", "exercise"), [
        "What's the best progression for this exercise?",
        "How often should I train this?",
    ]),
    (("form", "technique"), [
        "What are common mistakes to avoid?",
        "Can you suggest some drills to improve my form?",
    ]),
    (("goal", "progress"), [
        "Create a weekly training plan for me",
        "What milestones should I aim for?",
    ]),
]

DEFAULT_FOLLOW_UPS = [
    "What should I focus on next?",
    "Can you analyze my recent workouts?",
    "Suggest a workout for today",
]

RETURNING_USER_STARTERS = [
    "Analyze my recent workouts and suggest improvements",
    "What should I focus on in my next workout?",
    "Help me create a weekly training plan",
    "What progressions should I work on?",
]

NEW_USER_STARTERS = [
    "I'm new to calisthenics, where should I start?",
    "What's a good beginner workout routine?",
    "How do I do a proper push-up?",
    "What equipment do I need for calisthenics?",
]


def suggested_follow_ups(message: str) -> List[str]:
    """Keyword-driven follow-up questions for the user's last message."""
    text = message.lower()
    suggestions = []
    for keywords, questions in FOLLOW_UP_RULES:
        if any(keyword in text for keyword in keywords):
            suggestions.extend(questions)
    if not suggestions:
        suggestions = list(DEFAULT_FOLLOW_UPS)
    return suggestions[:MAX_FOLLOW_UPS]


def starter_suggestions(has_workouts: bool) -> List[str]:
    return list(RETURNING_USER_STARTERS if has_workouts else NEW_USER_STARTERS)


def describe_sets(sets: List[Dict[str, Any]]) -> str:
    if not sets:
        return "no sets"
    parts = []
    for item in sets:
        reps = item.get("reps", 0)
        weight = item.get("weight")
        part = f"{reps}" + (f" @ {weight}kg" if weight else "")
        if item.get("completed"):
            part += " done"
        parts.append(part)
    return ", ".join(parts)


def extract_json_object(text: str) -> Dict[str, Any]:
    """Take the outermost {...} block of a reply, tolerating prose or code fences around it."""
    start_idx = text.find("{")
    end_idx = text.rfind("}") + 1
    if start_idx == -1 or end_idx <= start_idx:
        raise ValueError("reply holds no JSON object")
    data = json.loads(text[start_idx:end_idx])
    if not isinstance(data, dict):
        raise ValueError("reply JSON is not an object")
    return data


def _clamp(value: Any, low: int, high: int, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return min(max(number, low), high)


def sanitize_generated(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop values outside the allowed enums and pull numbers into range before validation."""
    difficulties = {d.value for d in DifficultyEnum}
    categories = {c.value for c in TemplateCategoryEnum}

    raw_exercises = data.get("exercises")
    exercises = []
    for item in raw_exercises if isinstance(raw_exercises, list) else []:
        if not isinstance(item, dict) or not item.get("slug"):
            continue
        exercises.append({
            "slug": str(item["slug"]).strip().lower(),
            "sets": _clamp(item.get("sets"), 1, 10, 3),
            "reps": _clamp(item.get("reps"), 1, 100, 10),
            "rest_seconds": _clamp(item.get("restSeconds", item.get("rest_seconds")), 0, 600, 60),
            "notes": item.get("notes") if isinstance(item.get("notes"), str) else None,
        })

    difficulty = str(data.get("difficulty") or "").lower()
    category = str(data.get("category") or "").lower()
    return {
        "name": str(data.get("name") or "").strip()[:200] or "Coach Workout",
        "description": data.get("description") if isinstance(data.get("description"), str) else None,
        "difficulty": difficulty if difficulty in difficulties else None,
        "category": category if category in categories else None,
        "exercises": exercises,
    }


class CoachService:
    def __init__(self, db: AsyncSession, llm: LLMClient):
        self.db = db
        self.llm = llm
        self.workouts = WorkoutRepository(db)
        self.templates = TemplateRepository(db)
        self.library = ExerciseRepository(db)

    # ---------------------------------------------------------------------------
    # Context digest
    # ---------------------------------------------------------------------------

    async def build_user_context(self, user: User) -> str:
        level = user.current_level or 0
        level_name = LEVEL_NAMES[level] if 0 <= level < len(LEVEL_NAMES) else str(level)
        lines = [
            "## User Profile",
            f"- Display Name: {user.display_name or 'Not set'}",
            f"- Current Level: {level_name}",
            f"- Current Streak: {user.streak or 0} days",
            f"- Member since: {user.created_at.date().isoformat() if user.created_at else 'unknown'}",
            "",
        ]

        workouts = await self.workouts.list_for_user(user.id, limit=RECENT_WORKOUTS)
        if workouts:
            exercises = await self.workouts.list_exercises_for([w.id for w in workouts])
            lines.append(f"## Recent Workouts (Last {len(workouts)})")
            for workout in workouts:
                header = f"{workout.name} ({workout.date.date().isoformat()})"
                if workout.duration:
                    header += f": {workout.duration // 60} min"
                if workout.total_volume:
                    header += f", Volume: {workout.total_volume}"
                lines.append(header)
                for exercise in exercises.get(workout.id, []):
                    lines.append(f"  - {exercise.name}: {describe_sets(exercise.sets or [])}")
            lines.append("")
        else:
            lines.extend(["## Recent Workouts", "No workouts recorded yet.", ""])

        templates = await self.templates.list_owned(user.id, limit=OWNED_TEMPLATES)
        if templates:
            lines.append("## Saved Workout Templates")
            for template in templates:
                lines.append(f"- {template.name}" + (f": {template.description}" if template.description else ""))
            lines.append("")

        result = await self.db.execute(
            select(PersonalRecord)
            .where(PersonalRecord.user_id == user.id)
            .order_by(PersonalRecord.achieved_at.desc())
            .limit(RECENT_RECORDS)
        )
        records = result.scalars().all()
        if records:
            lines.append("## Personal Records")
            for record in records:
                lines.append(f"- {record.exercise_name}: {record.value}")

        return "\n".join(lines).strip()

    # ---------------------------------------------------------------------------
    # Chat
    # ---------------------------------------------------------------------------

    @staticmethod
    def chat_messages(context: str, history: List[ChatMessage], message: str) -> List[Dict[str, str]]:
        messages = [{
            "role": "system",
            "content": f"{COACH_SYSTEM_PROMPT}\n\n## Current User Context\n{context}",
        }]
        for item in history:
            role = "user" if item.role == ChatRole.user else "assistant"
            messages.append({"role": role, "content": item.content})
        messages.append({"role": "user", "content": message})
        return messages

    async def chat(self, user: User, request: CoachChatRequest) -> CoachChatResponse:
        context = await self.build_user_context(user)
        reply = await self.llm.generate(self.chat_messages(context, request.history, request.message))
        logger.info(f"Coach replied to user {user.id} ({len(reply)} chars)")
        return CoachChatResponse(reply=reply, suggested_follow_ups=suggested_follow_ups(request.message))

    async def suggestions(self, user: User) -> List[str]:
        return starter_suggestions(await self.workouts.count_for_user(user.id) > 0)

    # ---------------------------------------------------------------------------
    # Template generation
    # ---------------------------------------------------------------------------

    def template_prompt(self, request: GenerateTemplateRequest, slugs: List[str]) -> str:
        focus = ", ".join(request.focus_areas) if request.focus_areas else "no specific focus"
        return f"""Design one calisthenics workout template for this user.

GOAL: {request.goal}
LEVEL: {request.level.value}
FOCUS AREAS: {focus}

Use ONLY exercises from this list of slugs:
{", ".join(slugs)}

Return ONLY JSON, no extra text:

{{
    "name": "Template name",
    "description": "One sentence description",
    "difficulty": "beginner | intermediate | advanced",
    "category": "push | pull | legs | core | full_body",
    "exercises": [
        {{"slug": "push-up", "sets": 3, "reps": 10, "restSeconds": 60, "notes": "short cue"}}
    ]
}}
"""

    async def generate_template(self, user: User, request: GenerateTemplateRequest) -> WorkoutTemplate:
        entries = await self.library.list_all()
        by_slug = {entry.slug: entry for entry in entries}
        context = await self.build_user_context(user)

        reply = await self.llm.generate([
            {"role": "system", "content": f"{COACH_SYSTEM_PROMPT}\n\n## Current User Context\n{context}"},
            {"role": "user", "content": self.template_prompt(request, sorted(by_slug))},
        ])

        try:
            draft = GeneratedTemplate.model_validate(sanitize_generated(extract_json_object(reply)))
        except (ValueError, TypeError, ValidationError) as e:
            logger.error(f"Coach template reply could not be parsed: {e}")
            raise TemplateGenerationFailed("Coach returned an invalid template") from e

        exercises = []
        for item in draft.exercises:
            entry = by_slug.get(item.slug)
            if entry is None:
                logger.warning(f"Dropping unknown exercise slug from coach template: {item.slug}")
                continue
            exercises.append(TemplateExerciseInput(
                exercise_id=entry.id,
                order_index=len(exercises) + 1,
                default_sets=item.sets,
                default_reps=item.reps,
                default_rest_seconds=item.rest_seconds,
                notes=item.notes,
            ))
        if not exercises:
            raise TemplateGenerationFailed("Coach template contained no known exercises")

        data = TemplateCreate(
            name=(request.name or "").strip() or draft.name,
            description=draft.description or request.goal,
            difficulty=draft.difficulty or request.level,
            category=draft.category,
            exercises=exercises,
        )
        template = await TemplateService(self.db).create_template(user, data)
        logger.info(f"Coach generated template {template.id} for user {user.id} with {len(exercises)} exercises")
        return template

