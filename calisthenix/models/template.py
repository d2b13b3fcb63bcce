import enum
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship

from calisthenix.core.base import Base
from calisthenix.models.exercise_library import DifficultyEnum


class TemplateCategoryEnum(str, enum.Enum):
    push = "push"
    pull = "pull"
    legs = "legs"
    core = "core"
    full_body = "full_body"


class WorkoutTemplate(Base):
    __tablename__ = "workout_templates"

    id = Column(Integer, primary_key=True, index=True)
    # NULL for system templates shipped with the seed data
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    difficulty = Column(Enum(DifficultyEnum), nullable=True)
    category = Column(Enum(TemplateCategoryEnum), nullable=True)
    is_public = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="templates")
    exercises = relationship(
        "WorkoutTemplateExercise",
        back_populates="template",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutTemplateExercise.order_index",
    )


class WorkoutTemplateExercise(Base):
    __tablename__ = "workout_template_exercises"

    id = Column(Integer, primary_key=True)
    template_id = Column(Integer, ForeignKey("workout_templates.id", ondelete="CASCADE"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercise_library.id"), nullable=False)
    order_index = Column(Integer, nullable=False, default=0)
    default_sets = Column(Integer, nullable=True)
    default_reps = Column(Integer, nullable=True)
    default_rest_seconds = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)

    template = relationship("WorkoutTemplate", back_populates="exercises")
    exercise = relationship("ExerciseLibraryEntry")
