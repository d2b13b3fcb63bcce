import enum
from datetime import datetime

from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, JSON, Enum
from sqlalchemy.orm import relationship

from calisthenix.core.base import Base


class WorkoutStatusEnum(str, enum.Enum):
    in_progress = "in_progress"
    completed = "completed"


class Workout(Base):
    __tablename__ = "workouts"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    date = Column(DateTime, default=datetime.utcnow, nullable=False)
    started_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    completed_at = Column(DateTime, nullable=True)
    duration = Column(Integer, nullable=True)  # seconds the session timer was running
    total_volume = Column(Integer, default=0, nullable=False)
    status = Column(Enum(WorkoutStatusEnum), default=WorkoutStatusEnum.in_progress, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="workouts")
    exercises = relationship(
        "WorkoutExercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutExercise.order",
    )


class WorkoutExercise(Base):
    __tablename__ = "workout_exercises"

    id = Column(Integer, primary_key=True)
    workout_id = Column(Integer, ForeignKey("workouts.id", ondelete="CASCADE"), nullable=False, index=True)
    # Copied from the library at insert time, not a foreign key
    name = Column(Text, nullable=False)
    # [{"reps": int, "weight": float | None, "rpe": float | None, "completed": bool}, ...]
    sets = Column(JSON, nullable=False, default=list)
    order = Column("order", Integer, nullable=False, default=0)

    workout = relationship("Workout", back_populates="exercises")
