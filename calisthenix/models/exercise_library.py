import enum

from sqlalchemy import Column, Integer, String, Text, JSON, Enum

from calisthenix.core.base import Base


class ExerciseCategoryEnum(str, enum.Enum):
    push = "push"
    pull = "pull"
    legs = "legs"
    core = "core"
    skill = "skill"


class DifficultyEnum(str, enum.Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class ExerciseLibraryEntry(Base):
    __tablename__ = "exercise_library"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, nullable=False, index=True)
    category = Column(Enum(ExerciseCategoryEnum), nullable=False)
    difficulty = Column(Enum(DifficultyEnum), nullable=False)
    short_description = Column(Text, nullable=True)
    long_description = Column(Text, nullable=True)
    muscles_primary = Column(JSON, nullable=False, default=list)
    muscles_secondary = Column(JSON, nullable=False, default=list)
    equipment = Column(JSON, nullable=False, default=list)
    progressions = Column(JSON, nullable=False, default=list)
    regressions = Column(JSON, nullable=False, default=list)
    tips = Column(JSON, nullable=False, default=list)
    demo_image_url = Column(String, nullable=True)
    demo_gif_url = Column(String, nullable=True)
