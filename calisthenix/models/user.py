from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship

from calisthenix.core.base import Base

LEVEL_NAMES = ["FOUNDATION", "BEGINNER", "INTERMEDIATE", "ADVANCED", "GOD TIER"]


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)
    display_name = Column(Text, nullable=True)
    current_level = Column(Integer, nullable=False, default=0)   # 0..4, see LEVEL_NAMES
    level_progress = Column(Integer, nullable=False, default=0)  # percent
    streak = Column(Integer, nullable=False, default=0)
    last_workout_date = Column(DateTime, nullable=True)
    weight = Column(Integer, nullable=True)                      # kg
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Children are removed with explicit DELETE statements, never through lazy loads
    workouts = relationship("Workout", back_populates="user", passive_deletes=True)
    templates = relationship("WorkoutTemplate", back_populates="user", passive_deletes=True)
    journal_entries = relationship("JournalEntry", back_populates="user", passive_deletes=True)
    personal_records = relationship("PersonalRecord", back_populates="user", passive_deletes=True)
