from datetime import datetime

from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from calisthenix.core.base import Base


class PersonalRecord(Base):
    __tablename__ = "personal_records"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    exercise_name = Column(Text, nullable=False)
    value = Column(Text, nullable=False)  # free text, e.g. "15 reps"
    achieved_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="personal_records")
