import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from calisthenix.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: int) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create_user(self, user: User) -> User:
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def get_or_create(self, email: str, display_name: str) -> User:
        """Resolve a user by email, inserting it on first use."""
        user = await self.get_by_email(email)
        if user is not None:
            return user
        try:
            return await self.create_user(User(email=email, display_name=display_name))
        except IntegrityError:
            # Another request inserted the same email first
            await self.db.rollback()
            logger.info(f"User {email} created concurrently, reading it back")
            user = await self.get_by_email(email)
            if user is None:
                raise
            return user

    async def update_profile(self, user: User, updates: dict) -> User:
        for field, value in updates.items():
            setattr(user, field, value)
        user.updated_at = datetime.utcnow()
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def update_streak(self, user: User, streak: int, last_workout_date: Optional[datetime]) -> None:
        user.streak = streak
        user.last_workout_date = last_workout_date
        await self.db.commit()
