from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.auth import AuthStrategy, build_auth_strategy
from calisthenix.core.db import get_db
from calisthenix.core.exceptions import NotAuthenticated
from calisthenix.models.user import User
from calisthenix.repositories.user_repository import UserRepository


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Repository factory, injected into endpoints through Depends."""
    return UserRepository(db)


def get_auth_strategy(request: Request) -> AuthStrategy:
    """The strategy is built once by the app factory and kept on app.state."""
    strategy = getattr(request.app.state, "auth_strategy", None)
    if strategy is None:
        strategy = build_auth_strategy()
        request.app.state.auth_strategy = strategy
    return strategy


async def get_current_user(
        request: Request,
        strategy: AuthStrategy = Depends(get_auth_strategy),
        repo: UserRepository = Depends(get_user_repository),
) -> User:
    user = await strategy.authenticate(request, repo)
    if user is None:
        raise NotAuthenticated()
    return user
