"""
Authentication strategies.

The request identity is resolved by exactly one strategy chosen from settings:

- StaticIdentityStrategy: local development, every request acts as one
  configured user that is created on first use.
- BearerTokenStrategy: production, a JWT in the Authorization header whose
  ``sub`` claim is the user id.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Request
from jose import JWTError, jwt

from calisthenix.core.config import settings
from calisthenix.models.user import User
from calisthenix.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthStrategy:
    async def authenticate(self, request: Request, repo: UserRepository) -> Optional[User]:
        raise NotImplementedError


class StaticIdentityStrategy(AuthStrategy):
    def __init__(self, email: str, display_name: str):
        self.email = email
        self.display_name = display_name

    async def authenticate(self, request: Request, repo: UserRepository) -> Optional[User]:
        return await repo.get_or_create(self.email, self.display_name)


class BearerTokenStrategy(AuthStrategy):
    def __init__(self, secret_key: str, algorithm: str):
        self.secret_key = secret_key
        self.algorithm = algorithm

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None) -> str:
        to_encode = data.copy()
        expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_subject(self, token: str) -> Optional[int]:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"Rejected bearer token: {e}")
            return None
        sub = payload.get("sub")
        if sub is None or not str(sub).isdigit():
            return None
        return int(sub)

    async def authenticate(self, request: Request, repo: UserRepository) -> Optional[User]:
        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token:
            return None
        user_id = self.decode_subject(token)
        if user_id is None:
            return None
        return await repo.get_by_id(user_id)


def build_auth_strategy(mode: str = None) -> AuthStrategy:
    mode = (mode or settings.AUTH_MODE).lower()
    if mode == "static":
        logger.warning(
            f"AUTH_MODE=static: every request acts as {settings.STATIC_USER_EMAIL}; "
            f"set AUTH_MODE=token outside local development"
        )
        return StaticIdentityStrategy(settings.STATIC_USER_EMAIL, settings.STATIC_USER_DISPLAY_NAME)
    if mode == "token":
        return BearerTokenStrategy(settings.SECRET_KEY, settings.ALGORITHM)
    raise ValueError(f"Unknown AUTH_MODE: {mode}")
