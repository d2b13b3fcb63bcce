from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.db import get_db
from calisthenix.core.dependencies import get_current_user, get_user_repository
from calisthenix.models.user import User
from calisthenix.repositories.user_repository import UserRepository
from calisthenix.repositories.workout_repository import WorkoutRepository
from calisthenix.schemas.user import UserMeResponse, UserProfileUpdate, UserRead

router = APIRouter(tags=["users"])


@router.get("/auth/user", response_model=UserRead)
async def get_auth_user(current_user: User = Depends(get_current_user)):
    """Identity resolved by the configured auth strategy"""
    return current_user


@router.get("/users/me", response_model=UserMeResponse)
async def get_me(
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    workout_count = await WorkoutRepository(db).count_for_user(current_user.id)
    return UserMeResponse(**UserRead.model_validate(current_user).model_dump(), workout_count=workout_count)


@router.get("/user/profile", response_model=UserRead)
async def get_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.patch("/user/profile", response_model=UserRead)
async def update_profile(
        data: UserProfileUpdate,
        current_user: User = Depends(get_current_user),
        repo: UserRepository = Depends(get_user_repository)
):
    updates = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    if "display_name" in updates:
        updates["display_name"] = updates["display_name"].strip()
    return await repo.update_profile(current_user, updates)
