from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.db import get_db
from calisthenix.core.dependencies import get_current_user
from calisthenix.models.user import User
from calisthenix.schemas.stats import DailyVolume, ProfileStats
from calisthenix.services.stats_service import StatsService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/profile", response_model=ProfileStats)
async def get_profile_stats(
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    return await StatsService(db).profile_stats(current_user)


@router.get("/weekly-volume", response_model=List[DailyVolume])
async def get_weekly_volume(
        days: int = Query(7, ge=1, le=31),
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    return await StatsService(db).weekly_volume(current_user, days=days)
