from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.db import get_db
from calisthenix.core.dependencies import get_current_user
from calisthenix.models.personal_record import PersonalRecord
from calisthenix.models.user import User
from calisthenix.schemas.record import PersonalRecordCreate, PersonalRecordResponse

router = APIRouter(prefix="/records", tags=["records"])


@router.get("", response_model=List[PersonalRecordResponse])
async def list_records(
        limit: int = Query(50, ge=1, le=200),
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await db.execute(
        select(PersonalRecord)
        .where(PersonalRecord.user_id == current_user.id)
        .order_by(PersonalRecord.achieved_at.desc(), PersonalRecord.id.desc())
        .limit(limit)
    )
    return result.scalars().all()


@router.post("", response_model=PersonalRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
        data: PersonalRecordCreate,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    record = PersonalRecord(
        user_id=current_user.id,
        exercise_name=data.exercise_name.strip(),
        value=data.value.strip(),
        achieved_at=data.achieved_at or datetime.utcnow(),
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record
