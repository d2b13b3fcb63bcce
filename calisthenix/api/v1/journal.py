from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.db import get_db
from calisthenix.core.dependencies import get_current_user
from calisthenix.core.exceptions import NotAuthorized, NotFound
from calisthenix.models.journal import JournalEntry
from calisthenix.models.user import User
from calisthenix.schemas.journal import JournalEntryCreate, JournalEntryUpdate, JournalEntryResponse

router = APIRouter(prefix="/journal", tags=["journal"])


@router.get("", response_model=List[JournalEntryResponse])
async def list_entries(
        limit: int = Query(30, ge=1, le=200),
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await db.execute(
        select(JournalEntry)
        .where(JournalEntry.user_id == current_user.id)
        .order_by(JournalEntry.date.desc(), JournalEntry.id.desc())
        .limit(limit)
    )
    return result.scalars().all()


@router.post("", response_model=JournalEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_entry(
        data: JournalEntryCreate,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    entry = JournalEntry(
        user_id=current_user.id,
        date=data.date or datetime.utcnow(),
        energy_level=data.energy_level,
        mood=data.mood,
        notes=data.notes,
        photo_url=data.photo_url,
    )
    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    return entry


@router.patch("/{entry_id}", response_model=JournalEntryResponse)
async def update_entry(
        entry_id: int,
        data: JournalEntryUpdate,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await db.execute(select(JournalEntry).where(JournalEntry.id == entry_id))
    entry = result.scalar_one_or_none()
    if entry is None:
        raise NotFound("Journal entry not found")
    if entry.user_id != current_user.id:
        raise NotAuthorized()

    for field, value in data.model_dump(exclude_unset=True).items():
        # energy and mood are required columns
        if value is None and field in ("energy_level", "mood", "date"):
            continue
        setattr(entry, field, value)

    await db.commit()
    await db.refresh(entry)
    return entry
