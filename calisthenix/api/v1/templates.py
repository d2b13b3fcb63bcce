from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.db import get_db
from calisthenix.core.dependencies import get_current_user
from calisthenix.models.exercise_library import DifficultyEnum
from calisthenix.models.template import TemplateCategoryEnum
from calisthenix.models.user import User
from calisthenix.schemas.template import TemplateCreate, TemplateDetail, TemplateListItem, TemplateUpdate
from calisthenix.schemas.workout import WorkoutDetailResponse
from calisthenix.services.template_service import TemplateService
from calisthenix.api.v1.workouts import workout_detail

router = APIRouter(prefix="/workout-templates", tags=["workout-templates"])


@router.get("", response_model=List[TemplateListItem])
async def list_templates(
        difficulty: Optional[DifficultyEnum] = Query(None),
        category: Optional[TemplateCategoryEnum] = Query(None),
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    """Own templates plus every public one"""
    return await TemplateService(db).list_templates(current_user.id, difficulty, category)


@router.get("/{template_id}", response_model=TemplateDetail)
async def get_template(
        template_id: int,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    service = TemplateService(db)
    template = await service.get_visible(template_id, current_user.id)
    return await service.detail(template, current_user.id)


@router.post("", response_model=TemplateDetail, status_code=status.HTTP_201_CREATED)
async def create_template(
        data: TemplateCreate,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    service = TemplateService(db)
    template = await service.create_template(current_user, data)
    return await service.detail(template, current_user.id)


@router.put("/{template_id}", response_model=TemplateDetail)
async def update_template(
        template_id: int,
        data: TemplateUpdate,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    service = TemplateService(db)
    template = await service.get_owned(template_id, current_user.id)
    template = await service.update_template(template, data)
    return await service.detail(template, current_user.id)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_template(
        template_id: int,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    service = TemplateService(db)
    template = await service.get_owned(template_id, current_user.id)
    await service.delete_template(template)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==========================
# DUPLICATE / START
# ==========================

@router.post("/{template_id}/duplicate", response_model=TemplateDetail, status_code=status.HTTP_201_CREATED)
async def duplicate_template(
        template_id: int,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    service = TemplateService(db)
    template = await service.get_visible(template_id, current_user.id)
    copy = await service.duplicate_template(template, current_user)
    return await service.detail(copy, current_user.id)


@router.post("/{template_id}/start", response_model=WorkoutDetailResponse, status_code=status.HTTP_201_CREATED)
async def start_template(
        template_id: int,
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    """Materialize the template into a new in-progress workout"""
    service = TemplateService(db)
    template = await service.get_visible(template_id, current_user.id)
    workout, exercises = await service.start_workout(template, current_user)
    return workout_detail(workout, exercises)
