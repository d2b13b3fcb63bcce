from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from calisthenix.core.db import get_db
from calisthenix.core.dependencies import get_current_user
from calisthenix.models.user import User
from calisthenix.schemas.coach import (
    CoachChatRequest,
    CoachChatResponse,
    CoachSuggestionsResponse,
    GenerateTemplateRequest,
    GeneratedTemplateResponse,
)
from calisthenix.services.coach_service import CoachService
from calisthenix.services.llm_client import LLMClient, LLMNotConfigured, get_llm_client

router = APIRouter(prefix="/coach", tags=["coach"])


def get_coach_service(
        db: AsyncSession = Depends(get_db),
        llm: LLMClient = Depends(get_llm_client),
) -> CoachService:
    return CoachService(db, llm)


@router.post("/chat", response_model=CoachChatResponse)
async def chat(
        request: CoachChatRequest,
        current_user: User = Depends(get_current_user),
        coach: CoachService = Depends(get_coach_service)
):
    if not coach.llm.is_configured:
        raise LLMNotConfigured()
    return await coach.chat(current_user, request)


@router.get("/suggestions", response_model=CoachSuggestionsResponse)
async def suggestions(
        current_user: User = Depends(get_current_user),
        coach: CoachService = Depends(get_coach_service)
):
    """Conversation starters; works without an LLM key"""
    return CoachSuggestionsResponse(suggestions=await coach.suggestions(current_user))


@router.post("/generate-template", response_model=GeneratedTemplateResponse, status_code=status.HTTP_201_CREATED)
async def generate_template(
        request: GenerateTemplateRequest,
        current_user: User = Depends(get_current_user),
        coach: CoachService = Depends(get_coach_service)
):
    if not coach.llm.is_configured:
        raise LLMNotConfigured()
    template = await coach.generate_template(current_user, request)
    return GeneratedTemplateResponse(template_id=template.id, template_name=template.name)
