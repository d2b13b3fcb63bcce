from fastapi import APIRouter
from calisthenix.api.v1.users import router as users_router
from calisthenix.api.v1.workouts import router as workouts_router
from calisthenix.api.v1.templates import router as templates_router
from calisthenix.api.v1.exercises import router as exercises_router
from calisthenix.api.v1.journal import router as journal_router
from calisthenix.api.v1.records import router as records_router
from calisthenix.api.v1.stats import router as stats_router
from calisthenix.api.v1.coach import router as coach_router

api_router = APIRouter()

api_router.include_router(users_router)
api_router.include_router(workouts_router)
api_router.include_router(templates_router)
api_router.include_router(exercises_router)
api_router.include_router(journal_router)
api_router.include_router(records_router)
api_router.include_router(stats_router)
api_router.include_router(coach_router)
