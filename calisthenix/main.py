import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from calisthenix.api.router import api_router
from calisthenix.core.auth import build_auth_strategy
from calisthenix.core.config import settings
from calisthenix.core.database import init_database
from calisthenix.core.exceptions import register_exception_handlers
from calisthenix.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    await init_database()
    logger.info("Calisthenix API started")
    yield
    logger.info("Calisthenix API stopped")


def create_app(use_lifespan: bool = True) -> FastAPI:
    app = FastAPI(
        title="Calisthenix - calisthenics training tracker",
        lifespan=lifespan if use_lifespan else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.auth_strategy = build_auth_strategy()
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("calisthenix.main:app", host="0.0.0.0", port=8000, reload=True)
