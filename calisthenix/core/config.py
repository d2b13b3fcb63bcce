from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql://calisthenix:calisthenix@db:5432/calisthenix"
    DATABASE_ECHO: bool = False
    # Local development is easier without recreating the schema on every start
    RESET_DATABASE: bool = False
    SEED_DATABASE: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:5000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # "static" resolves a single configured identity, "token" expects a JWT bearer
    AUTH_MODE: str = "static"
    SECRET_KEY: str = "SECRET_KEY_FOR_CALISTHENIX"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    STATIC_USER_EMAIL: str = "dev@example.com"
    STATIC_USER_DISPLAY_NAME: str = "Developer"

    LLM_API_KEY: str = ""
    LLM_BASE_URL: str = "https://api.groq.com/openai/v1/chat/completions"
    LLM_MODEL: str = "llama-3.3-70b-versatile"
    LLM_TIMEOUT_SECONDS: float = 30.0
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 1024

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"


settings = Settings()
