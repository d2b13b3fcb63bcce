from calisthenix.core.config import settings
from calisthenix.core.base import Base
from calisthenix.core.db import engine, get_db

__all__ = ["settings", "engine", "Base", "get_db"]
