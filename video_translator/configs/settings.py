"""
Unified application settings.

Aggregates all client-side configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from video_translator.configs.base import BaseSettings
from video_translator.configs.database import DatabaseSettings
from video_translator.configs.functions import FunctionsSettings
from video_translator.configs.stage_driver import StageDriverSettings
from video_translator.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    stage_driver: StageDriverSettings = Field(default_factory=StageDriverSettings)
    functions: FunctionsSettings = Field(default_factory=FunctionsSettings)

    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed by the CORS middleware",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from video_translator.configs import get_settings
        settings = get_settings()
    """
    return Settings()
