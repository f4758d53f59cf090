"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from tutorbot.configs.base import BaseSettings
from tutorbot.configs.database import DatabaseSettings
from tutorbot.configs.llm import ChatCompletionSettings
from tutorbot.configs.metadata import MetadataSettings
from tutorbot.configs.ocr import OCRSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    chat_completion: ChatCompletionSettings = Field(default_factory=ChatCompletionSettings)
    ocr: OCRSettings = Field(default_factory=OCRSettings)
    metadata: MetadataSettings = Field(default_factory=MetadataSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from tutorbot.configs import get_settings
        settings = get_settings()
    """
    return Settings()
