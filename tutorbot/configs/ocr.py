"""
OCR service configuration settings.

Settings for the hosted document OCR endpoint and its retry policy.

Dependencies: pydantic, pydantic_settings
System role: Document ingestion configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tutorbot.configs.base import BaseSettings


class OCRSettings(BaseSettings):
    """LLMWhisperer-compatible OCR configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLMWHISPERER_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="OCR API key (server-side only)")
    url: str = Field(
        default="https://llmwhisperer-api.unstract.com/v1/whisper",
        description="OCR endpoint URL",
    )
    timeout_seconds: float = Field(default=240.0, description="HTTP timeout in seconds")

    # Retry policy
    max_attempts: int = Field(default=3, description="Maximum upstream attempts")
    backoff_initial_seconds: float = Field(default=1.0, description="First backoff delay")
    backoff_max_seconds: float = Field(default=4.0, description="Maximum backoff delay")
