"""
Metadata generation configuration settings.

Settings for the hosted model that derives document titles and descriptions.

Dependencies: pydantic, pydantic_settings
System role: Document metadata generation configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tutorbot.configs.base import BaseSettings


class MetadataSettings(BaseSettings):
    """Gemini generateContent configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Gemini API key")
    url: str = Field(
        default=(
            "https://generativelanguage.googleapis.com/v1beta/models/"
            "gemini-1.5-flash-latest:generateContent"
        ),
        description="generateContent endpoint URL",
    )
    timeout_seconds: float = Field(default=60.0, description="HTTP timeout in seconds")
    max_input_chars: int = Field(default=15000, description="Characters of text sent upstream")
    temperature: float = Field(default=0.7)
    top_k: int = Field(default=40)
    top_p: float = Field(default=0.95)
    max_output_tokens: int = Field(default=1024)
