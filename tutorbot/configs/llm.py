"""
Chat completion configuration settings.

Settings for the hosted chat-completions endpoint used by the tutor.

Dependencies: pydantic, pydantic_settings
System role: LLM endpoint configuration for the chat pipeline
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tutorbot.configs.base import BaseSettings


class ChatCompletionSettings(BaseSettings):
    """OpenAI-compatible chat completions configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="OPENAI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Chat completions API key")
    base_url: str = Field(
        default="https://api.openai.com/v1",
        description="Base URL of the chat completions API",
    )
    model: str = Field(default="gpt-4o-mini", description="Chat model identifier")
    temperature: float = Field(default=0.2, description="Sampling temperature")
    max_tokens: int = Field(default=1500, description="Maximum output tokens")
    timeout_seconds: float = Field(default=60.0, description="HTTP timeout in seconds")
    history_window: int = Field(
        default=10,
        description="Number of prior turns forwarded with each chat request",
    )
