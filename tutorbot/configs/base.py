"""
Shared settings fields.

Every TutorBot settings group inherits `.env` loading and the process-wide
flags below. `debug` turns on FastAPI debug tracebacks and uvicorn reload.

Dependencies: pydantic_settings
System role: Root of the configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Process-wide flags read from the environment or `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name, logged at startup",
    )
    debug: bool = Field(
        default=False,
        description="FastAPI debug tracebacks and uvicorn auto-reload",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )
