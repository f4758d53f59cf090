"""
Chat domain models and schemas.

Request/response schemas for the stateless chat endpoint. Field names on
the wire are camelCase.

Dependencies: pydantic
System role: Chat API contracts
"""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ChatTurn(BaseModel):
    """One OpenAI-style chat turn."""

    role: Literal["user", "assistant", "system"] = Field(description="Message author role")
    content: str = Field(description="Message text")


class ChatRequest(BaseModel):
    """Request schema for a chat turn."""

    model_config = ConfigDict(populate_by_name=True)

    messages: list[ChatTurn] = Field(description="Conversation so far; the last turn is the new user message")
    module_id: UUID | None = Field(
        default=None,
        alias="moduleId",
        description="Module whose course materials scope the reply",
    )


class ChatResponse(BaseModel):
    """Response schema for a chat turn."""

    model_config = ConfigDict(populate_by_name=True)

    response: str
    tools_used: list[str] = Field(default_factory=list, alias="toolsUsed")
    has_module_content: bool = Field(alias="hasModuleContent")
