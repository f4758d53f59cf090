"""
Conversation domain models and schemas.

Dependencies: pydantic
System role: Conversation API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateConversationRequest(BaseModel):
    """Request schema for creating a conversation."""

    module_id: uuid.UUID | None = Field(None, description="Module scope; omit for a general conversation")
    title: str | None = Field(None, min_length=1, max_length=255, description="Initial title")


class ConversationResponse(BaseModel):
    """Response schema for conversation operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    module_id: uuid.UUID | None
    title: str
    last_activity: datetime
    created_at: datetime
    updated_at: datetime


class SendMessageRequest(BaseModel):
    """Request schema for posting a message to a conversation."""

    content: str = Field(..., min_length=1, description="User message")
    question_context: str | None = Field(
        None,
        description="Question being worked on, for hint requests",
    )


class MessageResponse(BaseModel):
    """Single stored message."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    conversation_id: uuid.UUID
    is_user: bool
    content: str
    tools_used: list[str] | None = None
    question_context: str | None = None
    created_at: datetime


class MessageExchangeResponse(BaseModel):
    """Response schema for a completed exchange."""

    user_message: MessageResponse
    ai_message: MessageResponse
    has_module_content: bool
    conversation: ConversationResponse
