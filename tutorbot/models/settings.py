"""
Settings domain models and schemas.

Dependencies: pydantic
System role: Admin settings API contracts
"""

import uuid

from pydantic import BaseModel, Field

from tutorbot.boundary.db.models import UserRole


class SystemPromptResponse(BaseModel):
    override: str | None = Field(description="Admin override, null when the default is in use")
    is_default: bool
    effective_prompt: str


class UpdateSystemPromptRequest(BaseModel):
    value: str | None = Field(None, description="New override; blank or null restores the default")


class SetUserRoleRequest(BaseModel):
    role: UserRole


class UserRoleResponse(BaseModel):
    user_id: uuid.UUID
    role: UserRole
