"""
Module domain models and schemas.

Dependencies: pydantic
System role: Module API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateModuleRequest(BaseModel):
    """Request schema for creating a module."""

    name: str = Field(..., min_length=1, max_length=255, description="Module name")
    code: str | None = Field(None, max_length=64, description="Course code")
    description: str | None = Field(None, max_length=4096, description="Module description")
    is_global: bool = Field(False, description="Visible to every user (admin only)")
    suggested_questions: list[str] = Field(default_factory=list)


class UpdateModuleRequest(BaseModel):
    """Request schema for updating a module. Omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=255)
    code: str | None = Field(None, max_length=64)
    description: str | None = Field(None, max_length=4096)
    content_summary: str | None = None
    is_global: bool | None = None
    suggested_questions: list[str] | None = None


class ModuleResponse(BaseModel):
    """Response schema for module operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    code: str | None
    description: str | None
    content_summary: str | None
    is_global: bool
    suggested_questions: list[str]
    created_at: datetime
    updated_at: datetime


class SetActiveModuleRequest(BaseModel):
    module_id: uuid.UUID | None = Field(None, description="Module to activate; null clears the pointer")


class ActiveModuleResponse(BaseModel):
    module_id: uuid.UUID | None
    module: ModuleResponse | None = None
