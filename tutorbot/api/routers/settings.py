"""
Settings and admin API endpoints.

Routes:
- GET /settings/system-prompt - Effective system prompt
- PUT /settings/system-prompt - Set or clear the override (admin)
- PUT /admin/users/{user_id}/role - Set a user's role (admin)

Dependencies: tutorbot.application.services, tutorbot.models
System role: Admin configuration HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from tutorbot.api.deps.dependencies import (
    get_current_user_id,
    get_settings_service,
    require_admin,
)
from tutorbot.application.services import SettingsService
from tutorbot.models.settings import (
    SetUserRoleRequest,
    SystemPromptResponse,
    UpdateSystemPromptRequest,
    UserRoleResponse,
)

router = APIRouter(prefix="/settings", tags=["settings"])
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/system-prompt",
    response_model=SystemPromptResponse,
    dependencies=[Depends(get_current_user_id)],
)
async def get_system_prompt(
    settings_service: SettingsService = Depends(get_settings_service),
) -> SystemPromptResponse:
    return SystemPromptResponse(**await settings_service.get_system_prompt())


@router.put("/system-prompt", response_model=SystemPromptResponse)
async def update_system_prompt(
    request: UpdateSystemPromptRequest,
    admin_id: UUID = Depends(require_admin),
    settings_service: SettingsService = Depends(get_settings_service),
) -> SystemPromptResponse:
    """Store the override prompt; blank restores the default."""
    view = await settings_service.set_system_prompt(request.value, updated_by=admin_id)
    return SystemPromptResponse(**view)


@admin_router.put("/users/{user_id}/role", response_model=UserRoleResponse)
async def set_user_role(
    user_id: UUID,
    request: SetUserRoleRequest,
    admin_id: UUID = Depends(require_admin),
    settings_service: SettingsService = Depends(get_settings_service),
) -> UserRoleResponse:
    role = await settings_service.set_user_role(user_id, request.role, changed_by=admin_id)
    return UserRoleResponse(user_id=user_id, role=role)
