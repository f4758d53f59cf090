"""
Module API endpoints.

Routes:
- GET /modules - Own and global modules
- POST /modules - Create module
- GET /modules/active - Global active module
- PUT /modules/active - Set or clear the global active module (admin)
- GET /modules/{id} - Get module
- PUT /modules/{id} - Update module (owner or admin)
- DELETE /modules/{id} - Delete module (owner or admin)

Dependencies: tutorbot.application.services, tutorbot.models
System role: Module management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from tutorbot.api.deps.dependencies import (
    get_current_user_id,
    get_module_service,
    require_admin,
)
from tutorbot.application.services import ModuleService
from tutorbot.models.common import DeleteResponse
from tutorbot.models.module import (
    ActiveModuleResponse,
    CreateModuleRequest,
    ModuleResponse,
    SetActiveModuleRequest,
    UpdateModuleRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/modules", tags=["modules"])


@router.get("", response_model=list[ModuleResponse])
async def list_modules(
    user_id: UUID = Depends(get_current_user_id),
    module_service: ModuleService = Depends(get_module_service),
) -> list[ModuleResponse]:
    modules = await module_service.list_modules(user_id)
    return [ModuleResponse.model_validate(m) for m in modules]


@router.post("", response_model=ModuleResponse, status_code=201)
async def create_module(
    request: CreateModuleRequest,
    user_id: UUID = Depends(get_current_user_id),
    module_service: ModuleService = Depends(get_module_service),
) -> ModuleResponse:
    """
    Create a module owned by the caller.

    Returns:
        ModuleResponse: Created module

    Raises:
        PermissionDeniedError(403): Non-admin requesting a global module
    """
    module = await module_service.create_module(
        user_id=user_id,
        name=request.name,
        code=request.code,
        description=request.description,
        is_global=request.is_global,
        suggested_questions=request.suggested_questions,
    )
    return ModuleResponse.model_validate(module)


@router.get("/active", response_model=ActiveModuleResponse, dependencies=[Depends(get_current_user_id)])
async def get_active_module(
    module_service: ModuleService = Depends(get_module_service),
) -> ActiveModuleResponse:
    """Globally active module; clients poll this."""
    module = await module_service.get_active_module()
    if module is None:
        return ActiveModuleResponse(module_id=None, module=None)
    return ActiveModuleResponse(module_id=module.id, module=ModuleResponse.model_validate(module))


@router.put("/active", response_model=ActiveModuleResponse)
async def set_active_module(
    request: SetActiveModuleRequest,
    admin_id: UUID = Depends(require_admin),
    module_service: ModuleService = Depends(get_module_service),
) -> ActiveModuleResponse:
    module = await module_service.set_active_module(request.module_id, changed_by=admin_id)
    if module is None:
        return ActiveModuleResponse(module_id=None, module=None)
    return ActiveModuleResponse(module_id=module.id, module=ModuleResponse.model_validate(module))


@router.get("/{module_id}", response_model=ModuleResponse)
async def get_module(
    module_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    module_service: ModuleService = Depends(get_module_service),
) -> ModuleResponse:
    module = await module_service.get_module(module_id, user_id)
    return ModuleResponse.model_validate(module)


@router.put("/{module_id}", response_model=ModuleResponse)
async def update_module(
    module_id: UUID,
    request: UpdateModuleRequest,
    user_id: UUID = Depends(get_current_user_id),
    module_service: ModuleService = Depends(get_module_service),
) -> ModuleResponse:
    module = await module_service.update_module(
        module_id,
        user_id,
        **request.model_dump(exclude_unset=True),
    )
    return ModuleResponse.model_validate(module)


@router.delete("/{module_id}", response_model=DeleteResponse)
async def delete_module(
    module_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    module_service: ModuleService = Depends(get_module_service),
) -> DeleteResponse:
    await module_service.delete_module(module_id, user_id)
    return DeleteResponse(id=str(module_id))
