"""
Module service orchestrator.

Coordinates module lifecycle operations and the global active-module pointer.

Dependencies: tutorbot.boundary.db.CRUD, tutorbot.boundary.db.models
System role: Module use case orchestration
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.CRUD import global_setting_crud, module_crud, user_role_crud
from tutorbot.boundary.db.models import ACTIVE_MODULE_KEY, ModuleModel
from tutorbot.core.exceptions import NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)

ACTIVE_MODULE_DESCRIPTION = "Module every client chats against by default"

UPDATABLE_FIELDS = frozenset(
    {"name", "code", "description", "content_summary", "is_global", "suggested_questions"}
)


class ModuleService:
    """Module service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _require_owner_or_admin(self, module: ModuleModel, user_id: UUID) -> None:
        if module.user_id == user_id:
            return
        if await user_role_crud.is_admin(self.db, user_id):
            return
        raise PermissionDeniedError(
            "Only the module owner or an admin can modify this module",
            details={"module_id": str(module.id)},
        )

    async def list_modules(self, user_id: UUID) -> Sequence[ModuleModel]:
        """Own and global modules, ordered by name."""
        return await module_crud.list_visible(self.db, user_id)

    async def get_module(self, module_id: UUID, user_id: UUID) -> ModuleModel:
        """
        Get a module visible to the user.

        Raises:
            NotFoundError: Unknown module, or a private module of another user
        """
        module = await module_crud.get_by_id(self.db, module_id)
        if module is None:
            raise NotFoundError("module", module_id)
        if module.user_id != user_id and not module.is_global:
            if not await user_role_crud.is_admin(self.db, user_id):
                raise NotFoundError("module", module_id)
        return module

    async def get_modifiable_module(self, module_id: UUID, user_id: UUID) -> ModuleModel:
        """Get a module the user owns or administers."""
        module = await module_crud.get_by_id(self.db, module_id)
        if module is None:
            raise NotFoundError("module", module_id)
        await self._require_owner_or_admin(module, user_id)
        return module

    async def create_module(
        self,
        user_id: UUID,
        name: str,
        code: str | None = None,
        description: str | None = None,
        is_global: bool = False,
        suggested_questions: list[str] | None = None,
    ) -> ModuleModel:
        """
        Create a module owned by user_id.

        Raises:
            PermissionDeniedError: Non-admin creating a global module
        """
        if is_global and not await user_role_crud.is_admin(self.db, user_id):
            raise PermissionDeniedError("Only admins can create global modules")

        module = await module_crud.create(
            self.db,
            user_id=user_id,
            name=name,
            code=code,
            description=description,
            is_global=is_global,
            suggested_questions=suggested_questions or [],
        )
        await self.db.commit()
        logger.info(
            "Module created",
            extra={"module_id": str(module.id), "module_name": name, "is_global": is_global},
        )
        return module

    async def update_module(self, module_id: UUID, user_id: UUID, **fields: Any) -> ModuleModel:
        """
        Update module fields; unknown keys and None values are ignored.

        Raises:
            NotFoundError: Unknown module
            PermissionDeniedError: Caller is neither owner nor admin
        """
        module = await self.get_modifiable_module(module_id, user_id)
        changes = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS and v is not None}
        if changes.get("is_global") and not await user_role_crud.is_admin(self.db, user_id):
            raise PermissionDeniedError("Only admins can make a module global")
        if not changes:
            return module

        updated = await module_crud.update_by_id(self.db, module.id, **changes)
        await self.db.commit()
        logger.info(
            "Module updated",
            extra={"module_id": str(module_id), "fields": sorted(changes)},
        )
        return updated

    async def delete_module(self, module_id: UUID, user_id: UUID) -> None:
        """
        Delete a module with its course content; clears the active pointer if it pointed here.

        Raises:
            NotFoundError: Unknown module
            PermissionDeniedError: Caller is neither owner nor admin
        """
        module = await self.get_modifiable_module(module_id, user_id)
        if await self.get_active_module_id() == module.id:
            await global_setting_crud.set_value(self.db, ACTIVE_MODULE_KEY, None)
        await module_crud.delete_module(self.db, module.id)
        await self.db.commit()
        logger.info("Module deleted", extra={"module_id": str(module_id)})

    async def get_active_module_id(self) -> UUID | None:
        """The globally active module id, or None when unset or malformed."""
        value = await global_setting_crud.get_value(self.db, ACTIVE_MODULE_KEY)
        if not value:
            return None
        try:
            return UUID(value)
        except ValueError:
            logger.warning(
                "Ignoring malformed active module id",
                extra={"value": value},
            )
            return None

    async def get_active_module(self) -> ModuleModel | None:
        module_id = await self.get_active_module_id()
        if module_id is None:
            return None
        return await module_crud.get_by_id(self.db, module_id)

    async def set_active_module(self, module_id: UUID | None, changed_by: UUID) -> ModuleModel | None:
        """
        Point every client at module_id, or clear the pointer with None.

        Raises:
            NotFoundError: Unknown module
        """
        module = None
        if module_id is not None:
            module = await module_crud.get_by_id(self.db, module_id)
            if module is None:
                raise NotFoundError("module", module_id)

        await global_setting_crud.set_value(
            self.db,
            ACTIVE_MODULE_KEY,
            str(module_id) if module_id else None,
            description=ACTIVE_MODULE_DESCRIPTION,
        )
        await self.db.commit()
        logger.info(
            "Active module changed",
            extra={
                "module_id": str(module_id) if module_id else None,
                "changed_by": str(changed_by),
            },
        )
        return module
