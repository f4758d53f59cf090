"""
Settings service.

Reads and writes the admin override system prompt and user roles.

Dependencies: tutorbot.boundary.db.CRUD
System role: Admin configuration use cases
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.CRUD import system_setting_crud, user_role_crud
from tutorbot.boundary.db.models import SYSTEM_PROMPT_KEY, UserRole
from tutorbot.core.prompting import DEFAULT_TUTOR_PROMPT

logger = logging.getLogger(__name__)

SYSTEM_PROMPT_DESCRIPTION = "Override for the default tutor system prompt"


class SettingsService:
    """Settings use cases."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_system_prompt_override(self) -> str | None:
        """
        The admin override prompt, or None when unset or blank.

        Returns:
            str | None: Override text
        """
        row = await system_setting_crud.get_by_key(self.db, SYSTEM_PROMPT_KEY)
        if row is None or not row.setting_value or not row.setting_value.strip():
            return None
        return row.setting_value

    async def get_system_prompt(self) -> dict:
        """Effective prompt view for the admin UI."""
        override = await self.get_system_prompt_override()
        return {
            "override": override,
            "is_default": override is None,
            "effective_prompt": override or DEFAULT_TUTOR_PROMPT,
        }

    async def set_system_prompt(self, value: str | None, updated_by: UUID) -> dict:
        """
        Store the override prompt; blank or None clears it.

        Args:
            value: New override text
            updated_by: Admin performing the change

        Returns:
            dict: Updated prompt view
        """
        stored = value if value and value.strip() else ""
        await system_setting_crud.upsert(
            self.db,
            SYSTEM_PROMPT_KEY,
            stored,
            updated_by=updated_by,
            description=SYSTEM_PROMPT_DESCRIPTION,
        )
        await self.db.commit()
        logger.info(
            "System prompt updated",
            extra={"updated_by": str(updated_by), "cleared": stored == ""},
        )
        return await self.get_system_prompt()

    async def is_admin(self, user_id: UUID) -> bool:
        return await user_role_crud.is_admin(self.db, user_id)

    async def set_user_role(self, user_id: UUID, role: UserRole, changed_by: UUID) -> UserRole:
        row = await user_role_crud.set_role(self.db, user_id, role)
        await self.db.commit()
        logger.info(
            "User role updated",
            extra={"user_id": str(user_id), "role": role.value, "changed_by": str(changed_by)},
        )
        return row.role
