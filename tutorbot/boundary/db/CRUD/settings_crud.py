"""
Settings CRUD operations.

Key/value access for system_settings and global_settings.

Dependencies: sqlalchemy, tutorbot.boundary.db.models
System role: Settings persistence operations
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.base import utcnow
from tutorbot.boundary.db.CRUD.base_crud import BaseCRUD
from tutorbot.boundary.db.models.settings_model import GlobalSettingModel, SystemSettingModel


class SystemSettingCRUD(BaseCRUD[SystemSettingModel]):
    """CRUD operations for SystemSettingModel."""

    def __init__(self) -> None:
        super().__init__(SystemSettingModel)

    async def get_by_key(self, session: AsyncSession, key: str) -> SystemSettingModel | None:
        """Most recently updated row for key."""
        stmt = (
            select(SystemSettingModel)
            .where(SystemSettingModel.setting_key == key)
            .order_by(SystemSettingModel.updated_at.desc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert(
        self,
        session: AsyncSession,
        key: str,
        value: str,
        updated_by: UUID | None = None,
        description: str | None = None,
    ) -> SystemSettingModel:
        """
        Insert or overwrite the value stored under key.

        Args:
            session: Async database session
            key: Setting key
            value: New value
            updated_by: Admin performing the change
            description: Optional description (kept when None)

        Returns:
            The stored SystemSettingModel
        """
        existing = await self.get_by_key(session, key)
        if existing is None:
            return await self.create(
                session,
                setting_key=key,
                setting_value=value,
                updated_by=updated_by,
                description=description,
            )
        fields = {"setting_value": value, "updated_by": updated_by, "updated_at": utcnow()}
        if description is not None:
            fields["description"] = description
        return await self.update_by_id(session, existing.id, **fields)


class GlobalSettingCRUD(BaseCRUD[GlobalSettingModel]):
    """CRUD operations for GlobalSettingModel."""

    def __init__(self) -> None:
        super().__init__(GlobalSettingModel)

    async def get_by_key(self, session: AsyncSession, key: str) -> GlobalSettingModel | None:
        stmt = select(GlobalSettingModel).where(GlobalSettingModel.setting_key == key)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_value(self, session: AsyncSession, key: str) -> str | None:
        row = await self.get_by_key(session, key)
        return row.setting_value if row else None

    async def set_value(
        self,
        session: AsyncSession,
        key: str,
        value: str | None,
        description: str | None = None,
    ) -> GlobalSettingModel:
        """Insert or overwrite a global pointer; None clears it."""
        existing = await self.get_by_key(session, key)
        if existing is None:
            return await self.create(
                session,
                setting_key=key,
                setting_value=value,
                description=description,
            )
        return await self.update_by_id(session, existing.id, setting_value=value)


system_setting_crud = SystemSettingCRUD()
global_setting_crud = GlobalSettingCRUD()
