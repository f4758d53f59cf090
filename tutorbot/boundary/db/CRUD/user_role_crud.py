"""
User role CRUD operations.

Dependencies: sqlalchemy, tutorbot.boundary.db.models
System role: Role lookup for admin gating
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.CRUD.base_crud import BaseCRUD
from tutorbot.boundary.db.models.user_role_model import UserRole, UserRoleModel


class UserRoleCRUD(BaseCRUD[UserRoleModel]):
    """CRUD operations for UserRoleModel."""

    def __init__(self) -> None:
        super().__init__(UserRoleModel)

    async def get_role(self, session: AsyncSession, user_id: UUID) -> UserRole:
        """Role of user_id; users without a row are plain users."""
        stmt = select(UserRoleModel.role).where(UserRoleModel.user_id == user_id)
        result = await session.execute(stmt)
        role = result.scalar_one_or_none()
        return role or UserRole.USER

    async def is_admin(self, session: AsyncSession, user_id: UUID) -> bool:
        return await self.get_role(session, user_id) == UserRole.ADMIN

    async def set_role(self, session: AsyncSession, user_id: UUID, role: UserRole) -> UserRoleModel:
        stmt = select(UserRoleModel).where(UserRoleModel.user_id == user_id)
        result = await session.execute(stmt)
        existing = result.scalar_one_or_none()
        if existing is None:
            return await self.create(session, user_id=user_id, role=role)
        return await self.update_by_id(session, existing.id, role=role)


user_role_crud = UserRoleCRUD()
