"""
Module content CRUD operations.

Dependencies: sqlalchemy, tutorbot.boundary.db.models
System role: Course material persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.CRUD.base_crud import BaseCRUD
from tutorbot.boundary.db.models.module_content_model import ModuleContentModel


class ModuleContentCRUD(BaseCRUD[ModuleContentModel]):
    """CRUD operations for ModuleContentModel."""

    def __init__(self) -> None:
        super().__init__(ModuleContentModel)

    async def list_for_module(
        self,
        session: AsyncSession,
        module_id: UUID,
        newest_first: bool = False,
    ) -> Sequence[ModuleContentModel]:
        """
        Content rows of a module in upload order.

        Args:
            session: Async database session
            module_id: Module UUID
            newest_first: Order by created_at descending instead of ascending

        Returns:
            Sequence of ModuleContentModel
        """
        stmt = select(ModuleContentModel).where(ModuleContentModel.module_id == module_id)
        created = ModuleContentModel.created_at
        stmt = stmt.order_by(created.desc() if newest_first else created.asc())
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_for_module(self, session: AsyncSession, module_id: UUID) -> int:
        stmt = select(func.count(ModuleContentModel.id)).where(
            ModuleContentModel.module_id == module_id
        )
        result = await session.execute(stmt)
        return result.scalar_one()


module_content_crud = ModuleContentCRUD()
