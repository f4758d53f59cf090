"""
Module CRUD operations.

Dependencies: sqlalchemy, tutorbot.boundary.db.models
System role: Module persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.CRUD.base_crud import BaseCRUD
from tutorbot.boundary.db.models.conversation_model import ConversationModel
from tutorbot.boundary.db.models.module_content_model import ModuleContentModel
from tutorbot.boundary.db.models.module_model import ModuleModel
from tutorbot.boundary.db.models.processed_document_model import ProcessedDocumentModel


class ModuleCRUD(BaseCRUD[ModuleModel]):
    """
    CRUD operations for ModuleModel.

    Extends BaseCRUD with visibility-aware listing and a delete that
    clears dependent rows explicitly (SQLite does not enforce FK actions
    unless the pragma is on).
    """

    def __init__(self) -> None:
        super().__init__(ModuleModel)

    async def list_visible(
        self,
        session: AsyncSession,
        user_id: UUID,
    ) -> Sequence[ModuleModel]:
        """
        Modules owned by the user plus every global module, ordered by name.

        Args:
            session: Async database session
            user_id: Requesting user

        Returns:
            Sequence of ModuleModel
        """
        stmt = (
            select(ModuleModel)
            .where(or_(ModuleModel.user_id == user_id, ModuleModel.is_global.is_(True)))
            .order_by(ModuleModel.name)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_module(self, session: AsyncSession, id: UUID) -> bool:
        """
        Delete a module with its content rows; conversations keep living as general ones.

        Returns:
            True if the module existed
        """
        await session.execute(delete(ModuleContentModel).where(ModuleContentModel.module_id == id))
        await session.execute(
            delete(ProcessedDocumentModel).where(ProcessedDocumentModel.course_id == id)
        )
        await session.execute(
            update(ConversationModel)
            .where(ConversationModel.module_id == id)
            .values(module_id=None)
        )
        return await self.delete_by_id(session, id)


module_crud = ModuleCRUD()
