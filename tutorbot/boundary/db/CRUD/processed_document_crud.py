"""
Processed document CRUD operations.

Dependencies: sqlalchemy, tutorbot.boundary.db.models
System role: Processed document persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.CRUD.base_crud import BaseCRUD
from tutorbot.boundary.db.models.processed_document_model import ProcessedDocumentModel


class ProcessedDocumentCRUD(BaseCRUD[ProcessedDocumentModel]):
    """CRUD operations for ProcessedDocumentModel."""

    def __init__(self) -> None:
        super().__init__(ProcessedDocumentModel)

    async def list_for_module(
        self,
        session: AsyncSession,
        module_id: UUID,
        newest_first: bool = False,
    ) -> Sequence[ProcessedDocumentModel]:
        """Documents whose course_id is module_id, in upload order (or reversed)."""
        created = ProcessedDocumentModel.created_at
        stmt = (
            select(ProcessedDocumentModel)
            .where(ProcessedDocumentModel.course_id == module_id)
            .order_by(created.desc() if newest_first else created.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_for_module(self, session: AsyncSession, module_id: UUID) -> int:
        stmt = select(func.count(ProcessedDocumentModel.id)).where(
            ProcessedDocumentModel.course_id == module_id
        )
        result = await session.execute(stmt)
        return result.scalar_one()


processed_document_crud = ProcessedDocumentCRUD()
