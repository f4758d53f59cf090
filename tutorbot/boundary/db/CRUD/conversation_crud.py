"""
Conversation CRUD operations.

Dependencies: sqlalchemy, tutorbot.boundary.db.models
System role: Conversation persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.base import utcnow
from tutorbot.boundary.db.CRUD.base_crud import BaseCRUD
from tutorbot.boundary.db.models.conversation_model import ConversationModel
from tutorbot.boundary.db.models.message_model import MessageModel

_UNSET = object()


class ConversationCRUD(BaseCRUD[ConversationModel]):
    """
    CRUD operations for ConversationModel.

    All reads are scoped to the owning user so one user can never see
    another user's threads.
    """

    def __init__(self) -> None:
        super().__init__(ConversationModel)

    async def get_for_user(
        self,
        session: AsyncSession,
        id: UUID,
        user_id: UUID,
    ) -> ConversationModel | None:
        """Retrieve a conversation only if it belongs to user_id."""
        stmt = select(ConversationModel).where(
            ConversationModel.id == id,
            ConversationModel.user_id == user_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(
        self,
        session: AsyncSession,
        user_id: UUID,
        module_id: UUID | None | object = _UNSET,
        limit: int | None = None,
    ) -> Sequence[ConversationModel]:
        """
        List a user's conversations, most recently active first.

        Args:
            session: Async database session
            user_id: Owning user
            module_id: When given, restrict to that module (None selects general conversations)
            limit: Maximum number of rows

        Returns:
            Sequence of ConversationModel
        """
        stmt = select(ConversationModel).where(ConversationModel.user_id == user_id)
        if module_id is None:
            stmt = stmt.where(ConversationModel.module_id.is_(None))
        elif module_id is not _UNSET:
            stmt = stmt.where(ConversationModel.module_id == module_id)
        stmt = stmt.order_by(ConversationModel.last_activity.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def touch(self, session: AsyncSession, id: UUID) -> ConversationModel | None:
        """Bump last_activity to now."""
        return await self.update_by_id(session, id, last_activity=utcnow())

    async def delete_with_messages(self, session: AsyncSession, id: UUID) -> bool:
        """Delete a conversation and all of its messages."""
        await session.execute(delete(MessageModel).where(MessageModel.conversation_id == id))
        return await self.delete_by_id(session, id)


conversation_crud = ConversationCRUD()
