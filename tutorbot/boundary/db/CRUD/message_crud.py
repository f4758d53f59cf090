"""
Message CRUD operations.

Dependencies: sqlalchemy, tutorbot.boundary.db.models
System role: Chat message persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.CRUD.base_crud import BaseCRUD
from tutorbot.boundary.db.models.message_model import MessageModel


class MessageCRUD(BaseCRUD[MessageModel]):
    """CRUD operations for MessageModel. Messages are append-only."""

    def __init__(self) -> None:
        super().__init__(MessageModel)

    async def list_for_conversation(
        self,
        session: AsyncSession,
        conversation_id: UUID,
    ) -> Sequence[MessageModel]:
        """All messages of a conversation, oldest first."""
        stmt = (
            select(MessageModel)
            .where(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_recent(
        self,
        session: AsyncSession,
        conversation_id: UUID,
        limit: int,
    ) -> list[MessageModel]:
        """
        The latest `limit` messages of a conversation, returned oldest first.

        Args:
            session: Async database session
            conversation_id: Conversation UUID
            limit: Window size

        Returns:
            List of MessageModel in chronological order
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.created_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(reversed(result.scalars().all()))

    async def get_first_user_message(
        self,
        session: AsyncSession,
        conversation_id: UUID,
    ) -> MessageModel | None:
        """Earliest user message of a conversation, if any."""
        stmt = (
            select(MessageModel)
            .where(
                MessageModel.conversation_id == conversation_id,
                MessageModel.is_user.is_(True),
            )
            .order_by(MessageModel.created_at.asc())
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def count_for_conversation(
        self,
        session: AsyncSession,
        conversation_id: UUID,
        is_user: bool | None = None,
    ) -> int:
        """Message count, optionally restricted to user (True) or AI (False) messages."""
        stmt = select(func.count(MessageModel.id)).where(
            MessageModel.conversation_id == conversation_id
        )
        if is_user is not None:
            stmt = stmt.where(MessageModel.is_user.is_(is_user))
        result = await session.execute(stmt)
        return result.scalar_one()


message_crud = MessageCRUD()
