"""
Chat history adapter.

High-level business logic for conversation message storage.
Provides a simple interface for adding messages by role and retrieving the
history as LangChain messages for the completion call.

Dependencies: langchain_core, tutorbot.boundary.db.CRUD
System role: Chat history business logic adapter
"""

from typing import Iterable, Mapping
from uuid import UUID

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, convert_to_messages
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.boundary.db.CRUD import message_crud
from tutorbot.boundary.db.models import MessageModel


def message_row_to_langchain(row: MessageModel) -> BaseMessage:
    """Map a stored message to HumanMessage / AIMessage."""
    if row.is_user:
        return HumanMessage(content=row.content)
    return AIMessage(content=row.content)


def turns_to_messages(turns: Iterable[Mapping[str, str]]) -> list[BaseMessage]:
    """
    Convert OpenAI-style {role, content} dicts to LangChain messages.

    Args:
        turns: Client-supplied chat turns ("user", "assistant", "system")

    Returns:
        List of BaseMessage in the same order
    """
    return convert_to_messages([{"role": t["role"], "content": t["content"]} for t in turns])


class ChatHistoryAdapter:
    """
    Message persistence scoped to one conversation.

    Attributes:
        conversation_id: Conversation UUID
        db: Async database session
    """

    def __init__(self, conversation_id: UUID, db: AsyncSession) -> None:
        self.conversation_id = conversation_id
        self.db = db

    async def add_user_message(
        self,
        content: str,
        question_context: str | None = None,
    ) -> MessageModel:
        return await message_crud.create(
            self.db,
            conversation_id=self.conversation_id,
            is_user=True,
            content=content,
            question_context=question_context,
        )

    async def add_ai_message(
        self,
        content: str,
        tools_used: list[str] | None = None,
        question_context: str | None = None,
    ) -> MessageModel:
        return await message_crud.create(
            self.db,
            conversation_id=self.conversation_id,
            is_user=False,
            content=content,
            tools_used=list(tools_used) if tools_used is not None else [],
            question_context=question_context,
        )

    async def get_rows(self) -> list[MessageModel]:
        """All stored messages, oldest first."""
        return list(await message_crud.list_for_conversation(self.db, self.conversation_id))

    async def get_messages(self, limit: int | None = None) -> list[BaseMessage]:
        """
        Stored messages as LangChain objects, oldest first.

        Args:
            limit: Keep only the most recent N messages (None = all)

        Returns:
            List of HumanMessage / AIMessage
        """
        if limit is not None and limit > 0:
            rows = await message_crud.get_recent(self.db, self.conversation_id, limit)
        else:
            rows = await self.get_rows()
        return [message_row_to_langchain(row) for row in rows]
