"""
Conversation service orchestrator.

Coordinates conversation lifecycle and message exchange: persists the user
message, runs the chat pipeline, persists the tutor reply and titles the
conversation after its first exchange.

Dependencies: tutorbot.application, tutorbot.boundary.db.CRUD, tutorbot.boundary.llm
System role: Conversation use case orchestration
"""

import logging
from dataclasses import dataclass
from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.application.adapters import ChatHistoryAdapter
from tutorbot.application.services.chat_service import ChatService
from tutorbot.application.services.module_service import ModuleService
from tutorbot.boundary.db.CRUD import conversation_crud, message_crud
from tutorbot.boundary.db.models import ConversationModel, MessageModel
from tutorbot.boundary.db.models.conversation_model import DEFAULT_CONVERSATION_TITLE
from tutorbot.core.exceptions import NotFoundError, TutorBotException, ValidationError

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Discussion"
MAX_TITLE_CHARS = 255
TITLE_REPLY_PREVIEW_CHARS = 200

TITLE_SYSTEM_PROMPT = (
    "Generate a short, descriptive title (3-5 words max) for this conversation "
    "based on the user's question and AI response. Return only the title, no extra text."
)


@dataclass
class MessageExchange:
    """Result of one send_message call."""

    user_message: MessageModel
    ai_message: MessageModel
    has_module_content: bool
    conversation: ConversationModel


class ConversationService:
    """Conversation service orchestrator."""

    def __init__(self, db: AsyncSession, chat_service: ChatService) -> None:
        self.db = db
        self.chat_service = chat_service
        self.module_service = ModuleService(db)

    async def create_conversation(
        self,
        user_id: UUID,
        module_id: UUID | None = None,
        title: str | None = None,
    ) -> ConversationModel:
        """
        Create a conversation, optionally scoped to a visible module.

        Raises:
            NotFoundError: module_id does not name a module visible to the user
        """
        if module_id is not None:
            await self.module_service.get_module(module_id, user_id)

        conversation = await conversation_crud.create(
            self.db,
            user_id=user_id,
            module_id=module_id,
            title=title or DEFAULT_CONVERSATION_TITLE,
        )
        await self.db.commit()
        logger.info(
            "Conversation created",
            extra={"conversation_id": str(conversation.id), "module_id": str(module_id)},
        )
        return conversation

    async def list_conversations(
        self,
        user_id: UUID,
        limit: int | None = None,
    ) -> Sequence[ConversationModel]:
        return await conversation_crud.list_for_user(self.db, user_id, limit=limit)

    async def get_conversation(self, conversation_id: UUID, user_id: UUID) -> ConversationModel:
        """
        Raises:
            NotFoundError: Unknown conversation or owned by another user
        """
        conversation = await conversation_crud.get_for_user(self.db, conversation_id, user_id)
        if conversation is None:
            raise NotFoundError("conversation", conversation_id)
        return conversation

    async def delete_conversation(self, conversation_id: UUID, user_id: UUID) -> None:
        conversation = await self.get_conversation(conversation_id, user_id)
        await conversation_crud.delete_with_messages(self.db, conversation.id)
        await self.db.commit()
        logger.info("Conversation deleted", extra={"conversation_id": str(conversation_id)})

    async def list_messages(self, conversation_id: UUID, user_id: UUID) -> list[MessageModel]:
        conversation = await self.get_conversation(conversation_id, user_id)
        return await ChatHistoryAdapter(conversation.id, self.db).get_rows()

    async def generate_title(self, first_question: str, first_reply: str) -> str:
        """
        Summarise the first exchange into a short title.

        Falls back to "Discussion" when the completion call fails or returns nothing.
        """
        prompt = (
            f'User asked: "{first_question}"\n\n'
            f'AI responded: "{first_reply[:TITLE_REPLY_PREVIEW_CHARS]}..."'
        )
        try:
            title = await self.chat_service.completion_client.complete(
                TITLE_SYSTEM_PROMPT, [], prompt
            )
        except TutorBotException as e:
            logger.warning(
                "Title generation failed, using fallback",
                extra={"error": str(e)},
            )
            return FALLBACK_TITLE

        title = title.strip().strip("\"'").strip()
        return title[:MAX_TITLE_CHARS] if title else FALLBACK_TITLE

    async def send_message(
        self,
        conversation_id: UUID,
        user_id: UUID,
        content: str,
        question_context: str | None = None,
    ) -> MessageExchange:
        """
        Run one exchange in a stored conversation.

        The user message is committed before the completion call so it
        survives an upstream failure.

        Args:
            conversation_id: Conversation UUID
            user_id: Owning user
            content: User message text
            question_context: Optional hint-request annotation stored on both messages

        Returns:
            MessageExchange with both stored messages

        Raises:
            NotFoundError: Unknown conversation
            ValidationError: Blank message
            Upstream errors from the chat pipeline
        """
        if not content or not content.strip():
            raise ValidationError("Message content is required", field="content")

        conversation = await self.get_conversation(conversation_id, user_id)
        history = ChatHistoryAdapter(conversation.id, self.db)

        user_message = await history.add_user_message(content, question_context=question_context)
        await conversation_crud.touch(self.db, conversation.id)
        await self.db.commit()

        module_id = conversation.module_id or await self.module_service.get_active_module_id()
        window = self.chat_service.history_window
        messages = await history.get_messages(limit=window + 1 if window > 0 else 1)

        result = await self.chat_service.process_chat(messages, module_id)

        ai_message = await history.add_ai_message(
            result.response,
            tools_used=result.tools_used,
            question_context=question_context,
        )
        conversation = await conversation_crud.touch(self.db, conversation.id)

        if await message_crud.count_for_conversation(self.db, conversation.id, is_user=False) == 1:
            first = await message_crud.get_first_user_message(self.db, conversation.id)
            title = await self.generate_title(first.content if first else content, result.response)
            conversation = await conversation_crud.update_by_id(
                self.db, conversation.id, title=title
            )

        await self.db.commit()
        logger.info(
            "Message exchange stored",
            extra={
                "conversation_id": str(conversation.id),
                "module_id": str(module_id) if module_id else None,
                "has_module_content": result.has_module_content,
            },
        )
        return MessageExchange(
            user_message=user_message,
            ai_message=ai_message,
            has_module_content=result.has_module_content,
            conversation=conversation,
        )
