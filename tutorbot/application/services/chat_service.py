"""
Chat pipeline service.

Runs one tutor turn: aggregate module content, look up the override prompt,
compose the system prompt and call the completion endpoint.

Dependencies: langchain_core, tutorbot.core, tutorbot.boundary.llm
System role: Chat turn orchestration
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence
from uuid import UUID

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.application.services.settings_service import SettingsService
from tutorbot.boundary.llm import ChatCompletionClient
from tutorbot.core.context import ContentAggregator
from tutorbot.core.exceptions import ValidationError
from tutorbot.core.prompting import (
    NO_MATERIALS_NOTE,
    PromptInputs,
    build_system_prompt,
    is_course_overview_question,
)
from tutorbot.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


@dataclass
class ChatResult:
    response: str
    has_module_content: bool
    tools_used: list[str] = field(default_factory=list)


def _text(message: BaseMessage) -> str:
    content = message.content
    return content if isinstance(content, str) else str(content)


class ChatService:
    """
    Chat turn orchestrator.

    Attributes:
        db: Async database session
        completion_client: Chat completions boundary client
        history_window: Number of prior turns forwarded upstream
    """

    def __init__(
        self,
        db: AsyncSession,
        completion_client: ChatCompletionClient,
        history_window: int = 10,
    ) -> None:
        self.db = db
        self.completion_client = completion_client
        self.history_window = history_window
        self.aggregator = ContentAggregator(db)
        self.settings_service = SettingsService(db)

    async def _annotate_overview_without_materials(
        self,
        module_id: UUID,
        user_turns: list[str],
        new_message: str,
    ) -> str:
        if not any(is_course_overview_question(turn) for turn in user_turns):
            return new_message
        counts = await self.aggregator.count_module_documents(module_id)
        if counts.total > 0:
            return new_message
        logger.info(
            "Overview question with no materials uploaded",
            extra={"module_id": str(module_id)},
        )
        return f"{new_message}\n\n{NO_MATERIALS_NOTE}"

    async def process_chat(
        self,
        messages: Sequence[BaseMessage],
        module_id: UUID | None = None,
    ) -> ChatResult:
        """
        Produce the tutor reply for the latest user message.

        Args:
            messages: Full conversation so far, oldest first; the last one must be a user message
            module_id: Module scoping the course context (None for general chat)

        Returns:
            ChatResult with the reply and whether course content was in the prompt

        Raises:
            ValidationError: Empty message list or missing final user message
            ConfigurationError, ChatCompletionError, MalformedResponseError: From the completion call
        """
        if not messages:
            raise ValidationError("Messages are required", field="messages")
        latest = messages[-1]
        if not isinstance(latest, HumanMessage) or not _text(latest).strip():
            raise ValidationError(
                "The last message must be a non-empty user message",
                field="messages",
            )

        new_message = _text(latest)
        module_context: str | None = None

        if module_id is not None:
            module_context = await self.aggregator.get_module_context(module_id)
            user_turns = [_text(m) for m in messages if isinstance(m, HumanMessage)]
            new_message = await self._annotate_overview_without_materials(
                module_id, user_turns, new_message
            )

        override = await self.settings_service.get_system_prompt_override()
        inputs = PromptInputs(override=override, module_context=module_context, tools=())
        system_prompt = build_system_prompt(inputs)

        history = [m for m in messages[:-1] if not isinstance(m, SystemMessage)]
        if self.history_window > 0:
            history = history[-self.history_window:]
        else:
            history = []

        logger.info(
            "Processing chat turn",
            extra={
                "module_id": str(module_id) if module_id else None,
                "has_module_content": inputs.has_module_content,
                "uses_override": inputs.effective_override is not None,
                "history_turns": len(history),
                "user_message": safe_log_value(new_message, max_length=200),
            },
        )

        response = await self.completion_client.complete(system_prompt, history, new_message)

        return ChatResult(
            response=response,
            has_module_content=inputs.has_module_content,
            tools_used=[],
        )
