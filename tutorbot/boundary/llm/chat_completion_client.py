"""
Chat completion client.

One non-streaming call to an OpenAI-compatible /chat/completions endpoint.
The client is stateless: callers pass the prior turns as LangChain messages.

Dependencies: httpx, langchain_core, tutorbot.configs
System role: Tutor reply generation boundary
"""

import logging
from typing import Sequence

import httpx
from langchain_core.messages import (
    BaseMessage,
    HumanMessage,
    SystemMessage,
    convert_to_openai_messages,
)

from tutorbot.configs import get_settings
from tutorbot.configs.llm import ChatCompletionSettings
from tutorbot.core.exceptions import (
    ChatCompletionError,
    ConfigurationError,
    MalformedResponseError,
)

logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """OpenAI-compatible chat completions client."""

    def __init__(
        self,
        settings: ChatCompletionSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings().chat_completion
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.settings.base_url.rstrip('/')}/chat/completions"

    async def complete(
        self,
        system_prompt: str,
        conversation_history: Sequence[BaseMessage],
        new_message: str,
    ) -> str:
        """
        Generate the assistant reply for new_message.

        Args:
            system_prompt: Composed system prompt
            conversation_history: Prior turns, oldest first
            new_message: Latest user message

        Returns:
            Assistant reply text

        Raises:
            ConfigurationError: API key not configured
            ChatCompletionError: Non-2xx status or transport failure
            MalformedResponseError: Reply lacks choices[0].message.content
        """
        if not self.settings.api_key:
            raise ConfigurationError("Chat completions API key not configured")

        messages = convert_to_openai_messages(
            [
                SystemMessage(content=system_prompt),
                *conversation_history,
                HumanMessage(content=new_message),
            ]
        )
        body = {
            "model": self.settings.model,
            "messages": messages,
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }
        headers = {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(self.endpoint, json=body, headers=headers)
        except httpx.TransportError as e:
            logger.error(
                f"{__name__}:complete - Transport error",
                extra={"error": str(e)},
            )
            raise ChatCompletionError(f"Chat completions request failed: {e}") from e

        if response.is_error:
            logger.error(
                f"{__name__}:complete - Upstream error",
                extra={"status_code": response.status_code, "body": response.text[:500]},
            )
            raise ChatCompletionError(
                f"Chat completions API error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError("Chat completions reply has no message content") from e

        if not isinstance(content, str):
            raise MalformedResponseError("Chat completions reply has no message content")

        logger.info(
            f"{__name__}:complete - Reply generated",
            extra={
                "model": self.settings.model,
                "history_turns": len(conversation_history),
                "reply_length": len(content),
            },
        )
        return content
