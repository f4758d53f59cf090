"""Adapters between persisted rows and LangChain message objects."""

from tutorbot.application.adapters.chat_history_adapter import (
    ChatHistoryAdapter,
    message_row_to_langchain,
    turns_to_messages,
)

__all__ = ["ChatHistoryAdapter", "message_row_to_langchain", "turns_to_messages"]
