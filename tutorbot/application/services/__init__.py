"""
Application services.

Exports:
  - ChatService, ChatResult: one tutor turn
  - ConversationService, MessageExchange: stored conversations
  - ModuleService: modules and the active-module pointer
  - DocumentService, UploadedDocument: course materials
  - SettingsService: override prompt and roles
"""

from tutorbot.application.services.chat_service import ChatResult, ChatService
from tutorbot.application.services.conversation_service import (
    ConversationService,
    MessageExchange,
)
from tutorbot.application.services.document_service import DocumentService, UploadedDocument
from tutorbot.application.services.module_service import ModuleService
from tutorbot.application.services.settings_service import SettingsService

__all__ = [
    "ChatResult",
    "ChatService",
    "ConversationService",
    "DocumentService",
    "MessageExchange",
    "ModuleService",
    "SettingsService",
    "UploadedDocument",
]
