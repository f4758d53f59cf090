"""
Database models package.

Exports:
  - ModuleModel: Course/module ORM model
  - ConversationModel, MessageModel: Chat persistence
  - ModuleContentModel, ProcessingStatus, ProcessedDocumentModel: Course materials
  - SystemSettingModel, GlobalSettingModel: Key/value settings
  - UserRoleModel, UserRole: Role assignments

Dependencies: sqlalchemy, tutorbot.boundary.db.base
System role: Database model definitions for domain entities
"""

from tutorbot.boundary.db.models.conversation_model import ConversationModel
from tutorbot.boundary.db.models.message_model import MessageModel
from tutorbot.boundary.db.models.module_content_model import (
    ModuleContentModel,
    ProcessingStatus,
)
from tutorbot.boundary.db.models.module_model import ModuleModel
from tutorbot.boundary.db.models.processed_document_model import ProcessedDocumentModel
from tutorbot.boundary.db.models.settings_model import (
    ACTIVE_MODULE_KEY,
    SYSTEM_PROMPT_KEY,
    GlobalSettingModel,
    SystemSettingModel,
)
from tutorbot.boundary.db.models.user_role_model import UserRole, UserRoleModel

__all__ = [
    "ACTIVE_MODULE_KEY",
    "SYSTEM_PROMPT_KEY",
    "ConversationModel",
    "GlobalSettingModel",
    "MessageModel",
    "ModuleContentModel",
    "ModuleModel",
    "ProcessedDocumentModel",
    "ProcessingStatus",
    "SystemSettingModel",
    "UserRole",
    "UserRoleModel",
]
