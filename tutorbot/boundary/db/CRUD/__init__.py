"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from tutorbot.boundary.db.CRUD import module_crud, message_crud

    module = await module_crud.get_by_id(db, module_id)
"""

from tutorbot.boundary.db.CRUD.base_crud import BaseCRUD
from tutorbot.boundary.db.CRUD.conversation_crud import ConversationCRUD, conversation_crud
from tutorbot.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from tutorbot.boundary.db.CRUD.module_content_crud import ModuleContentCRUD, module_content_crud
from tutorbot.boundary.db.CRUD.module_crud import ModuleCRUD, module_crud
from tutorbot.boundary.db.CRUD.processed_document_crud import (
    ProcessedDocumentCRUD,
    processed_document_crud,
)
from tutorbot.boundary.db.CRUD.settings_crud import (
    GlobalSettingCRUD,
    SystemSettingCRUD,
    global_setting_crud,
    system_setting_crud,
)
from tutorbot.boundary.db.CRUD.user_role_crud import UserRoleCRUD, user_role_crud

__all__ = [
    "BaseCRUD",
    "ConversationCRUD",
    "conversation_crud",
    "MessageCRUD",
    "message_crud",
    "ModuleContentCRUD",
    "module_content_crud",
    "ModuleCRUD",
    "module_crud",
    "ProcessedDocumentCRUD",
    "processed_document_crud",
    "SystemSettingCRUD",
    "system_setting_crud",
    "GlobalSettingCRUD",
    "global_setting_crud",
    "UserRoleCRUD",
    "user_role_crud",
]
