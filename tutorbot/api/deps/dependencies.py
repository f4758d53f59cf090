"""
Dependency injection container.

Factory functions for FastAPI dependencies. Boundary HTTP clients are
process-wide singletons held in ServiceCache; services are built per request
around the request's database session.

Dependencies: fastapi, tutorbot.configs, tutorbot.application, tutorbot.boundary
System role: DI container for service injection
"""

from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from tutorbot.application.services import (
    ChatService,
    ConversationService,
    DocumentService,
    ModuleService,
    SettingsService,
)
from tutorbot.boundary.db import get_async_db
from tutorbot.boundary.db.CRUD import user_role_crud
from tutorbot.boundary.llm import ChatCompletionClient, MetadataClient
from tutorbot.boundary.ocr import LLMWhispererClient
from tutorbot.configs import get_settings
from tutorbot.core.exceptions import AuthenticationError, PermissionDeniedError


class ServiceCache:
    """Container for cached boundary client instances."""

    def __init__(self) -> None:
        self._ocr_client: LLMWhispererClient | None = None
        self._chat_completion_client: ChatCompletionClient | None = None
        self._metadata_client: MetadataClient | None = None

    @property
    def ocr_client(self) -> LLMWhispererClient:
        if self._ocr_client is None:
            self._ocr_client = LLMWhispererClient(get_settings().ocr)
        return self._ocr_client

    @property
    def chat_completion_client(self) -> ChatCompletionClient:
        if self._chat_completion_client is None:
            self._chat_completion_client = ChatCompletionClient(get_settings().chat_completion)
        return self._chat_completion_client

    @property
    def metadata_client(self) -> MetadataClient:
        if self._metadata_client is None:
            self._metadata_client = MetadataClient(get_settings().metadata)
        return self._metadata_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._ocr_client = None
        self._chat_completion_client = None
        self._metadata_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_ocr_client() -> LLMWhispererClient:
    return get_service_cache().ocr_client


def get_chat_completion_client() -> ChatCompletionClient:
    return get_service_cache().chat_completion_client


def get_metadata_client() -> MetadataClient:
    return get_service_cache().metadata_client


async def get_current_user_id(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> UUID:
    """
    Caller identity from the X-User-Id header.

    Authentication happens upstream; this only parses the forwarded id.

    Raises:
        AuthenticationError: Header missing or not a UUID
    """
    if not x_user_id:
        raise AuthenticationError("Missing X-User-Id header")
    try:
        return UUID(x_user_id)
    except ValueError as e:
        raise AuthenticationError("X-User-Id header is not a valid UUID") from e


async def require_admin(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_async_db),
) -> UUID:
    """
    Caller identity, restricted to admins.

    Raises:
        PermissionDeniedError: Caller has no admin role
    """
    if not await user_role_crud.is_admin(db, user_id):
        raise PermissionDeniedError("Admin role required", details={"user_id": str(user_id)})
    return user_id


def get_chat_service(
    db: AsyncSession = Depends(get_async_db),
    completion_client: ChatCompletionClient = Depends(get_chat_completion_client),
) -> ChatService:
    """
    Get chat service instance.

    Args:
        db: Async database session (injected via Depends)
        completion_client: Chat completions client (injected via Depends)

    Returns:
        ChatService: Chat pipeline service
    """
    return ChatService(
        db=db,
        completion_client=completion_client,
        history_window=get_settings().chat_completion.history_window,
    )


def get_conversation_service(
    db: AsyncSession = Depends(get_async_db),
    chat_service: ChatService = Depends(get_chat_service),
) -> ConversationService:
    return ConversationService(db=db, chat_service=chat_service)


def get_module_service(db: AsyncSession = Depends(get_async_db)) -> ModuleService:
    return ModuleService(db=db)


def get_document_service(
    db: AsyncSession = Depends(get_async_db),
    ocr_client: LLMWhispererClient = Depends(get_ocr_client),
    metadata_client: MetadataClient = Depends(get_metadata_client),
) -> DocumentService:
    """
    Get document service instance.

    Returns:
        DocumentService: Document service with OCR and metadata clients
    """
    return DocumentService(db=db, ocr_client=ocr_client, metadata_client=metadata_client)


def get_settings_service(db: AsyncSession = Depends(get_async_db)) -> SettingsService:
    return SettingsService(db=db)
