"""
Chat API endpoint.

Routes:
- POST /chat - Stateless tutor turn over client-supplied messages

Dependencies: tutorbot.application.services, tutorbot.models
System role: Chat HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from tutorbot.api.deps.dependencies import get_chat_service, get_current_user_id
from tutorbot.application.adapters import turns_to_messages
from tutorbot.application.services import ChatService
from tutorbot.models.chat import ChatRequest, ChatResponse
from tutorbot.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    user_id: UUID = Depends(get_current_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Generate the tutor reply for the last user message.

    Args:
        request: ChatRequest with messages and optional moduleId
        user_id: Caller identity
        chat_service: Injected ChatService

    Returns:
        ChatResponse: response, toolsUsed (always empty), hasModuleContent
    """
    log_with_context(
        logger,
        logging.INFO,
        "Chat request",
        user_id=user_id,
        module_id=request.module_id,
        turns=len(request.messages),
    )

    messages = turns_to_messages(turn.model_dump() for turn in request.messages)
    result = await chat_service.process_chat(messages, request.module_id)

    return ChatResponse(
        response=result.response,
        tools_used=result.tools_used,
        has_module_content=result.has_module_content,
    )
