"""
Conversation API endpoints.

Routes:
- GET /conversations - Caller's conversations, newest activity first
- POST /conversations - Create conversation
- GET /conversations/{id} - Get conversation
- DELETE /conversations/{id} - Delete conversation and its messages
- GET /conversations/{id}/messages - Messages in creation order
- POST /conversations/{id}/messages - Send a message and store the tutor reply

Dependencies: tutorbot.application.services, tutorbot.models
System role: Conversation HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from tutorbot.api.deps.dependencies import get_conversation_service, get_current_user_id
from tutorbot.application.services import ConversationService
from tutorbot.models.common import DeleteResponse
from tutorbot.models.conversation import (
    ConversationResponse,
    CreateConversationRequest,
    MessageExchangeResponse,
    MessageResponse,
    SendMessageRequest,
)

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.get("", response_model=list[ConversationResponse])
async def list_conversations(
    limit: int | None = Query(None, ge=1, le=500),
    user_id: UUID = Depends(get_current_user_id),
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> list[ConversationResponse]:
    conversations = await conversation_service.list_conversations(user_id, limit=limit)
    return [ConversationResponse.model_validate(c) for c in conversations]


@router.post("", response_model=ConversationResponse, status_code=201)
async def create_conversation(
    request: CreateConversationRequest,
    user_id: UUID = Depends(get_current_user_id),
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> ConversationResponse:
    conversation = await conversation_service.create_conversation(
        user_id=user_id,
        module_id=request.module_id,
        title=request.title,
    )
    return ConversationResponse.model_validate(conversation)


@router.get("/{conversation_id}", response_model=ConversationResponse)
async def get_conversation(
    conversation_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> ConversationResponse:
    conversation = await conversation_service.get_conversation(conversation_id, user_id)
    return ConversationResponse.model_validate(conversation)


@router.delete("/{conversation_id}", response_model=DeleteResponse)
async def delete_conversation(
    conversation_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> DeleteResponse:
    await conversation_service.delete_conversation(conversation_id, user_id)
    return DeleteResponse(id=str(conversation_id))


@router.get("/{conversation_id}/messages", response_model=list[MessageResponse])
async def list_messages(
    conversation_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> list[MessageResponse]:
    messages = await conversation_service.list_messages(conversation_id, user_id)
    return [MessageResponse.model_validate(m) for m in messages]


@router.post("/{conversation_id}/messages", response_model=MessageExchangeResponse, status_code=201)
async def send_message(
    conversation_id: UUID,
    request: SendMessageRequest,
    user_id: UUID = Depends(get_current_user_id),
    conversation_service: ConversationService = Depends(get_conversation_service),
) -> MessageExchangeResponse:
    """
    Send a message and store the tutor reply.

    Uses the conversation's module, or the globally active module for
    general conversations. The title is generated after the first exchange.
    """
    exchange = await conversation_service.send_message(
        conversation_id,
        user_id,
        request.content,
        question_context=request.question_context,
    )
    return MessageExchangeResponse(
        user_message=MessageResponse.model_validate(exchange.user_message),
        ai_message=MessageResponse.model_validate(exchange.ai_message),
        has_module_content=exchange.has_module_content,
        conversation=ConversationResponse.model_validate(exchange.conversation),
    )
