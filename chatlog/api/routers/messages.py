"""
Message API endpoints.

Routes:
- POST /messages - Append a message, creating the chat's session if needed
- GET /messages/{id} - Get message
- PUT /messages/{id} - Replace role and content
- DELETE /messages/{id} - Delete message

Dependencies: chatlog.application.services, chatlog.models
System role: Message management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from chatlog.api.deps import get_message_service
from chatlog.api.error_handling import handle_store_errors
from chatlog.api.routers.params import RowIdPath
from chatlog.application.services import MessageService
from chatlog.models.common import ErrorResponse, OperationResult
from chatlog.models.message import (
    CreateMessageRequest,
    CreateMessageResponse,
    MessageResponse,
    UpdateMessageRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=CreateMessageResponse)
@handle_store_errors
async def post_message(
    request: CreateMessageRequest,
    message_service: MessageService = Depends(get_message_service),
) -> CreateMessageResponse:
    """
    Append a message to a chat.

    The chat's session is created on its first message.

    Returns:
        CreateMessageResponse: IDs of the stored message and its session
    """
    result = await message_service.post_message(
        chat_id=request.chat_id,
        role=request.role,
        content=request.content,
    )
    return CreateMessageResponse(**result)


@router.get(
    "/{message_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
@handle_store_errors
async def get_message(
    message_id: RowIdPath,
    message_service: MessageService = Depends(get_message_service),
) -> MessageResponse:
    """
    Get message by ID.

    Raises:
        HTTPException(404): Message not found
    """
    message = await message_service.get_message(message_id)
    return MessageResponse(**message)


@router.put(
    "/{message_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
@handle_store_errors
async def update_message(
    message_id: RowIdPath,
    request: UpdateMessageRequest,
    message_service: MessageService = Depends(get_message_service),
) -> MessageResponse:
    """
    Replace role and content of a message.

    Returns:
        MessageResponse: The updated message

    Raises:
        HTTPException(404): No message with this ID
    """
    message = await message_service.update_message(
        message_id,
        role=request.role,
        content=request.content,
    )
    return MessageResponse(**message)


@router.delete("/{message_id}", response_model=OperationResult)
@handle_store_errors
async def delete_message(
    message_id: RowIdPath,
    message_service: MessageService = Depends(get_message_service),
) -> OperationResult:
    """
    Delete message by ID.

    Returns:
        OperationResult: success is False when no message had this ID
    """
    deleted = await message_service.delete_message(message_id)
    return OperationResult(success=deleted)
