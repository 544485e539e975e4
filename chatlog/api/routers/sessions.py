"""
Session API endpoints.

Routes:
- GET /sessions/{id} - Prompts and messages of a session (internal ID)
- DELETE /sessions/{id} - Delete session (internal ID)
- GET /chats/{chat_id} - Prompts and messages of a chat's session
- DELETE /chats/{chat_id} - Delete a chat's session

Dependencies: chatlog.application.services, chatlog.models
System role: Session history HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from chatlog.api.deps import get_session_service
from chatlog.api.error_handling import handle_store_errors
from chatlog.api.routers.params import RowIdPath
from chatlog.application.services import SessionService
from chatlog.models.common import OperationResult
from chatlog.models.session import SessionHistoryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])
chats_router = APIRouter(prefix="/chats", tags=["sessions"])


@router.get("/{session_id}", response_model=SessionHistoryResponse)
@handle_store_errors
async def get_session_history(
    session_id: RowIdPath,
    session_service: SessionService = Depends(get_session_service),
) -> SessionHistoryResponse:
    """
    Get prompts and messages of a session.

    Args:
        session_id: Internal session ID, as returned by POST /messages
        session_service: Injected SessionService

    Returns:
        SessionHistoryResponse: Empty lists for an unknown session
    """
    history = await session_service.get_history(session_id)
    return SessionHistoryResponse(**history)


@router.delete("/{session_id}", response_model=OperationResult)
@handle_store_errors
async def delete_session(
    session_id: RowIdPath,
    session_service: SessionService = Depends(get_session_service),
) -> OperationResult:
    """
    Delete session by internal ID, with its messages and prompt links.

    Returns:
        OperationResult: success is False when no session had this ID
    """
    deleted = await session_service.delete_session(session_id)
    return OperationResult(success=deleted)


@chats_router.get("/{chat_id}", response_model=SessionHistoryResponse)
@handle_store_errors
async def get_chat_history(
    chat_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> SessionHistoryResponse:
    """Get prompts and messages of the session owning chat_id."""
    history = await session_service.get_chat_history(chat_id)
    return SessionHistoryResponse(**history)


@chats_router.delete("/{chat_id}", response_model=OperationResult)
@handle_store_errors
async def delete_chat(
    chat_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> OperationResult:
    """Delete the session owning chat_id, with its messages and prompt links."""
    deleted = await session_service.delete_chat(chat_id)
    return OperationResult(success=deleted)
