"""
Prompt API endpoints.

Routes:
- POST /prompt - Store a prompt template
- POST /add-prompt-to-session - Attach a prompt to a chat's session

Dependencies: chatlog.application.services, chatlog.models
System role: Prompt management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from chatlog.api.deps import get_prompt_service
from chatlog.api.error_handling import handle_store_errors
from chatlog.application.services import PromptService
from chatlog.models.common import ErrorResponse, OperationResult
from chatlog.models.prompt import (
    AddPromptToSessionRequest,
    CreatePromptRequest,
    CreatePromptResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["prompts"])


@router.post("/prompt", response_model=CreatePromptResponse)
@handle_store_errors
async def create_prompt(
    request: CreatePromptRequest,
    prompt_service: PromptService = Depends(get_prompt_service),
) -> CreatePromptResponse:
    """
    Store a reusable prompt template.

    Args:
        request: Role (defaults to system) and content
        prompt_service: Injected PromptService

    Returns:
        CreatePromptResponse: ID of the stored prompt
    """
    prompt_id = await prompt_service.create_prompt(role=request.role, content=request.content)
    return CreatePromptResponse(prompt_id=prompt_id)


@router.post(
    "/add-prompt-to-session",
    response_model=OperationResult,
    responses={404: {"model": ErrorResponse}},
)
@handle_store_errors
async def add_prompt_to_session(
    request: AddPromptToSessionRequest,
    prompt_service: PromptService = Depends(get_prompt_service),
) -> OperationResult:
    """
    Attach a prompt to the session of an existing chat.

    Returns:
        OperationResult: success is False when the link already existed

    Raises:
        HTTPException(404): Session or prompt not found
    """
    linked = await prompt_service.add_prompt_to_session(
        chat_id=request.chat_id,
        prompt_id=request.prompt_id,
    )
    return OperationResult(success=linked)
