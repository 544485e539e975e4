"""
Prompt domain models and schemas.

Dependencies: pydantic, chatlog.boundary.db.models
System role: Prompt API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from chatlog.boundary.db.models.message_model import MessageRole
from chatlog.models.fields import ChatId, RowId


class CreatePromptRequest(BaseModel):
    """Request schema for storing a prompt template."""

    role: MessageRole = MessageRole.SYSTEM
    content: str


class CreatePromptResponse(BaseModel):
    """Identifier of the stored prompt."""

    prompt_id: int


class AddPromptToSessionRequest(BaseModel):
    """Request schema for linking a prompt to the session of a chat."""

    model_config = ConfigDict(populate_by_name=True)

    chat_id: ChatId = Field(alias="chatId", description="External chat identifier")
    prompt_id: RowId = Field(alias="promptId", description="Prompt to attach")


class PromptResponse(BaseModel):
    """Response schema for a prompt attached to a session."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    role: str
    content: str
    provider_id: int | None = None
    created_at: datetime
