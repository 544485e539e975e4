"""
Message domain models and schemas.

Request/response schemas for message operations.

Dependencies: pydantic, chatlog.boundary.db.models
System role: Message API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from chatlog.boundary.db.models.message_model import MessageRole
from chatlog.models.fields import ChatId


class CreateMessageRequest(BaseModel):
    """Request schema for appending a message to a chat."""

    model_config = ConfigDict(populate_by_name=True)

    chat_id: ChatId = Field(alias="chatId", description="External chat identifier")
    role: MessageRole
    content: str


class UpdateMessageRequest(BaseModel):
    """Request schema for replacing a message's role and content."""

    role: MessageRole
    content: str


class CreateMessageResponse(BaseModel):
    """Identifiers produced by appending a message."""

    message_id: int
    session_id: int


class MessageResponse(BaseModel):
    """Response schema for a single message."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    role: MessageRole
    content: str
    created_at: datetime
