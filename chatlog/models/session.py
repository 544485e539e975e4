"""
Session domain models and schemas.

Dependencies: pydantic
System role: Session API contracts
"""

from pydantic import BaseModel, Field

from chatlog.models.message import MessageResponse
from chatlog.models.prompt import PromptResponse


class SessionHistoryResponse(BaseModel):
    """Prompts attached to a session and its messages, oldest first."""

    prompts: list[PromptResponse] = Field(default_factory=list)
    messages: list[MessageResponse] = Field(default_factory=list)
