"""Service orchestrators."""

from .base_service import BaseService
from .message_service import MessageService
from .prompt_service import PromptService
from .session_service import SessionService

__all__ = [
    "BaseService",
    "MessageService",
    "PromptService",
    "SessionService",
]
