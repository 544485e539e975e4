"""
Database models package.

Exports:
  - ProviderModel: Inert provider catalogue
  - PromptModel: Prompt template
  - SessionModel: Chat session keyed by chat_id
  - SessionPromptModel: Session/prompt link
  - MessageModel, MessageRole: Chat message and role enum

Dependencies: sqlalchemy, chatlog.boundary.db.base
System role: Database model definitions for domain entities
"""

from chatlog.boundary.db.models.provider_model import ProviderModel
from chatlog.boundary.db.models.prompt_model import DEFAULT_PROMPT_ROLE, PromptModel
from chatlog.boundary.db.models.session_model import SessionModel
from chatlog.boundary.db.models.session_prompt_model import SessionPromptModel
from chatlog.boundary.db.models.message_model import MessageModel, MessageRole, ROLE_VALUES

__all__ = [
    "DEFAULT_PROMPT_ROLE",
    "MessageModel",
    "MessageRole",
    "PromptModel",
    "ProviderModel",
    "ROLE_VALUES",
    "SessionModel",
    "SessionPromptModel",
]
