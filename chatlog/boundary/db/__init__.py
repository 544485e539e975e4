"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIdMixin, TimestampMixin: Model building blocks
  - Database, get_async_engine(), get_async_db(): Connection management
  - ProviderModel, PromptModel, SessionModel, SessionPromptModel, MessageModel: Entities
  - MessageRole: Enumerated message roles
  - session_crud, message_crud, prompt_crud: CRUD operation singletons

Dependencies: sqlalchemy, aiosqlite, chatlog.configs
System role: Database adapter providing persistent storage for sessions,
messages and prompt templates.
"""

from chatlog.boundary.db.base import Base, IntegerIdMixin, TimestampMixin
from chatlog.boundary.db.connection import Database, get_async_db, get_async_engine
from chatlog.boundary.db.models import (
    MessageModel,
    MessageRole,
    PromptModel,
    ProviderModel,
    SessionModel,
    SessionPromptModel,
)
from chatlog.boundary.db.CRUD import (
    BaseCRUD,
    MessageCRUD,
    PromptCRUD,
    SessionCRUD,
    message_crud,
    prompt_crud,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIdMixin",
    "TimestampMixin",
    # Connection
    "Database",
    "get_async_db",
    "get_async_engine",
    # Models
    "MessageModel",
    "MessageRole",
    "PromptModel",
    "ProviderModel",
    "SessionModel",
    "SessionPromptModel",
    # CRUD classes
    "BaseCRUD",
    "MessageCRUD",
    "PromptCRUD",
    "SessionCRUD",
    # CRUD singletons
    "message_crud",
    "prompt_crud",
    "session_crud",
]
