"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from chatlog.boundary.db.CRUD import session_crud, message_crud, prompt_crud

    # Use singleton instances
    session, created = await session_crud.find_or_create(db, chat_id)

    # Or instantiate classes directly for custom behavior
    from chatlog.boundary.db.CRUD import SessionCRUD
    custom_crud = SessionCRUD()
"""

from chatlog.boundary.db.CRUD.base_crud import BaseCRUD
from chatlog.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from chatlog.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from chatlog.boundary.db.CRUD.prompt_crud import PromptCRUD, prompt_crud

__all__ = [
    "BaseCRUD",
    "MessageCRUD",
    "message_crud",
    "PromptCRUD",
    "prompt_crud",
    "SessionCRUD",
    "session_crud",
]
