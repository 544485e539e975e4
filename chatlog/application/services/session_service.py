"""
Session service orchestrator.

Coordinates reading and deleting session history, addressed either by
internal session ID or by external chat ID.

Dependencies: chatlog.boundary.db.CRUD
System role: Session use case orchestration
"""

import logging

from chatlog.application.services.base_service import BaseService
from chatlog.application.services.message_service import message_to_dict
from chatlog.boundary.db.CRUD.message_crud import message_crud
from chatlog.boundary.db.CRUD.prompt_crud import prompt_crud
from chatlog.boundary.db.CRUD.session_crud import session_crud
from chatlog.boundary.db.models.prompt_model import PromptModel
from chatlog.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def prompt_to_dict(prompt: PromptModel) -> dict:
    """Public representation of a stored prompt."""
    return {
        "id": prompt.id,
        "role": prompt.role,
        "content": prompt.content,
        "provider_id": prompt.provider_id,
        "created_at": prompt.created_at,
    }


class SessionService(BaseService):
    """Session service orchestrator."""

    async def get_history(self, session_id: int) -> dict:
        """
        Get prompts and messages of a session.

        Args:
            session_id: Internal session ID

        Returns:
            dict: prompts and messages lists, both empty for an unknown session
        """
        async with self.unit_of_work("get_history"):
            prompts = await prompt_crud.list_for_session(self.db, session_id)
            messages = await message_crud.list_for_session(self.db, session_id)

        return {
            "prompts": [prompt_to_dict(p) for p in prompts],
            "messages": [message_to_dict(m) for m in messages],
        }

    async def get_chat_history(self, chat_id: str) -> dict:
        """
        Get prompts and messages of the session owning chat_id.

        Args:
            chat_id: External chat identifier

        Returns:
            dict: prompts and messages lists, both empty for an unknown chat
        """
        async with self.unit_of_work("get_chat_history"):
            prompts = await prompt_crud.list_for_chat(self.db, chat_id)
            messages = await message_crud.list_for_chat(self.db, chat_id)

        return {
            "prompts": [prompt_to_dict(p) for p in prompts],
            "messages": [message_to_dict(m) for m in messages],
        }

    async def delete_session(self, session_id: int) -> bool:
        """
        Delete session by internal ID, with its messages and prompt links.

        Returns:
            bool: True if deleted, False if not found
        """
        async with self.unit_of_work("delete_session"):
            deleted = await session_crud.delete_by_id(self.db, session_id)

        log_with_context(logger, logging.INFO, "Session delete", session_id=session_id, deleted=deleted)
        return deleted > 0

    async def delete_chat(self, chat_id: str) -> bool:
        """
        Delete the session owning chat_id, with its messages and prompt links.

        Returns:
            bool: True if deleted, False if not found
        """
        async with self.unit_of_work("delete_chat"):
            deleted = await session_crud.delete_by_chat_id(self.db, chat_id)

        log_with_context(logger, logging.INFO, "Chat delete", chat_id=chat_id, deleted=deleted)
        return deleted > 0
