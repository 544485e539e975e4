"""
Message service orchestrator.

Coordinates appending, reading, editing and deleting chat messages.

Dependencies: chatlog.boundary.db.CRUD, chatlog.core.exceptions
System role: Message use case orchestration
"""

import logging

from chatlog.application.services.base_service import BaseService
from chatlog.boundary.db.CRUD.message_crud import message_crud
from chatlog.boundary.db.CRUD.session_crud import session_crud
from chatlog.boundary.db.models.message_model import MessageModel, MessageRole
from chatlog.core.exceptions import MessageNotFoundError
from chatlog.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def role_value(role: MessageRole | str) -> str:
    """Plain string stored for a role."""
    return role.value if isinstance(role, MessageRole) else role


def message_to_dict(message: MessageModel) -> dict:
    """Public representation of a stored message."""
    return {
        "id": message.id,
        "role": message.role,
        "content": message.content,
        "created_at": message.created_at,
    }


class MessageService(BaseService):
    """Message service orchestrator."""

    async def post_message(
        self,
        chat_id: str,
        role: MessageRole | str,
        content: str,
    ) -> dict:
        """
        Append a message to a chat, creating its session on first use.

        Args:
            chat_id: External chat identifier
            role: Message role
            content: Message text

        Returns:
            dict: message_id and session_id of the stored message

        Raises:
            DataAccessError: If the insert fails (e.g. role outside the enumeration)
        """
        async with self.unit_of_work("post_message"):
            session, created = await session_crud.find_or_create(self.db, chat_id)
            message = await message_crud.create(
                self.db,
                session_id=session.id,
                role=role_value(role),
                content=content,
            )

        log_with_context(
            logger,
            logging.INFO,
            "Message stored",
            message_id=message.id,
            session_id=session.id,
            session_created=created,
        )
        return {"message_id": message.id, "session_id": session.id}

    async def get_message(self, message_id: int) -> dict:
        """
        Get message by ID.

        Raises:
            MessageNotFoundError: If no message has this ID
        """
        async with self.unit_of_work("get_message"):
            message = await message_crud.get_by_id(self.db, message_id)

        if message is None:
            raise MessageNotFoundError(message_id)
        return message_to_dict(message)

    async def update_message(
        self,
        message_id: int,
        role: MessageRole | str,
        content: str,
    ) -> dict:
        """
        Replace role and content of a message.

        Args:
            message_id: Message ID
            role: New role
            content: New text

        Returns:
            dict: The updated message

        Raises:
            MessageNotFoundError: If no row was affected
            DataAccessError: If the update fails
        """
        async with self.unit_of_work("update_message"):
            affected = await message_crud.update_by_id(
                self.db,
                message_id,
                role=role_value(role),
                content=content,
            )
            message = await message_crud.get_by_id(self.db, message_id) if affected else None

        if message is None:
            raise MessageNotFoundError(message_id)

        log_with_context(logger, logging.INFO, "Message updated", message_id=message_id)
        return message_to_dict(message)

    async def delete_message(self, message_id: int) -> bool:
        """
        Delete message by ID.

        Returns:
            bool: True if deleted, False if no message had this ID
        """
        async with self.unit_of_work("delete_message"):
            deleted = await message_crud.delete_by_id(self.db, message_id)

        log_with_context(
            logger,
            logging.INFO,
            "Message delete",
            message_id=message_id,
            deleted=deleted,
        )
        return deleted > 0
