"""
Message CRUD operations.

Provides message listings per session, ordered by creation time.

Dependencies: sqlalchemy, chatlog.boundary.db.models
System role: Chat message persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chatlog.boundary.db.models.message_model import MessageModel
from chatlog.boundary.db.models.session_model import SessionModel
from chatlog.boundary.db.CRUD.base_crud import BaseCRUD


class MessageCRUD(BaseCRUD[MessageModel]):
    """CRUD operations for MessageModel."""

    def __init__(self) -> None:
        """Initialize MessageCRUD with MessageModel."""
        super().__init__(MessageModel)

    async def list_for_session(
        self,
        session: AsyncSession,
        session_id: int,
    ) -> Sequence[MessageModel]:
        """
        List messages of a session, oldest first.

        Args:
            session: Async database session
            session_id: Internal session ID

        Returns:
            Sequence of MessageModel ordered by created_at, then id
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.session_id == session_id)
            .order_by(MessageModel.created_at, MessageModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_for_chat(
        self,
        session: AsyncSession,
        chat_id: str,
    ) -> Sequence[MessageModel]:
        """
        List messages of the session owning chat_id, oldest first.

        Args:
            session: Async database session
            chat_id: External chat identifier

        Returns:
            Sequence of MessageModel (empty when the chat is unknown)
        """
        stmt = (
            select(MessageModel)
            .join(SessionModel, MessageModel.session_id == SessionModel.id)
            .where(SessionModel.chat_id == chat_id)
            .order_by(MessageModel.created_at, MessageModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


message_crud = MessageCRUD()
