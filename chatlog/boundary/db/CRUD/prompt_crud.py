"""
Prompt CRUD operations.

Provides prompt creation, session linking through session_prompts, and
prompt listings per session.

Dependencies: sqlalchemy, chatlog.boundary.db.models
System role: Prompt template persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from chatlog.boundary.db.models.prompt_model import PromptModel
from chatlog.boundary.db.models.session_model import SessionModel
from chatlog.boundary.db.models.session_prompt_model import SessionPromptModel
from chatlog.boundary.db.CRUD.base_crud import BaseCRUD


class PromptCRUD(BaseCRUD[PromptModel]):
    """CRUD operations for PromptModel and its session links."""

    def __init__(self) -> None:
        """Initialize PromptCRUD with PromptModel."""
        super().__init__(PromptModel)

    async def link_to_session(
        self,
        session: AsyncSession,
        session_id: int,
        prompt_id: int,
    ) -> int:
        """
        Attach a prompt to a session.

        An existing link is left untouched and reported as 0 affected rows.

        Args:
            session: Async database session
            session_id: Internal session ID
            prompt_id: Prompt ID

        Returns:
            Number of links created (0 or 1)

        Raises:
            IntegrityError: If session or prompt does not exist
        """
        stmt = (
            sqlite_insert(SessionPromptModel.__table__)
            .values(session_id=session_id, prompt_id=prompt_id)
            .on_conflict_do_nothing(
                index_elements=["session_id", "prompt_id"]
            )
        )
        result = await session.execute(stmt)
        return result.rowcount

    async def list_for_session(
        self,
        session: AsyncSession,
        session_id: int,
    ) -> Sequence[PromptModel]:
        """
        List prompts linked to a session in link order.

        Args:
            session: Async database session
            session_id: Internal session ID

        Returns:
            Sequence of PromptModel
        """
        stmt = (
            select(PromptModel)
            .join(SessionPromptModel, SessionPromptModel.prompt_id == PromptModel.id)
            .where(SessionPromptModel.session_id == session_id)
            .order_by(SessionPromptModel.created_at, PromptModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def list_for_chat(
        self,
        session: AsyncSession,
        chat_id: str,
    ) -> Sequence[PromptModel]:
        """
        List prompts linked to the session owning chat_id.

        Args:
            session: Async database session
            chat_id: External chat identifier

        Returns:
            Sequence of PromptModel (empty when the chat is unknown)
        """
        stmt = (
            select(PromptModel)
            .join(SessionPromptModel, SessionPromptModel.prompt_id == PromptModel.id)
            .join(SessionModel, SessionModel.id == SessionPromptModel.session_id)
            .where(SessionModel.chat_id == chat_id)
            .order_by(SessionPromptModel.created_at, PromptModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


prompt_crud = PromptCRUD()
