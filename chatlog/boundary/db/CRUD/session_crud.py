"""
Session CRUD operations.

Provides Create, Read, Delete operations for SessionModel with lookups
by the external chat identifier.

Dependencies: sqlalchemy, chatlog.boundary.db.models
System role: Session persistence operations
"""

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from chatlog.boundary.db.models.session_model import SessionModel
from chatlog.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """
    CRUD operations for SessionModel.

    Extends BaseCRUD with chat_id keyed lookups and the find-or-create
    used when the first message of a chat arrives. Plain create() raises
    IntegrityError for a chat_id that already exists.
    """

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_by_chat_id(
        self,
        session: AsyncSession,
        chat_id: str,
    ) -> SessionModel | None:
        """
        Retrieve session by external chat identifier.

        Args:
            session: Async database session
            chat_id: External chat identifier

        Returns:
            SessionModel if found, None otherwise
        """
        stmt = select(SessionModel).where(SessionModel.chat_id == chat_id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_or_create(
        self,
        session: AsyncSession,
        chat_id: str,
    ) -> tuple[SessionModel, bool]:
        """
        Return the session for chat_id, creating it on first reference.

        The insert is a single INSERT ... ON CONFLICT(chat_id) DO NOTHING,
        so a concurrent request that creates the same chat first makes this
        one fall through to the re-lookup instead of failing on the unique
        constraint.

        Args:
            session: Async database session
            chat_id: External chat identifier

        Returns:
            tuple[SessionModel, bool]: The session and whether it was created
        """
        existing = await self.get_by_chat_id(session, chat_id)
        if existing is not None:
            return existing, False

        stmt = (
            sqlite_insert(SessionModel.__table__)
            .values(chat_id=chat_id)
            .on_conflict_do_nothing(index_elements=["chat_id"])
        )
        result = await session.execute(stmt)

        created = await self.get_by_chat_id(session, chat_id)
        return created, result.rowcount > 0

    async def delete_by_chat_id(self, session: AsyncSession, chat_id: str) -> int:
        """
        Delete session by external chat identifier.

        Messages and prompt links go with it through ON DELETE CASCADE.

        Args:
            session: Async database session
            chat_id: External chat identifier

        Returns:
            Number of sessions deleted (0 or 1)
        """
        stmt = delete(SessionModel).where(SessionModel.chat_id == chat_id)
        result = await session.execute(stmt)
        return result.rowcount


session_crud = SessionCRUD()
