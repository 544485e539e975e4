"""
Session ORM model.

Represents a conversation thread keyed by an external chat identifier.

Dependencies: sqlalchemy, chatlog.boundary.db.base
System role: Session persistence for chat context management
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from chatlog.boundary.db.base import Base, IntegerIdMixin, TimestampMixin


class SessionModel(Base, IntegerIdMixin, TimestampMixin):
    """
    Session ORM model.

    Sessions are found-or-created by chat_id when the first message for an
    unseen chat arrives. Messages and prompt links are removed by the
    database (ON DELETE CASCADE) when their session is deleted.

    Attributes:
        id: Internal integer primary key
        chat_id: External chat identifier (unique)
        created_at: Session creation timestamp (UTC)
    """

    __tablename__ = "sessions"

    chat_id: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
