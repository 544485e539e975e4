"""
Session/prompt link ORM model.

Dependencies: sqlalchemy, chatlog.boundary.db.base
System role: Many-to-many join between sessions and prompts
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from chatlog.boundary.db.base import Base, TimestampMixin


class SessionPromptModel(Base, TimestampMixin):
    """
    Link between a session and a prompt.

    The composite primary key prevents linking the same prompt to the same
    session twice. Deleting either side removes the link.

    Attributes:
        session_id: Linked session
        prompt_id: Linked prompt
        created_at: Link creation timestamp (UTC)
    """

    __tablename__ = "session_prompts"

    session_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("sessions.id", ondelete="CASCADE"),
        primary_key=True,
    )
    prompt_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("prompts.id", ondelete="CASCADE"),
        primary_key=True,
    )
