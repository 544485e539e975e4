"""
Message ORM model.

Chat messages belonging to a session.

Dependencies: sqlalchemy, chatlog.boundary.db.base
System role: Chat message persistence
"""

import enum

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from chatlog.boundary.db.base import Base, IntegerIdMixin, TimestampMixin


class MessageRole(str, enum.Enum):
    """
    Author of a chat message.

    USER: End user input
    ASSISTANT: Model reply
    SYSTEM: Instructions for the model
    TOOL: Tool call output
    """

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    TOOL = "tool"


ROLE_VALUES = tuple(role.value for role in MessageRole)


class MessageModel(Base, IntegerIdMixin, TimestampMixin):
    """
    Message ORM model.

    role is restricted to MessageRole values by a CHECK constraint, so an
    invalid role is rejected by the database itself.

    Attributes:
        id: Integer primary key
        session_id: Owning session (cascade delete)
        role: One of user, assistant, system, tool
        content: Message text
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "messages"
    __table_args__ = (
        CheckConstraint(
            "role IN ({})".format(", ".join(f"'{value}'" for value in ROLE_VALUES)),
            name="ck_messages_role",
        ),
        {"sqlite_autoincrement": True},
    )

    session_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
