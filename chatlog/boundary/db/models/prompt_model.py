"""
Prompt ORM model.

Reusable prompt templates that can be attached to sessions.

Dependencies: sqlalchemy, chatlog.boundary.db.base
System role: Prompt template persistence
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from chatlog.boundary.db.base import Base, IntegerIdMixin, TimestampMixin

DEFAULT_PROMPT_ROLE = "system"


class PromptModel(Base, IntegerIdMixin, TimestampMixin):
    """
    Prompt ORM model.

    provider_id is a weak reference to providers.id with no enforced
    foreign key.

    Attributes:
        id: Integer primary key
        role: Message role the prompt is sent as (defaults to "system")
        content: Prompt text
        provider_id: Optional provider reference
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "prompts"

    role: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=DEFAULT_PROMPT_ROLE,
        server_default=DEFAULT_PROMPT_ROLE,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    provider_id: Mapped[int | None] = mapped_column(Integer, nullable=True, default=None)
