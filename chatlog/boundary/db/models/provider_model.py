"""
Provider ORM model.

Describes an LLM provider/model pair. Kept in the schema for prompts that
reference it by provider_id; no API route reads or writes it.

Dependencies: sqlalchemy, chatlog.boundary.db.base
System role: Inert provider catalogue
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from chatlog.boundary.db.base import Base, IntegerIdMixin, TimestampMixin


class ProviderModel(Base, IntegerIdMixin, TimestampMixin):
    """
    Provider ORM model.

    Attributes:
        id: Integer primary key
        model: Model identifier at the provider
        name: Provider display name
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "providers"

    model: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
