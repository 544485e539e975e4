"""
Shared field types for request schemas.

Dependencies: pydantic
System role: Input normalisation reused across request models
"""

from typing import Annotated

from pydantic import BeforeValidator, Field, StrictStr


def _chat_id_to_str(value: object) -> object:
    """Chat IDs arrive as strings or numbers and are stored as text."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


ChatId = Annotated[StrictStr, BeforeValidator(_chat_id_to_str), Field(min_length=1)]

# Largest value SQLite stores in an INTEGER column
SQLITE_MAX_INTEGER = 2**63 - 1

RowId = Annotated[int, Field(ge=1, le=SQLITE_MAX_INTEGER)]
