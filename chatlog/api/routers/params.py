"""
Shared path parameters.

Dependencies: fastapi, chatlog.models
System role: Path validation reused across routers
"""

from typing import Annotated

from fastapi import Path

from chatlog.models.fields import SQLITE_MAX_INTEGER

RowIdPath = Annotated[
    int,
    Path(ge=1, le=SQLITE_MAX_INTEGER, description="Integer row ID"),
]
