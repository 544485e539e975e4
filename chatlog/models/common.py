"""
Common response models.

Operation result and error schemas shared by all routers.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Any

from pydantic import BaseModel, Field


class OperationResult(BaseModel):
    """Outcome of a write that may have matched nothing."""

    success: bool


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    details: Any | None = Field(default=None, description="Additional error context")
