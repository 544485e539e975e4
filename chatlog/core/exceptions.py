"""
Exception hierarchy for the chatlog service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ChatLogException(Exception):
    """Base exception for all chatlog application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NotFoundError(ChatLogException):
    """Base class for lookups that matched no row."""


class SessionNotFoundError(NotFoundError):
    """Raised when a session cannot be found."""

    def __init__(self, session_ref: str | int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_ref: Internal ID or chat ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session"] = session_ref
        super().__init__("Session not found", details)


class MessageNotFoundError(NotFoundError):
    """Raised when a message cannot be found."""

    def __init__(self, message_id: int, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["message_id"] = message_id
        super().__init__("Message not found", details)


class PromptNotFoundError(NotFoundError):
    """Raised when a prompt cannot be found."""

    def __init__(self, prompt_id: int, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["prompt_id"] = prompt_id
        super().__init__("Prompt not found", details)


class DataAccessError(ChatLogException):
    """Raised when a storage operation fails (constraint violation, missing table, driver error)."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize data access error.

        Args:
            message: Error message
            operation: Service operation that failed (post_message, link_prompt, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
