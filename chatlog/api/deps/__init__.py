"""API-specific dependencies."""

from .dependencies import (
    get_database,
    get_message_service,
    get_prompt_service,
    get_session_service,
    get_settings_dependency,
)

__all__ = [
    "get_database",
    "get_message_service",
    "get_prompt_service",
    "get_session_service",
    "get_settings_dependency",
]
