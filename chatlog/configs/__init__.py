"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from chatlog.configs.database import DatabaseSettings
from chatlog.configs.server import ServerSettings
from chatlog.configs.settings import Settings, get_settings

__all__ = ["DatabaseSettings", "ServerSettings", "Settings", "get_settings"]
