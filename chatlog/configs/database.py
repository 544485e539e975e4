"""
Database configuration settings.

Manages the SQLite database location for SQLAlchemy's aiosqlite driver.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from chatlog.configs.base import BaseSettings

MEMORY_PATH = ":memory:"


class DatabaseSettings(BaseSettings):
    """SQLite database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    path: str = Field(
        default="data/storage.db",
        description="SQLite database file path (':memory:' for a transient database)",
    )
    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL, overrides path when set",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def database_url(self) -> str:
        """
        Construct async SQLite connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        if self.url:
            return self.url
        return f"sqlite+aiosqlite:///{self.path}"

    @property
    def is_memory(self) -> bool:
        """Whether the configured database lives only in memory."""
        return MEMORY_PATH in self.database_url

    def ensure_directory(self) -> None:
        """Create the parent directory of the database file if it is missing."""
        if self.url or self.is_memory:
            return
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
