"""
Base configuration settings.

Shared fields inherited by every settings class: deployment environment,
debug flag and root log level. Values come from the process environment
or a local .env file.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

from typing import Annotated, Literal

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _upper(value: object) -> object:
    return value.upper() if isinstance(value, str) else value


class BaseSettings(PydanticBaseSettings):
    """Settings shared by the database and server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name, only used in logs",
    )
    debug: bool = Field(default=False, description="FastAPI debug mode")
    log_level: Annotated[LogLevel, BeforeValidator(_upper)] = Field(
        default="INFO",
        description="Root log level; case-insensitive in the environment",
    )
