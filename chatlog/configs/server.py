"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Bind address, routing prefix and CORS policy for the API
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from chatlog.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """uvicorn and FastAPI server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SERVER_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=3000, description="Bind port")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload")
    api_prefix: str = Field(default="", description="Prefix for all API routes")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )
