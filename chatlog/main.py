"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, chatlog.api, chatlog.observability, chatlog.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatlog import __version__
from chatlog.api import api_router
from chatlog.api.error_handling import register_exception_handlers
from chatlog.boundary.db import Database
from chatlog.configs import Settings, get_settings
from chatlog.observability.logger import configure_logging
from chatlog.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Creates the database schema on startup (idempotent) and releases
    pooled connections on shutdown. A failure here aborts startup.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    try:
        settings.database.ensure_directory()
        await database.create_tables()
    except Exception:
        logger.exception(
            "Failed to initialize database",
            extra={"database_url": settings.database.database_url},
        )
        raise
    logger.info("Application startup complete")

    yield

    await database.dispose()
    logger.info("Application shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Explicit settings (tests pass a temporary database here);
            defaults to the cached environment settings

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="chatlog",
        description="Chat session, message and prompt storage API",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database.from_settings(settings.database)

    # Added first = innermost; correlation must wrap request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.server.api_prefix)

    return app


def run() -> None:
    """Serve the application with uvicorn using server settings."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "chatlog.main:create_app",
        factory=True,
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
