"""
Database connection management.

Provides the Database storage client (async engine plus session factory)
and the FastAPI dependency that injects a per-request AsyncSession.

Dependencies: sqlalchemy, aiosqlite, chatlog.configs
System role: Database connection lifecycle management
"""

import logging
from typing import Any, AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from chatlog.boundary.db.base import Base
from chatlog.configs.database import MEMORY_PATH, DatabaseSettings

# Import all models to register them with Base.metadata
import chatlog.boundary.db.models  # noqa: F401

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """Turn on foreign key enforcement; SQLite leaves it off per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_async_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create async SQLAlchemy engine for SQLite.

    In-memory databases share a single connection through StaticPool so that
    every session sees the same tables. Foreign keys are enabled on every
    new DBAPI connection.

    Args:
        database_url: SQLAlchemy URL (sqlite+aiosqlite://...)
        echo: Log emitted SQL

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    engine_kwargs: dict[str, Any] = {"echo": echo}
    if MEMORY_PATH in database_url:
        engine_kwargs.update(
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    engine = create_async_engine(database_url, **engine_kwargs)
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class Database:
    """
    Explicitly constructed storage client.

    Owns the engine and session factory. One instance is created per
    application (or per test) and handed to request handlers through
    app.state, so nothing holds a module-level connection.

    Attributes:
        engine: Async SQLAlchemy engine
        session_factory: async_sessionmaker producing request-scoped sessions
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """
        Initialize storage client.

        Args:
            database_url: SQLAlchemy URL (sqlite+aiosqlite://...)
            echo: Log emitted SQL
        """
        self.database_url = database_url
        self.engine = get_async_engine(database_url, echo=echo)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: DatabaseSettings) -> "Database":
        """Build a storage client from database settings."""
        return cls(settings.database_url, echo=settings.echo_sql)

    async def create_tables(self) -> None:
        """
        Create all tables from registered ORM models.

        Idempotent: tables that already exist are left unchanged, so this is
        safe to run on every startup.

        Raises:
            SQLAlchemyError: If the database cannot be opened or DDL fails
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready", extra={"tables": sorted(Base.metadata.tables)})

    async def drop_tables(self) -> None:
        """
        Drop all tables and their data.

        WARNING: Irreversible data loss. Only use in development and tests.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def ping(self) -> bool:
        """
        Check that the database answers a trivial query.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(text("SELECT 1"))
                return result.scalar() == 1
        except SQLAlchemyError as e:
            logger.warning("Database ping failed", extra={"error": str(e)})
            return False

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


async def get_async_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Opens a session from the Database stored on app.state and closes it after
    the route completes, even if exceptions occur. Uncommitted work is rolled
    back on close.

    Yields:
        AsyncSession: Async SQLAlchemy session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @router.get("/messages/{message_id}")
        async def get_message(message_id: int, db: AsyncSession = Depends(get_async_db)):
            return await message_crud.get_by_id(db, message_id)
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        yield session
