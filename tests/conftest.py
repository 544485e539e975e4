"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database and sessions, per-test database file settings,
TestClient bound to a fresh application
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from chatlog.boundary.db import Database
from chatlog.configs import Settings
from chatlog.configs.database import DatabaseSettings
from chatlog.configs.server import ServerSettings
from chatlog.main import create_app

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def database():
    """
    Create in-memory SQLite storage client with all tables.

    Yields:
        Database: Storage client, dropped and disposed after the test
    """
    db = Database(MEMORY_URL)
    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.dispose()


@pytest.fixture
async def test_async_db(database: Database):
    """
    Open a session on the in-memory database.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with database.session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    """Settings pointing at a database file inside the test's temp directory."""
    return Settings(
        database=DatabaseSettings(path=str(tmp_path / "data" / "storage.db")),
        server=ServerSettings(),
    )


@pytest.fixture
def client(app_settings: Settings):
    """
    TestClient for a fresh application.

    Entering the client runs the lifespan, so the schema exists before the
    first request.
    """
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def row_count():
    """Provide a coroutine function counting the rows of a model's table."""

    async def _count(session: AsyncSession, model) -> int:
        return await session.scalar(select(func.count()).select_from(model))

    return _count
