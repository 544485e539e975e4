"""
Integration tests for the Database storage client.

Verifies schema creation, connection pragmas and health probing against
real SQLite databases (in-memory and file-backed).

System role: Verification of database connection lifecycle
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from sqlalchemy import inspect, select, text

from chatlog.boundary.db import Database
from chatlog.boundary.db.models import SessionModel
from chatlog.configs.database import DatabaseSettings


@pytest.mark.asyncio
class TestDatabase:
    """Test suite for Database."""

    async def test_create_tables_should_create_schema(self, database: Database) -> None:
        # Act
        async with database.engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        # Assert
        assert {"sessions", "messages", "prompts", "session_prompts", "providers"} <= set(tables)

    async def test_create_tables_should_be_idempotent(self, database: Database) -> None:
        async with database.session_factory() as session:
            await session.execute(text("INSERT INTO sessions (chat_id) VALUES ('abc')"))
            await session.commit()

        await database.create_tables()

        async with database.session_factory() as session:
            count = await session.scalar(text("SELECT COUNT(*) FROM sessions"))
        assert count == 1

    async def test_foreign_keys_should_be_enforced(self, database: Database) -> None:
        async with database.engine.connect() as conn:
            enabled = await conn.scalar(text("PRAGMA foreign_keys"))

        assert enabled == 1

    async def test_rows_inserted_outside_orm_should_get_created_at(
        self, database: Database
    ) -> None:
        # Arrange
        async with database.session_factory() as session:
            await session.execute(text("INSERT INTO sessions (chat_id) VALUES ('raw')"))
            await session.commit()

        # Act
        async with database.session_factory() as session:
            created = await session.scalar(
                select(SessionModel).where(SessionModel.chat_id == "raw")
            )

        # Assert
        assert created.created_at is not None
        assert created.created_at.tzinfo == timezone.utc
        assert abs(datetime.now(timezone.utc) - created.created_at) < timedelta(minutes=5)

    async def test_timestamps_should_read_back_as_utc(self, database: Database) -> None:
        # Arrange: an aware non-UTC timestamp is stored as its UTC instant
        local = datetime(2026, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        async with database.session_factory() as session:
            session.add(SessionModel(chat_id="tz", created_at=local))
            await session.commit()

        # Act
        async with database.session_factory() as session:
            stored = await session.scalar(
                select(SessionModel.created_at).where(SessionModel.chat_id == "tz")
            )

        # Assert
        assert stored == datetime(2026, 1, 1, 10, 0, tzinfo=timezone.utc)

    async def test_drop_tables_should_remove_schema(self, database: Database) -> None:
        # Act
        await database.drop_tables()

        # Assert
        async with database.engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert tables == []

    async def test_ping_should_succeed(self, database: Database) -> None:
        assert await database.ping() is True

    async def test_ping_should_fail_for_unopenable_file(self, tmp_path: Path) -> None:
        # Arrange: parent directory does not exist
        db = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'storage.db'}")

        # Act / Assert
        try:
            assert await db.ping() is False
        finally:
            await db.dispose()

    async def test_file_database_should_persist_across_clients(self, tmp_path: Path) -> None:
        # Arrange
        settings = DatabaseSettings(path=str(tmp_path / "data" / "storage.db"))
        settings.ensure_directory()

        first = Database.from_settings(settings)
        await first.create_tables()
        async with first.session_factory() as session:
            await session.execute(text("INSERT INTO sessions (chat_id) VALUES ('abc')"))
            await session.commit()
        await first.dispose()

        # Act
        second = Database.from_settings(settings)
        await second.create_tables()
        async with second.session_factory() as session:
            chat_ids = (await session.execute(text("SELECT chat_id FROM sessions"))).scalars().all()
        await second.dispose()

        # Assert
        assert chat_ids == ["abc"]
