"""
Test suite for dependency injection container.

Tests factory functions for service creation.
Verifies services are bound to the request's database session.

System role: Verification of DI container
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from chatlog.api.deps import (
    get_database,
    get_message_service,
    get_prompt_service,
    get_session_service,
    get_settings_dependency,
)
from chatlog.application.services import MessageService, PromptService, SessionService


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def mock_request() -> MagicMock:
    """Provide a request whose application carries settings and database."""
    request = MagicMock()
    request.app.state.settings = MagicMock(name="settings")
    request.app.state.database = MagicMock(name="database")
    return request


@pytest.mark.parametrize(
    ("factory", "service_class"),
    [
        (get_message_service, MessageService),
        (get_prompt_service, PromptService),
        (get_session_service, SessionService),
    ],
)
def test_service_factory_should_bind_db_session(
    factory, service_class, mock_db_session: AsyncSession
) -> None:
    """Each factory returns its service bound to the injected session."""
    # Act
    service = factory(db=mock_db_session)

    # Assert
    assert isinstance(service, service_class)
    assert service.db is mock_db_session


def test_service_factories_should_return_new_instances(mock_db_session: AsyncSession) -> None:
    """Services are per-request, never shared."""
    first = get_message_service(db=mock_db_session)
    second = get_message_service(db=mock_db_session)

    assert first is not second


def test_get_settings_dependency_should_read_app_state(mock_request: MagicMock) -> None:
    assert get_settings_dependency(mock_request) is mock_request.app.state.settings


def test_get_database_should_read_app_state(mock_request: MagicMock) -> None:
    assert get_database(mock_request) is mock_request.app.state.database
