"""
Test suite for PromptService.

Tests prompt creation and linking prompts to chat sessions.

System role: Verification of prompt service orchestration layer
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from chatlog.application.services.message_service import MessageService
from chatlog.application.services.prompt_service import PromptService
from chatlog.boundary.db.models import MessageRole, SessionPromptModel
from chatlog.core.exceptions import PromptNotFoundError, SessionNotFoundError


@pytest.fixture
def prompt_service(test_async_db: AsyncSession) -> PromptService:
    """Provide PromptService bound to the in-memory database."""
    return PromptService(db=test_async_db)


@pytest.fixture
async def existing_chat(test_async_db: AsyncSession) -> dict:
    """Provide a chat 'abc' with one message."""
    return await MessageService(db=test_async_db).post_message("abc", MessageRole.USER, "hi")


class TestPromptServiceCreate:
    """Test suite for PromptService.create_prompt()."""

    @pytest.mark.asyncio
    async def test_create_prompt_should_return_sequential_ids(
        self, prompt_service: PromptService
    ) -> None:
        """Test each prompt gets its own id."""
        first = await prompt_service.create_prompt(MessageRole.SYSTEM, "be brief")
        second = await prompt_service.create_prompt("user", "example question")

        assert first == 1
        assert second == 2


class TestPromptServiceAddToSession:
    """Test suite for PromptService.add_prompt_to_session()."""

    @pytest.mark.asyncio
    async def test_add_prompt_to_session_should_link_once(
        self, prompt_service: PromptService, existing_chat: dict, test_async_db: AsyncSession, row_count
    ) -> None:
        """Test linking reports True the first time and False afterwards."""
        prompt_id = await prompt_service.create_prompt(MessageRole.SYSTEM, "be brief")

        assert await prompt_service.add_prompt_to_session("abc", prompt_id) is True
        assert await prompt_service.add_prompt_to_session("abc", prompt_id) is False
        assert await row_count(test_async_db, SessionPromptModel) == 1

    @pytest.mark.asyncio
    async def test_add_prompt_to_session_should_raise_for_unknown_chat(
        self, prompt_service: PromptService
    ) -> None:
        """Test sessions are never created by linking."""
        prompt_id = await prompt_service.create_prompt(MessageRole.SYSTEM, "be brief")

        with pytest.raises(SessionNotFoundError):
            await prompt_service.add_prompt_to_session("nobody", prompt_id)

    @pytest.mark.asyncio
    async def test_add_prompt_to_session_should_raise_for_unknown_prompt(
        self, prompt_service: PromptService, existing_chat: dict
    ) -> None:
        """Test linking a missing prompt raises PromptNotFoundError."""
        with pytest.raises(PromptNotFoundError):
            await prompt_service.add_prompt_to_session("abc", 404)
