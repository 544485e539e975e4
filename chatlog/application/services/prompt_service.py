"""
Prompt service orchestrator.

Coordinates prompt creation and attaching prompts to chat sessions.

Dependencies: chatlog.boundary.db.CRUD, chatlog.core.exceptions
System role: Prompt use case orchestration
"""

import logging

from chatlog.application.services.base_service import BaseService
from chatlog.application.services.message_service import role_value
from chatlog.boundary.db.CRUD.prompt_crud import prompt_crud
from chatlog.boundary.db.CRUD.session_crud import session_crud
from chatlog.boundary.db.models.message_model import MessageRole
from chatlog.core.exceptions import PromptNotFoundError, SessionNotFoundError
from chatlog.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class PromptService(BaseService):
    """Prompt service orchestrator."""

    async def create_prompt(self, role: MessageRole | str, content: str) -> int:
        """
        Store a prompt template.

        Args:
            role: Role the prompt is sent as
            content: Prompt text

        Returns:
            int: Created prompt ID

        Raises:
            DataAccessError: If the insert fails
        """
        async with self.unit_of_work("create_prompt"):
            prompt = await prompt_crud.create(
                self.db,
                role=role_value(role),
                content=content,
            )

        log_with_context(logger, logging.INFO, "Prompt stored", prompt_id=prompt.id)
        return prompt.id

    async def add_prompt_to_session(self, chat_id: str, prompt_id: int) -> bool:
        """
        Attach a prompt to the session of an existing chat.

        Args:
            chat_id: External chat identifier
            prompt_id: Prompt to attach

        Returns:
            bool: True if a new link was created, False if it already existed

        Raises:
            SessionNotFoundError: If no session exists for chat_id
            PromptNotFoundError: If no prompt has this ID
            DataAccessError: If the insert fails
        """
        async with self.unit_of_work("add_prompt_to_session"):
            session = await session_crud.get_by_chat_id(self.db, chat_id)
            if session is None:
                raise SessionNotFoundError(chat_id)
            if not await prompt_crud.exists(self.db, prompt_id):
                raise PromptNotFoundError(prompt_id)
            linked = await prompt_crud.link_to_session(self.db, session.id, prompt_id)

        log_with_context(
            logger,
            logging.INFO,
            "Prompt linked to session",
            prompt_id=prompt_id,
            session_id=session.id,
            linked=linked,
        )
        return linked > 0
