"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: chatlog.configs, chatlog.application, chatlog.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from chatlog.application.services import MessageService, PromptService, SessionService
from chatlog.boundary.db import Database, get_async_db
from chatlog.configs import Settings


def get_settings_dependency(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings


def get_database(request: Request) -> Database:
    """Get the storage client owned by the running application."""
    return request.app.state.database


def get_message_service(db: AsyncSession = Depends(get_async_db)) -> MessageService:
    """
    Get message service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        MessageService: Message service instance
    """
    return MessageService(db=db)


def get_prompt_service(db: AsyncSession = Depends(get_async_db)) -> PromptService:
    """
    Get prompt service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        PromptService: Prompt service instance
    """
    return PromptService(db=db)


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)
