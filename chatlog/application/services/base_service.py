"""
Service base class.

Provides the unit-of-work scope shared by all service orchestrators:
commit on success, rollback and DataAccessError on storage failure.

Dependencies: sqlalchemy, chatlog.core.exceptions, chatlog.observability
System role: Transaction boundary for use cases
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chatlog.core.exceptions import DataAccessError
from chatlog.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class BaseService:
    """Base for services that run CRUD operations on one AsyncSession."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    @asynccontextmanager
    async def unit_of_work(self, operation: str) -> AsyncIterator[None]:
        """
        Run the enclosed CRUD calls as one transaction.

        Args:
            operation: Name used in logs and in the raised error

        Raises:
            DataAccessError: If any SQLAlchemy error escapes the block
        """
        try:
            yield
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            log_exception_with_context(
                logger,
                "Storage operation failed",
                e,
                operation=operation,
            )
            raise DataAccessError(
                f"Storage operation failed: {operation}",
                operation=operation,
            ) from e
