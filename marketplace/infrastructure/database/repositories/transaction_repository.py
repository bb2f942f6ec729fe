"""
Transaction service for managing database transactions centrally.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.config.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService:
    """Centralized transaction management service.

    Repositories only flush; the unit of work is committed or rolled back
    here, so every mutation made through one session lands together.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.logger = logger

    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Execute an operation within a transaction.

        Args:
            operation: Async function to execute

        Returns:
            Result of the operation

        Raises:
            Exception: Any exception raised by the operation, after rollback
        """
        try:
            result = await operation()
            await self.session.commit()

            self.logger.debug("Transaction committed successfully")
            return result

        except Exception as e:
            await self.session.rollback()
            self.logger.warning(
                "Transaction rolled back",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
