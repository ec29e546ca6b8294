"""
Unit of work over one SQLAlchemy session.

Account and membership writes issued through it share a transaction.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.repositories.account_repository import (
    PostgresAccountRepository,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    run_guarded,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.repositories.user_account_repository import (
    PostgresUserAccountRepository,
)


class PostgresUnitOfWork(UnitOfWorkPort):
    """
    Transactional unit of work for the accounts store.

    Both repositories are bound to the same session, so an account row and
    its owner membership land in a single commit. ``supports_transactions``
    tells the writer it can rely on rollback instead of compensation.

    Usage:
        async with uow:
            await uow.accounts.add(account)
            await uow.memberships.add(owner)
            await uow.commit()
    """

    supports_transactions = True

    def __init__(self, session: AsyncSession, operation_timeout: Optional[float] = None):
        """
        Args:
            session: Session shared by both repositories
            operation_timeout: Deadline in seconds applied to each store call
        """
        self._session = session
        self._operation_timeout = operation_timeout

        self.accounts = PostgresAccountRepository(session, operation_timeout)
        self.memberships = PostgresUserAccountRepository(session, operation_timeout)

    async def __aenter__(self) -> "PostgresUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        # Leaving the block cleanly commits whatever is still pending
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            StoreTimeoutError: If the commit exceeds the store deadline
            AlreadyExistsError: If a deferred uniqueness check fails
            StoreUnavailableError: If the store rejects or loses the commit
        """
        await run_guarded("uow.commit", self._session.commit(), self._operation_timeout)

    async def rollback(self) -> None:
        await run_guarded("uow.rollback", self._session.rollback(), self._operation_timeout)

    async def close(self) -> None:
        """Release the session's connection back to the engine."""
        await self._session.close()
