"""Unit of Work port interface."""

from typing import Protocol

from account_hierarchy.application.ports.outbound.account_repository_port import (
    AccountRepositoryPort,
)
from account_hierarchy.application.ports.outbound.user_account_repository_port import (
    UserAccountRepositoryPort,
)


class UnitOfWorkPort(Protocol):
    """
    Unit of Work interface for managing transactions.

    Usage:
        async with uow:
            account = await uow.accounts.get_by_id(account_id)
            await uow.memberships.add(membership)
            await uow.commit()  # Commit is automatic on exit, but can be explicit

        # On exception, automatic rollback occurs

    Stores without multi-statement transactions report
    ``supports_transactions = False``. Each write is then durable on its own
    and callers must compensate partial failures themselves.
    """

    accounts: AccountRepositoryPort
    memberships: UserAccountRepositoryPort
    supports_transactions: bool

    async def __aenter__(self) -> "UnitOfWorkPort":
        """
        Enter async context manager (begin transaction).

        Returns:
            Self (UnitOfWorkPort instance)
        """
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred, the transaction is rolled back.
        Otherwise, the transaction is committed.
        """
        ...

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            StoreError: If the store fails or times out while committing
        """
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...
