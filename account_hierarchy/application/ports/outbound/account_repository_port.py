"""Account repository port interface."""

from typing import Any, Optional, Protocol

from account_hierarchy.domain.entities.account import Account


class AccountRepositoryPort(Protocol):
    """Repository interface for Account entity."""

    async def add(self, account: Account) -> Account:
        """
        Add a new account to the repository.

        Args:
            account: Account entity to add

        Returns:
            Created account entity

        Raises:
            AlreadyExistsError: If an account with the same id exists
            StoreError: If the store fails
        """
        ...

    async def get_by_id(self, account_id: str) -> Optional[Account]:
        """
        Retrieve account by ID.

        Args:
            account_id: Canonical account identifier

        Returns:
            Account entity if found, None otherwise
        """
        ...

    async def get_for_update(self, account_id: str) -> Optional[Account]:
        """
        Retrieve an account and hold a write lock on it until the transaction ends.

        Concurrent callers locking the same account run one after another, and
        reads made after the lock see what the previous holder committed.

        Args:
            account_id: Canonical account identifier

        Returns:
            Account entity if found, None otherwise
        """
        ...

    async def get_many(self, account_ids: list[str]) -> dict[str, Account]:
        """
        Retrieve several accounts in one read.

        Args:
            account_ids: Canonical account identifiers

        Returns:
            Mapping of account_id to Account for the ids that exist
        """
        ...

    async def list_by_path_prefix(
        self, path_prefix: str, exclude_account_id: Optional[str] = None
    ) -> list[Account]:
        """
        List accounts whose materialized path starts with a prefix.

        Args:
            path_prefix: Path prefix, ending with the path separator
            exclude_account_id: Account to leave out of the result

        Returns:
            Matching accounts ordered by (level, account_path)
        """
        ...

    async def count_children(self, parent_account_id: str) -> int:
        """Count direct sub-accounts of an account."""
        ...

    async def update_fields(
        self,
        account_id: str,
        changes: dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Optional[Account]:
        """
        Conditionally update some columns of an account.

        The update advances ``version`` and ``updated_at``.

        Args:
            account_id: Account to update
            changes: Column values to set (name, company, settings, plan, status)
            expected_version: Only update if the stored version matches

        Returns:
            Updated account, or None if no row matched

        Raises:
            ValueError: If changes name a column that cannot be updated
        """
        ...

    async def delete(self, account_id: str) -> bool:
        """
        Delete an account.

        Deleting an account that does not exist is not an error.

        Returns:
            True if a row was deleted
        """
        ...
