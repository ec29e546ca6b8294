"""UserAccount (membership) repository port interface."""

from typing import Optional, Protocol

from account_hierarchy.domain.entities.user_account import UserAccount


class UserAccountRepositoryPort(Protocol):
    """Repository interface for UserAccount entity."""

    async def add(self, membership: UserAccount) -> UserAccount:
        """
        Add a new membership.

        Raises:
            AlreadyExistsError: If the (user, account) pair already exists
            StoreError: If the store fails
        """
        ...

    async def get(self, user_id: str, account_id: str) -> Optional[UserAccount]:
        """
        Retrieve the membership for a (user, account) pair.

        Returns:
            UserAccount if found, None otherwise
        """
        ...

    async def list_by_user(self, user_id: str) -> list[UserAccount]:
        """
        List all memberships of a user.

        Returns:
            Memberships ordered by (linked_at, account_id)
        """
        ...

    async def list_by_account(self, account_id: str) -> list[UserAccount]:
        """List all memberships on an account."""
        ...

    async def delete(self, user_id: str, account_id: str) -> bool:
        """
        Delete one membership.

        Returns:
            True if a row was deleted
        """
        ...

    async def delete_by_account(self, account_id: str) -> int:
        """
        Delete every membership on an account.

        Returns:
            Number of deleted rows
        """
        ...
