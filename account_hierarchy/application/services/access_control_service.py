"""
Access control service for account memberships.

A user may act on an account only through an Active UserAccount row for that
exact (user, account) pair. Permission checks are a plain read of that row's
flags; memberships on ancestor accounts grant nothing on their descendants.

Usage:
    access = AccessControlService(uow)
    async with uow:
        membership = await access.require_permission(
            user_id, account_id, "can_invite_users"
        )
"""

import logging

from account_hierarchy.application.exceptions import ForbiddenError
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.domain.entities.account import Account
from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.domain.exceptions import (
    InactiveMembershipError,
    InsufficientPermissionsError,
)
from account_hierarchy.domain.services.permission_checker import PermissionChecker

logger = logging.getLogger(__name__)


class AccessControlService:
    """
    Service for authorizing (user, account) pairings.

    Runs inside a unit of work opened by the caller; it never opens, commits
    or rolls back one itself. Store failures propagate as StoreError and are
    never turned into a denied result.
    """

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize access control service.

        Args:
            uow: Unit of Work whose repositories are read
        """
        self.uow = uow

    async def get_membership(self, user_id: str, account_id: str) -> UserAccount | None:
        """
        Look up the membership for a (user, account) pair.

        Args:
            user_id: Canonical user identifier
            account_id: Canonical account identifier

        Returns:
            UserAccount if one exists (in any status), None otherwise
        """
        return await self.uow.memberships.get(user_id, account_id)

    async def validate_access(self, user_id: str, account_id: str) -> bool:
        """
        Check if a user may act on an account.

        Args:
            user_id: Canonical user identifier
            account_id: Canonical account identifier

        Returns:
            True iff an Active membership exists for exactly this pair

        Raises:
            StoreError: If the membership store cannot be read
        """
        membership = await self.get_membership(user_id, account_id)
        return membership is not None and membership.is_active()

    async def require_active_membership(self, user_id: str, account_id: str) -> UserAccount:
        """
        Require an Active membership, raise exception if there is none.

        Returns:
            The active membership

        Raises:
            ForbiddenError: If the membership is missing or not Active
        """
        membership = await self.get_membership(user_id, account_id)

        if membership is None:
            logger.warning(f"User {user_id} has no membership on account {account_id}")
            raise ForbiddenError(
                message="You don't have access to this account",
                resource_type="Account",
                resource_id=account_id,
            )

        try:
            PermissionChecker.check_membership_is_active(membership)
        except InactiveMembershipError as e:
            logger.warning(
                f"User {user_id} denied on account {account_id}: "
                f"membership is {membership.status.value}"
            )
            raise ForbiddenError(
                message="You don't have access to this account",
                resource_type="Account",
                resource_id=account_id,
            ) from e

        return membership

    async def require_permission(
        self, user_id: str, account_id: str, permission: str
    ) -> UserAccount:
        """
        Require an Active membership granting a specific permission.

        Args:
            user_id: Canonical user identifier
            account_id: Canonical account identifier
            permission: Permission flag name (e.g. "can_create_sub_accounts")

        Returns:
            The active membership

        Raises:
            ForbiddenError: If there is no active membership or the flag is not set
        """
        membership = await self.require_active_membership(user_id, account_id)

        try:
            PermissionChecker.check_has_permission(membership, permission)
        except InsufficientPermissionsError as e:
            logger.warning(
                f"User {user_id} lacks {permission} on account {account_id}"
            )
            raise ForbiddenError(
                message=f"You don't have permission to perform this action. Required: {permission}",
                required_permission=permission,
                resource_type="Account",
                resource_id=account_id,
            ) from e

        return membership

    async def list_accessible_accounts(
        self, user_id: str
    ) -> list[tuple[UserAccount, Account]]:
        """
        List every membership of a user together with its account.

        Accounts are fetched with one batch read. A membership whose account
        no longer exists is logged and skipped.

        Args:
            user_id: Canonical user identifier

        Returns:
            (membership, account) pairs in membership order
        """
        memberships = await self.uow.memberships.list_by_user(user_id)
        if not memberships:
            return []

        accounts = await self.uow.accounts.get_many([m.account_id for m in memberships])

        pairs = []
        for membership in memberships:
            account = accounts.get(membership.account_id)
            if account is None:
                logger.warning(
                    f"Skipping membership of user {user_id}: "
                    f"account {membership.account_id} not found"
                )
                continue
            pairs.append((membership, account))
        return pairs
