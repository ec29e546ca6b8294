"""Revoke membership use case."""

import logging

from account_hierarchy.application.exceptions import ConflictError, NotFoundError
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)

logger = logging.getLogger(__name__)


class RevokeMembershipUseCase:
    """Use case for removing a user's membership on an account."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow
        self.access = AccessControlService(uow)

    async def execute(self, account_id: str, user_id: str, current_user_id: str) -> None:
        """
        Revoke a membership.

        Args:
            account_id: Account the membership belongs to
            user_id: Member whose access is revoked
            current_user_id: ID of the revoking user

        Raises:
            ForbiddenError: If the revoker lacks can_invite_users
            NotFoundError: If the account or the membership doesn't exist
            ConflictError: If the membership belongs to the account owner
        """
        async with self.uow:
            await self.access.require_permission(
                current_user_id, account_id, "can_invite_users"
            )

            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                raise NotFoundError(
                    message="Account not found",
                    resource_type="Account",
                    resource_id=account_id,
                )

            if user_id == account.owner_user_id:
                raise ConflictError(
                    message="The account owner's membership cannot be revoked",
                    operation="revoke_membership",
                    current_state="owner",
                )

            deleted = await self.uow.memberships.delete(user_id, account_id)
            if not deleted:
                raise NotFoundError(
                    message="Membership not found",
                    resource_type="UserAccount",
                    resource_id=f"{user_id}|{account_id}",
                )

            await self.uow.commit()

        logger.info(
            f"Revoked membership of user {user_id} on account {account_id} "
            f"by user {current_user_id}"
        )
