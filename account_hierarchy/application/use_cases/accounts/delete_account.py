"""Delete account use case."""

import logging

from account_hierarchy.application.exceptions import ConflictError, NotFoundError
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """Use case for deleting a leaf account and its memberships."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow
        self.access = AccessControlService(uow)

    async def execute(self, account_id: str, current_user_id: str) -> None:
        """
        Delete account.

        Args:
            account_id: Canonical account identifier
            current_user_id: ID of user deleting the account

        Raises:
            ForbiddenError: If user lacks can_delete_account on the account
            NotFoundError: If account doesn't exist
            ConflictError: If the account still has sub-accounts
        """
        async with self.uow:
            await self.access.require_permission(
                current_user_id, account_id, "can_delete_account"
            )

            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                raise NotFoundError(
                    message="Account not found",
                    resource_type="Account",
                    resource_id=account_id,
                )

            children = await self.uow.accounts.count_children(account_id)
            if children:
                raise ConflictError(
                    message="Cannot delete an account that has sub-accounts",
                    operation="delete_account",
                    current_state=f"{children} sub-accounts",
                )

            removed = await self.uow.memberships.delete_by_account(account_id)
            await self.uow.accounts.delete(account_id)

            await self.uow.commit()

        logger.info(
            f"Deleted account {account_id} ({removed} memberships) by user {current_user_id}"
        )
