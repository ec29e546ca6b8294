"""Switch account context use case."""

import logging

from account_hierarchy.application.dto.auth_context_dto import AuthContextOutput
from account_hierarchy.application.exceptions import NotFoundError
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)
from account_hierarchy.domain.value_objects.auth_context import AccountAccess, AuthContext

logger = logging.getLogger(__name__)


class SwitchAccountContextUseCase:
    """
    Use case for selecting the active account of a session.

    The resulting AuthContext is rebuilt on every call and never stored; the
    caller embeds it into session or token claims.
    """

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow
        self.access = AccessControlService(uow)

    async def execute(self, user_id: str, target_account_id: str) -> AuthContextOutput:
        """
        Build the AuthContext for a user acting on a target account.

        Args:
            user_id: Canonical user identifier
            target_account_id: Account to switch to

        Returns:
            AuthContext for the target account, listing every account
            available to the user with exactly the target flagged current

        Raises:
            ForbiddenError: If user has no active membership on the target
            NotFoundError: If the target account doesn't exist
        """
        async with self.uow:
            membership = await self.access.require_active_membership(user_id, target_account_id)

            account = await self.uow.accounts.get_by_id(target_account_id)
            if account is None:
                logger.warning(
                    f"Membership of user {user_id} points at missing account {target_account_id}"
                )
                raise NotFoundError(
                    message="Account not found",
                    resource_type="Account",
                    resource_id=target_account_id,
                )

            pairs = await self.access.list_accessible_accounts(user_id)

        available_accounts = [
            AccountAccess(
                account_id=available.account_id,
                account_name=available.name,
                role=link.role,
                permissions=link.permissions,
                is_current=available.account_id == account.account_id,
            )
            for link, available in pairs
        ]

        context = AuthContext(
            user_id=user_id,
            account_id=account.account_id,
            account_name=account.name,
            role=membership.role,
            permissions=membership.permissions,
            account_path=account.account_path,
            level=account.level,
            available_accounts=available_accounts,
        )

        logger.info(f"User {user_id} switched to account {account.account_id}")

        return AuthContextOutput.from_context(context)
