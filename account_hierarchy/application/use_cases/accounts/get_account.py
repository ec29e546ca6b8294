"""Get account use case."""

from account_hierarchy.application.dto.account_dto import AccountOutput
from account_hierarchy.application.exceptions import NotFoundError
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)


class GetAccountUseCase:
    """Use case for retrieving a single account."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow
        self.access = AccessControlService(uow)

    async def execute(self, account_id: str, current_user_id: str) -> AccountOutput:
        """
        Get account by ID.

        Args:
            account_id: Canonical account identifier
            current_user_id: ID of user requesting the account

        Returns:
            Account information

        Raises:
            ForbiddenError: If user has no active membership on the account
            NotFoundError: If account doesn't exist
        """
        async with self.uow:
            await self.access.require_active_membership(current_user_id, account_id)

            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                raise NotFoundError(
                    message="Account not found",
                    resource_type="Account",
                    resource_id=account_id,
                )

            return AccountOutput.from_entity(account)
