"""List user accounts use case."""

from account_hierarchy.application.dto.account_dto import AccountListOutput
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)


class ListUserAccountsUseCase:
    """Use case for listing every account a user is linked to."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow
        self.access = AccessControlService(uow)

    async def execute(self, user_id: str) -> AccountListOutput:
        """
        List the accounts of a user.

        Memberships pointing at a missing account are skipped rather than
        failing the whole listing.

        Args:
            user_id: Canonical user identifier

        Returns:
            Accounts in membership order (linked_at, account_id)
        """
        async with self.uow:
            pairs = await self.access.list_accessible_accounts(user_id)
            return AccountListOutput.from_entities([account for _, account in pairs])
