"""List ancestors use case."""

import logging

from account_hierarchy.application.dto.account_dto import AccountListOutput
from account_hierarchy.application.exceptions import NotFoundError
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)
from account_hierarchy.domain.services.hierarchy import HierarchyManager

logger = logging.getLogger(__name__)


class ListAncestorsUseCase:
    """Use case for listing the chain of accounts above an account."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow
        self.access = AccessControlService(uow)

    async def execute(self, account_id: str, current_user_id: str) -> AccountListOutput:
        """
        List the ancestors of an account, root first.

        Ancestor ids are read from the account's materialized path and loaded
        in one batch. The account itself is not included.

        Args:
            account_id: Account whose ancestors are listed
            current_user_id: ID of the requesting user

        Returns:
            Ancestors ordered from the root down to the direct parent

        Raises:
            ForbiddenError: If user has no active membership on the account
            NotFoundError: If the account doesn't exist
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

            ancestor_ids = HierarchyManager.ancestor_ids(account)
            if not ancestor_ids:
                return AccountListOutput.from_entities([])

            found = await self.uow.accounts.get_many(ancestor_ids)

            ancestors = []
            for ancestor_id in ancestor_ids:
                ancestor = found.get(ancestor_id)
                if ancestor is None:
                    logger.warning(
                        f"Ancestor {ancestor_id} of account {account_id} not found"
                    )
                    continue
                ancestors.append(ancestor)

            return AccountListOutput.from_entities(ancestors)
