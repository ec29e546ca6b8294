"""List descendants use case."""

from account_hierarchy.application.dto.account_dto import AccountListOutput
from account_hierarchy.application.exceptions import NotFoundError
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)
from account_hierarchy.domain.services.hierarchy import HierarchyManager


class ListDescendantsUseCase:
    """
    Use case for listing an account together with its whole subtree.

    Descendants are found with one prefix query over the materialized path,
    so the cost does not depend on tree depth.
    """

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow
        self.access = AccessControlService(uow)

    async def execute(self, root_account_id: str, current_user_id: str) -> AccountListOutput:
        """
        List an account and all of its descendants.

        Args:
            root_account_id: Account whose subtree is listed
            current_user_id: ID of the requesting user

        Returns:
            The root account first, then descendants ordered by (level, account_path).
            A leaf account yields a single-element list.

        Raises:
            ForbiddenError: If user has no active membership on the root account
            NotFoundError: If the root account doesn't exist
        """
        async with self.uow:
            await self.access.require_active_membership(current_user_id, root_account_id)

            root = await self.uow.accounts.get_by_id(root_account_id)
            if root is None:
                raise NotFoundError(
                    message="Account not found",
                    resource_type="Account",
                    resource_id=root_account_id,
                )

            candidates = await self.uow.accounts.list_by_path_prefix(
                root.account_path, exclude_account_id=root.account_id
            )
            # LIKE is case-insensitive on some backends (SQLite)
            descendants = [
                account
                for account in candidates
                if HierarchyManager.is_descendant_path(account.account_path, root.account_path)
            ]

            return AccountListOutput.from_entities([root, *descendants])
