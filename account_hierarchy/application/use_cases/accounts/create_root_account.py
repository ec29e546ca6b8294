"""Create root account use case."""

import logging
from datetime import UTC, datetime
from typing import Callable

from account_hierarchy.application.dto.account_dto import (
    AccountOutput,
    CreateRootAccountInput,
)
from account_hierarchy.application.exceptions import ValidationError
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.account_writer import write_account_with_owner
from account_hierarchy.domain.entities.account import Account
from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.domain.services.hierarchy import HierarchyManager
from account_hierarchy.domain.value_objects.account_settings import (
    AccountSettings,
    AccountUsage,
)
from account_hierarchy.domain.value_objects.enums import (
    AccountPlan,
    AccountStatus,
    MembershipRole,
)
from account_hierarchy.domain.value_objects.identifiers import new_account_id
from account_hierarchy.domain.value_objects.permission import UserPermissions

logger = logging.getLogger(__name__)


class CreateRootAccountUseCase:
    """Use case for creating a new top-level (tenant) account."""

    def __init__(self, uow: UnitOfWorkPort, id_factory: Callable[[], str] = new_account_id):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            id_factory: Generator of fresh canonical account ids
        """
        self.uow = uow
        self.id_factory = id_factory

    async def execute(
        self, input_dto: CreateRootAccountInput, current_user_id: str
    ) -> AccountOutput:
        """
        Create a root account owned by the current user.

        The account and an Owner membership with every permission are written
        in the same unit of work.

        Args:
            input_dto: Account creation data
            current_user_id: ID of user creating (and owning) the account

        Returns:
            Created account data

        Raises:
            ValidationError: If the name is empty
        """
        if not input_dto.name or not input_dto.name.strip():
            raise ValidationError(
                message="Account name is required",
                field="name",
                constraint="non_empty",
            )

        account_id = self.id_factory()
        account_path, level = HierarchyManager.build_child_path(None, account_id)
        now = datetime.now(UTC)

        account = Account(
            account_id=account_id,
            parent_account_id=None,
            owner_user_id=current_user_id,
            created_by_user_id=current_user_id,
            name=input_dto.name,
            company=input_dto.company.strip(),
            plan=AccountPlan.FREE,
            status=AccountStatus.ACTIVE,
            level=level,
            account_path=account_path,
            settings=AccountSettings.root_defaults(),
            usage=AccountUsage.zero(),
            created_at=now,
            updated_at=now,
        )
        owner = UserAccount.for_role(
            user_id=current_user_id,
            account_id=account_id,
            role=MembershipRole.OWNER,
            permissions=UserPermissions.full(),
        )

        async with self.uow:
            saved_account = await write_account_with_owner(self.uow, account, owner)

        logger.info(
            f"Created root account {saved_account.account_id} ({saved_account.name}) "
            f"for user {current_user_id}"
        )

        return AccountOutput.from_entity(saved_account)
