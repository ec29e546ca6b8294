"""Create sub-account use case."""

import logging
from datetime import UTC, datetime
from typing import Callable

from account_hierarchy.application.dto.account_dto import (
    AccountOutput,
    CreateSubAccountInput,
)
from account_hierarchy.application.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)
from account_hierarchy.application.services.account_writer import write_account_with_owner
from account_hierarchy.domain.entities.account import Account
from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.domain.exceptions import (
    AccountHierarchyTooDeepError,
    InvalidAccountIdentifierError,
)
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
from account_hierarchy.domain.value_objects.identifiers import (
    new_account_id,
    normalize_user_id,
)
from account_hierarchy.domain.value_objects.permission import UserPermissions

logger = logging.getLogger(__name__)


class CreateSubAccountUseCase:
    """
    Use case for creating a sub-account under an existing account.

    The account and its Admin membership are written together, see
    write_account_with_owner for the behaviour on non-transactional stores.
    """

    def __init__(self, uow: UnitOfWorkPort, id_factory: Callable[[], str] = new_account_id):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            id_factory: Generator of fresh canonical account ids
        """
        self.uow = uow
        self.id_factory = id_factory
        self.access = AccessControlService(uow)

    async def execute(
        self,
        parent_account_id: str,
        input_dto: CreateSubAccountInput,
        current_user_id: str,
    ) -> AccountOutput:
        """
        Create a sub-account.

        Args:
            parent_account_id: Account the new account is created under
            input_dto: Sub-account creation data
            current_user_id: ID of the acting user

        Returns:
            Created account data

        Raises:
            ForbiddenError: If the user has no active membership on the parent
                or lacks can_create_sub_accounts
            NotFoundError: If the parent account doesn't exist
            ValidationError: If the name or owner id is invalid
            ConflictError: If the parent's sub-account quota is exhausted or the
                hierarchy cannot grow deeper
            CompensationError: If cleanup after a failed membership write fails
        """
        async with self.uow:
            await self.access.require_permission(
                current_user_id, parent_account_id, "can_create_sub_accounts"
            )

            # Locked until commit so concurrent creates see each other in the count
            parent = await self.uow.accounts.get_for_update(parent_account_id)
            if parent is None:
                raise NotFoundError(
                    message="Parent account not found",
                    resource_type="Account",
                    resource_id=parent_account_id,
                )

            if not input_dto.name or not input_dto.name.strip():
                raise ValidationError(
                    message="Account name is required",
                    field="name",
                    constraint="non_empty",
                )

            owner_user_id = self._resolve_owner(input_dto, current_user_id)

            existing_children = await self.uow.accounts.count_children(parent.account_id)
            if not parent.can_add_sub_account(existing_children):
                logger.warning(
                    f"Sub-account quota reached on account {parent.account_id} "
                    f"({existing_children}/{parent.settings.max_sub_accounts}, "
                    f"allowed={parent.settings.allow_sub_accounts})"
                )
                raise ConflictError(
                    message="Sub-account limit reached for this account",
                    operation="create_sub_account",
                    current_state=(
                        f"{existing_children} of {parent.settings.max_sub_accounts} sub-accounts"
                        if parent.settings.allow_sub_accounts
                        else "sub-accounts disabled"
                    ),
                )

            account = self._build_account(parent, input_dto, owner_user_id, current_user_id)
            owner = UserAccount.for_role(
                user_id=owner_user_id,
                account_id=account.account_id,
                role=MembershipRole.ADMIN,
                permissions=UserPermissions.full(),
            )

            saved_account = await write_account_with_owner(self.uow, account, owner)

        logger.info(
            f"Created sub-account {saved_account.account_id} ({saved_account.name}) "
            f"under {parent_account_id} by user {current_user_id}"
        )

        return AccountOutput.from_entity(saved_account)

    @staticmethod
    def _resolve_owner(input_dto: CreateSubAccountInput, current_user_id: str) -> str:
        if input_dto.owner_user_id is None:
            return current_user_id
        try:
            return normalize_user_id(input_dto.owner_user_id)
        except InvalidAccountIdentifierError as e:
            raise ValidationError(
                message="Invalid owner user id",
                field="owner_user_id",
                value=input_dto.owner_user_id,
            ) from e

    def _build_account(
        self,
        parent: Account,
        input_dto: CreateSubAccountInput,
        owner_user_id: str,
        current_user_id: str,
    ) -> Account:
        account_id = self.id_factory()
        try:
            account_path, level = HierarchyManager.build_child_path(parent, account_id)
        except AccountHierarchyTooDeepError as e:
            raise ConflictError(
                message="Account hierarchy cannot grow deeper under this account",
                operation="create_sub_account",
                current_state=f"parent at level {parent.level}",
            ) from e
        now = datetime.now(UTC)

        account = Account(
            account_id=account_id,
            parent_account_id=parent.account_id,
            owner_user_id=owner_user_id,
            created_by_user_id=current_user_id,
            name=input_dto.name,
            company=input_dto.company.strip(),
            plan=AccountPlan.STARTER,
            status=AccountStatus.ACTIVE,
            level=level,
            account_path=account_path,
            settings=AccountSettings.sub_account_defaults(),
            usage=AccountUsage.zero(),
            created_at=now,
            updated_at=now,
        )
        HierarchyManager.validate(account, parent)
        return account
