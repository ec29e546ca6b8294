"""Link user to account use case."""

import logging

from account_hierarchy.application.dto.membership_dto import LinkUserInput, UserAccountOutput
from account_hierarchy.application.exceptions import (
    AlreadyExistsError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)
from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.domain.exceptions import (
    InvalidAccountIdentifierError,
    InvalidRoleError,
)
from account_hierarchy.domain.services.permission_checker import PermissionChecker
from account_hierarchy.domain.value_objects.identifiers import normalize_user_id

logger = logging.getLogger(__name__)


class LinkUserToAccountUseCase:
    """Use case for granting a user a role on an account."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow
        self.access = AccessControlService(uow)

    async def execute(
        self, account_id: str, input_dto: LinkUserInput, current_user_id: str
    ) -> UserAccountOutput:
        """
        Create a membership for a user on an account.

        The membership gets the default permission set of its role. The grant
        applies to this account only, never to its sub-accounts.

        Args:
            account_id: Account to grant access to
            input_dto: User, role and initial status
            current_user_id: ID of the granting user

        Returns:
            Created membership

        Raises:
            ForbiddenError: If the granter lacks can_invite_users or tries to
                grant the Owner role without being an Owner
            NotFoundError: If account doesn't exist
            ValidationError: If the user id is malformed
            AlreadyExistsError: If the user is already linked to the account
        """
        async with self.uow:
            granter = await self.access.require_permission(
                current_user_id, account_id, "can_invite_users"
            )

            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                raise NotFoundError(
                    message="Account not found",
                    resource_type="Account",
                    resource_id=account_id,
                )

            try:
                PermissionChecker.check_can_grant_role(granter, input_dto.role)
            except InvalidRoleError as e:
                raise ForbiddenError(
                    message=e.message,
                    resource_type="Account",
                    resource_id=account_id,
                ) from e

            try:
                user_id = normalize_user_id(input_dto.user_id)
            except InvalidAccountIdentifierError as e:
                raise ValidationError(
                    message="Invalid user id", field="user_id", value=input_dto.user_id
                ) from e

            existing = await self.uow.memberships.get(user_id, account_id)
            if existing is not None:
                raise AlreadyExistsError(
                    message="User is already linked to this account",
                    resource_type="UserAccount",
                    field="user_id",
                    value=user_id,
                )

            membership = UserAccount.for_role(
                user_id=user_id,
                account_id=account_id,
                role=input_dto.role,
                status=input_dto.status,
            )
            saved = await self.uow.memberships.add(membership)

            await self.uow.commit()

        logger.info(
            f"Linked user {user_id} to account {account_id} as {input_dto.role.value} "
            f"by user {current_user_id}"
        )

        return UserAccountOutput.from_entity(saved)
