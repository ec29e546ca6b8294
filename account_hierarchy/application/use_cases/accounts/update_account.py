"""Update account use case."""

import logging
from dataclasses import replace
from typing import Any

from account_hierarchy.application.dto.account_dto import AccountOutput, UpdateAccountInput
from account_hierarchy.application.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from account_hierarchy.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)

logger = logging.getLogger(__name__)


class UpdateAccountUseCase:
    """Use case for updating account name, company and settings."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow
        self.access = AccessControlService(uow)

    async def execute(
        self, account_id: str, input_dto: UpdateAccountInput, current_user_id: str
    ) -> AccountOutput:
        """
        Update account information.

        Only supplied fields change. The write is conditional on the version
        read at the start of the call (or on ``expected_version`` when given),
        so a concurrent update is reported instead of silently overwritten.

        Args:
            account_id: Canonical account identifier
            input_dto: Account update data
            current_user_id: ID of user updating the account

        Returns:
            Updated account information

        Raises:
            ForbiddenError: If user lacks can_modify_settings on the account
            NotFoundError: If account doesn't exist
            ValidationError: If the new name or settings are invalid
            ConflictError: If the stored version doesn't match
        """
        async with self.uow:
            await self.access.require_permission(
                current_user_id, account_id, "can_modify_settings"
            )

            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                raise NotFoundError(
                    message="Account not found",
                    resource_type="Account",
                    resource_id=account_id,
                )

            expected_version = input_dto.expected_version or account.version
            if expected_version != account.version:
                raise ConflictError(
                    message="Account was modified by another request",
                    operation="update_account",
                    current_state=f"version {account.version}",
                )

            changes: dict[str, Any] = {}

            if input_dto.name is not None:
                try:
                    account.rename(input_dto.name)
                except ValueError as e:
                    raise ValidationError(
                        message=str(e), field="name", value=input_dto.name
                    ) from e
                changes["name"] = account.name

            if input_dto.company is not None:
                account.update_company(input_dto.company)
                changes["company"] = account.company

            if input_dto.settings is not None:
                settings_changes = input_dto.settings.model_dump(exclude_none=True)
                try:
                    account.replace_settings(replace(account.settings, **settings_changes))
                except ValueError as e:
                    raise ValidationError(message=str(e), field="settings") from e
                changes["settings"] = account.settings

            if not changes:
                return AccountOutput.from_entity(account)

            updated_account = await self.uow.accounts.update_fields(
                account_id, changes, expected_version=expected_version
            )
            if updated_account is None:
                raise ConflictError(
                    message="Account was modified by another request",
                    operation="update_account",
                    current_state=f"expected version {expected_version}",
                )

            await self.uow.commit()

        logger.info(
            f"Updated account {account_id} fields {sorted(changes)} by user {current_user_id}"
        )

        return AccountOutput.from_entity(updated_account)
