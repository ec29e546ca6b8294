"""Data Transfer Objects (DTOs) for application layer."""

from account_hierarchy.application.dto.account_dto import (
    AccountListOutput,
    AccountOutput,
    AccountSettingsInput,
    AccountSettingsOutput,
    AccountUsageOutput,
    CreateRootAccountInput,
    CreateSubAccountInput,
    UpdateAccountInput,
)
from account_hierarchy.application.dto.auth_context_dto import (
    AccountAccessOutput,
    AuthContextOutput,
)
from account_hierarchy.application.dto.membership_dto import (
    LinkUserInput,
    UserAccountOutput,
)

__all__ = [
    # Account DTOs
    "AccountListOutput",
    "AccountOutput",
    "AccountSettingsInput",
    "AccountSettingsOutput",
    "AccountUsageOutput",
    "CreateRootAccountInput",
    "CreateSubAccountInput",
    "UpdateAccountInput",
    # AuthContext DTOs
    "AccountAccessOutput",
    "AuthContextOutput",
    # Membership DTOs
    "LinkUserInput",
    "UserAccountOutput",
]
