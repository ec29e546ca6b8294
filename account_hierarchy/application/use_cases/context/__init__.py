"""Account context use cases."""

from account_hierarchy.application.use_cases.context.list_user_accounts import (
    ListUserAccountsUseCase,
)
from account_hierarchy.application.use_cases.context.switch_account_context import (
    SwitchAccountContextUseCase,
)

__all__ = [
    "ListUserAccountsUseCase",
    "SwitchAccountContextUseCase",
]
