"""Account lifecycle use cases."""

from account_hierarchy.application.use_cases.accounts.create_root_account import (
    CreateRootAccountUseCase,
)
from account_hierarchy.application.use_cases.accounts.create_sub_account import (
    CreateSubAccountUseCase,
)
from account_hierarchy.application.use_cases.accounts.delete_account import (
    DeleteAccountUseCase,
)
from account_hierarchy.application.use_cases.accounts.get_account import GetAccountUseCase
from account_hierarchy.application.use_cases.accounts.update_account import (
    UpdateAccountUseCase,
)

__all__ = [
    "CreateRootAccountUseCase",
    "CreateSubAccountUseCase",
    "DeleteAccountUseCase",
    "GetAccountUseCase",
    "UpdateAccountUseCase",
]
