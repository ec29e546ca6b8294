"""Use cases (application layer business logic)."""

# Account lifecycle use cases
from account_hierarchy.application.use_cases.accounts import (
    CreateRootAccountUseCase,
    CreateSubAccountUseCase,
    DeleteAccountUseCase,
    GetAccountUseCase,
    UpdateAccountUseCase,
)

# Context use cases
from account_hierarchy.application.use_cases.context import (
    ListUserAccountsUseCase,
    SwitchAccountContextUseCase,
)

# Hierarchy use cases
from account_hierarchy.application.use_cases.hierarchy import (
    ListAncestorsUseCase,
    ListDescendantsUseCase,
)

# Membership use cases
from account_hierarchy.application.use_cases.memberships import (
    LinkUserToAccountUseCase,
    RevokeMembershipUseCase,
)

__all__ = [
    # Accounts
    "CreateRootAccountUseCase",
    "CreateSubAccountUseCase",
    "DeleteAccountUseCase",
    "GetAccountUseCase",
    "UpdateAccountUseCase",
    # Context
    "ListUserAccountsUseCase",
    "SwitchAccountContextUseCase",
    # Hierarchy
    "ListAncestorsUseCase",
    "ListDescendantsUseCase",
    # Memberships
    "LinkUserToAccountUseCase",
    "RevokeMembershipUseCase",
]
