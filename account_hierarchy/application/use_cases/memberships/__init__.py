"""Membership use cases."""

from account_hierarchy.application.use_cases.memberships.link_user_to_account import (
    LinkUserToAccountUseCase,
)
from account_hierarchy.application.use_cases.memberships.revoke_membership import (
    RevokeMembershipUseCase,
)

__all__ = [
    "LinkUserToAccountUseCase",
    "RevokeMembershipUseCase",
]
