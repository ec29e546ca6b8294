"""Domain entities package."""

from account_hierarchy.domain.entities.account import Account
from account_hierarchy.domain.entities.user_account import UserAccount

__all__ = [
    "Account",
    "UserAccount",
]
