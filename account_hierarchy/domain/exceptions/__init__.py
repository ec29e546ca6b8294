"""Domain exceptions package."""

from account_hierarchy.domain.exceptions.base import DomainException
from account_hierarchy.domain.exceptions.account_exceptions import (
    AccountDomainException,
    AccountHierarchyTooDeepError,
    InvalidAccountHierarchyError,
    InvalidAccountIdentifierError,
)
from account_hierarchy.domain.exceptions.permission_exceptions import (
    InactiveMembershipError,
    InsufficientPermissionsError,
    InvalidRoleError,
    PermissionDomainException,
)

__all__ = [
    # Base
    "DomainException",
    # Account exceptions
    "AccountDomainException",
    "InvalidAccountIdentifierError",
    "InvalidAccountHierarchyError",
    "AccountHierarchyTooDeepError",
    # Permission exceptions
    "PermissionDomainException",
    "InsufficientPermissionsError",
    "InactiveMembershipError",
    "InvalidRoleError",
]
