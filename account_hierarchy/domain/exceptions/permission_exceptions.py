"""Membership and authorization domain exceptions."""

from account_hierarchy.domain.exceptions.base import DomainException


class PermissionDomainException(DomainException):
    """Base exception for permission-related domain errors."""


class InsufficientPermissionsError(PermissionDomainException):
    """Raised when a membership lacks a required permission."""

    def __init__(self, user_id: str, account_id: str, required_permission: str):
        self.user_id = user_id
        self.account_id = account_id
        self.required_permission = required_permission
        super().__init__(
            message=(
                f"User {user_id} lacks permission {required_permission} "
                f"on account {account_id}"
            ),
            code="INSUFFICIENT_PERMISSIONS"
        )


class InactiveMembershipError(PermissionDomainException):
    """Raised when a membership exists but is not active."""

    def __init__(self, user_id: str, account_id: str, status: str):
        self.user_id = user_id
        self.account_id = account_id
        super().__init__(
            message=f"Membership of user {user_id} on account {account_id} is {status}",
            code="INACTIVE_MEMBERSHIP"
        )


class InvalidRoleError(PermissionDomainException):
    """Raised when a role is unknown or cannot be assigned."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Invalid role: {reason}",
            code="INVALID_ROLE"
        )
