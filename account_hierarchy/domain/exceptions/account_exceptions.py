"""Account domain exceptions."""

from account_hierarchy.domain.exceptions.base import DomainException


class AccountDomainException(DomainException):
    """Base exception for account-related domain errors."""


class InvalidAccountIdentifierError(AccountDomainException):
    """Raised when an account or user identifier is malformed."""

    def __init__(self, identifier: str, reason: str):
        super().__init__(
            message=f"Invalid identifier {identifier!r}: {reason}",
            code="INVALID_IDENTIFIER"
        )


class InvalidAccountHierarchyError(AccountDomainException):
    """Raised when an account's path or level breaks the hierarchy invariant."""

    def __init__(self, account_id: str, reason: str):
        super().__init__(
            message=f"Invalid hierarchy for account {account_id}: {reason}",
            code="INVALID_ACCOUNT_HIERARCHY"
        )


class AccountHierarchyTooDeepError(InvalidAccountHierarchyError):
    """Raised when a new account's path would exceed the stored path length."""

    def __init__(self, account_id: str, path_length: int, max_length: int):
        self.path_length = path_length
        self.max_length = max_length
        super().__init__(
            account_id,
            f"path of {path_length} characters exceeds the limit of {max_length}"
        )
