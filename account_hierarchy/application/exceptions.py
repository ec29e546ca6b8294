"""
Application layer exceptions.

Use cases raise these; callers map them onto their own transport. Only
StoreError and its subclasses are ``retryable``: everything else describes
the request, not the state of the backing store.
"""

from typing import Any, Optional


def _details(**values: Any) -> dict[str, Any]:
    """Keep only the detail fields that were supplied."""
    return {key: value for key, value in values.items() if value is not None}


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    retryable: bool = False

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            details: Structured context (resource ids, offending field, ...)
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (code: {self.error_code}, details: {self.details})"
        return f"{self.message} (code: {self.error_code})"


class NotFoundError(ApplicationError):
    """Raised when an account or membership does not exist."""

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        super().__init__(
            message,
            "NOT_FOUND",
            _details(resource_type=resource_type, resource_id=resource_id),
        )


class AlreadyExistsError(ApplicationError):
    """Raised when a row with the same key is already stored."""

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
    ):
        super().__init__(
            message,
            "ALREADY_EXISTS",
            _details(resource_type=resource_type, field=field, value=value),
        )


class ForbiddenError(ApplicationError):
    """
    Raised when the acting user has no Active membership on the account, or
    the membership lacks the required permission flag.
    """

    def __init__(
        self,
        message: str = "Insufficient permissions",
        required_permission: Optional[str] = None,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        super().__init__(
            message,
            "FORBIDDEN",
            _details(
                required_permission=required_permission,
                resource_type=resource_type,
                resource_id=resource_id,
            ),
        )


class ValidationError(ApplicationError):
    """Raised when request data breaks a business rule (empty name, bad id)."""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
    ):
        super().__init__(
            message,
            "VALIDATION_ERROR",
            _details(
                field=field,
                value=str(value) if value is not None else None,
                constraint=constraint,
            ),
        )


class ConflictError(ApplicationError):
    """
    Raised when the stored state forbids the operation: quota reached, stale
    version, account still has sub-accounts.
    """

    def __init__(
        self,
        message: str = "Operation conflicts with current state",
        operation: Optional[str] = None,
        current_state: Optional[str] = None,
    ):
        super().__init__(
            message,
            "CONFLICT",
            _details(operation=operation, current_state=current_state),
        )


class StoreError(ApplicationError):
    """
    Raised when the backing store fails.

    Store errors are the only ones a caller may retry with backoff. They are
    never reported as access-denied or not-found.
    """

    retryable = True

    def __init__(
        self,
        message: str = "Store operation failed",
        error_code: str = "STORE_ERROR",
        operation: Optional[str] = None,
    ):
        """
        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            operation: Repository operation that failed (e.g. "account.add")
        """
        super().__init__(message, error_code, _details(operation=operation))


class StoreUnavailableError(StoreError):
    """Raised when the store cannot be reached or rejects the statement."""

    def __init__(self, message: str = "Store unavailable", operation: Optional[str] = None):
        super().__init__(message, "STORE_UNAVAILABLE", operation)


class StoreTimeoutError(StoreError):
    """Raised when a store call exceeds its deadline."""

    def __init__(
        self,
        message: str = "Store operation timed out",
        operation: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
    ):
        super().__init__(message, "STORE_TIMEOUT", operation)
        if timeout_seconds is not None:
            self.details["timeout_seconds"] = timeout_seconds


class StoreDataError(StoreError):
    """Raised when a stored row cannot be mapped back to an entity."""

    def __init__(self, message: str = "Malformed stored data", operation: Optional[str] = None):
        super().__init__(message, "STORE_DATA_ERROR", operation)


class CompensationError(StoreError):
    """
    Raised when a compensating action fails after an earlier write failed.

    Both failures are kept so an operator can reconcile the leftover row.
    """

    def __init__(
        self,
        original_error: BaseException,
        compensation_error: BaseException,
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
    ):
        """
        Args:
            original_error: Error that triggered the compensation
            compensation_error: Error raised by the compensating action
            resource_type: Type of the possibly orphaned resource
            resource_id: ID of the possibly orphaned resource
        """
        self.original_error = original_error
        self.compensation_error = compensation_error
        super().__init__(
            f"Compensation failed after error: {original_error}; "
            f"cleanup error: {compensation_error}",
            "COMPENSATION_FAILED",
        )
        self.details.update(
            _details(
                original_error=str(original_error),
                compensation_error=str(compensation_error),
                resource_type=resource_type,
                resource_id=resource_id,
            )
        )
