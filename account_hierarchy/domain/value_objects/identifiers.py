"""Namespaced identifiers for accounts and users.

Accounts and users share one storage system with other entity types, so every
identifier carries a namespace prefix ("account:", "user:"). Materialized
paths are built from the *bare* identifier, i.e. with the prefix removed.
"""

from uuid import uuid4

from account_hierarchy.domain.exceptions import InvalidAccountIdentifierError

ACCOUNT_ID_PREFIX = "account:"
USER_ID_PREFIX = "user:"
PATH_SEPARATOR = "/"
# Longest materialized path the accounts table can store
MAX_ACCOUNT_PATH_LENGTH = 2048


def new_account_id() -> str:
    """Generate a fresh canonical account identifier."""
    return f"{ACCOUNT_ID_PREFIX}{uuid4()}"


def _normalize(raw: str, prefix: str) -> str:
    if raw is None or not str(raw).strip():
        raise InvalidAccountIdentifierError(str(raw), "identifier cannot be empty")

    value = str(raw).strip()
    if not value.startswith(prefix):
        value = prefix + value

    bare = value[len(prefix):]
    if not bare:
        raise InvalidAccountIdentifierError(raw, "identifier has no value after its prefix")
    if PATH_SEPARATOR in bare:
        raise InvalidAccountIdentifierError(
            raw, f"identifier cannot contain {PATH_SEPARATOR!r}"
        )
    return value


def normalize_account_id(raw: str) -> str:
    """
    Convert a raw account identifier to canonical form.

    Args:
        raw: Identifier with or without the "account:" prefix

    Returns:
        Identifier with the "account:" prefix

    Raises:
        InvalidAccountIdentifierError: If the identifier is empty or contains
            the path separator
    """
    return _normalize(raw, ACCOUNT_ID_PREFIX)


def normalize_user_id(raw: str) -> str:
    """Convert a raw user identifier to canonical "user:" form."""
    return _normalize(raw, USER_ID_PREFIX)


def bare_account_id(account_id: str) -> str:
    """Strip the namespace prefix from an account identifier."""
    if account_id.startswith(ACCOUNT_ID_PREFIX):
        return account_id[len(ACCOUNT_ID_PREFIX):]
    return account_id


def bare_user_id(user_id: str) -> str:
    """Strip the namespace prefix from a user identifier."""
    if user_id.startswith(USER_ID_PREFIX):
        return user_id[len(USER_ID_PREFIX):]
    return user_id
