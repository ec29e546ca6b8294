"""Repository implementations."""

from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.repositories.account_repository import (
    PostgresAccountRepository,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.repositories.user_account_repository import (
    PostgresUserAccountRepository,
)

__all__ = [
    "PostgresAccountRepository",
    "PostgresUserAccountRepository",
]
