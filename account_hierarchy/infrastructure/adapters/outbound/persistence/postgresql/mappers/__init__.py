"""Entity ↔ model mappers."""

from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.mappers.account_mapper import (
    AccountMapper,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.mappers.user_account_mapper import (
    UserAccountMapper,
)

__all__ = [
    "AccountMapper",
    "UserAccountMapper",
]
