"""
SQLAlchemy models for persistence.

These are pure SQLAlchemy models with NO business logic.
Business logic lives in the Domain layer (account_hierarchy.domain.entities).

Models:
- Base: Declarative base with constraint naming convention
- AccountModel: Accounts with materialized hierarchy path
- UserAccountModel: User memberships on accounts

Mixins:
- TimestampMixin: created_at and updated_at timestamps
"""

from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.account_model import (
    AccountModel,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.mixins import (
    TimestampMixin,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.user_account_model import (
    UserAccountModel,
)

__all__ = [
    # Base
    "Base",
    # Models
    "AccountModel",
    "UserAccountModel",
    # Mixins
    "TimestampMixin",
]
