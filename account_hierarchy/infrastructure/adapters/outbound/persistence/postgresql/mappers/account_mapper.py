"""
Mapper between Account domain entity and AccountModel database model.

This mapper handles bidirectional conversion:
- to_entity(): Convert SQLAlchemy model → Domain entity
- to_model(): Convert Domain entity → SQLAlchemy model
"""

from datetime import UTC, datetime
from typing import Optional

from account_hierarchy.application.exceptions import StoreDataError
from account_hierarchy.domain.entities.account import Account
from account_hierarchy.domain.exceptions import DomainException
from account_hierarchy.domain.value_objects.account_settings import (
    AccountSettings,
    AccountUsage,
)
from account_hierarchy.domain.value_objects.enums import AccountPlan, AccountStatus
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.account_model import (
    AccountModel,
)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps (SQLite drops the timezone)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class AccountMapper:
    """Mapper between Account entity and AccountModel."""

    @staticmethod
    def to_entity(model: AccountModel) -> Account:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: AccountModel from database

        Returns:
            Account domain entity

        Raises:
            StoreDataError: If the stored row violates the entity's invariants
        """
        try:
            return Account(
                account_id=model.account_id,
                parent_account_id=model.parent_account_id,
                owner_user_id=model.owner_user_id,
                created_by_user_id=model.created_by_user_id,
                name=model.name,
                company=model.company or "",
                plan=AccountPlan(model.plan),
                status=AccountStatus(model.status),
                level=model.level,
                account_path=model.account_path,
                settings=AccountSettings.from_dict(model.settings or {}),
                usage=AccountUsage.from_dict(model.usage or {}),
                version=model.version,
                created_at=as_utc(model.created_at),
                updated_at=as_utc(model.updated_at),
            )
        except (DomainException, ValueError, TypeError, AttributeError) as e:
            raise StoreDataError(
                message=f"Malformed account row {model.account_id}: {e}",
                operation="account.to_entity",
            ) from e

    @staticmethod
    def to_model(entity: Account) -> AccountModel:
        """
        Convert domain entity to SQLAlchemy model (for INSERT operations).

        Args:
            entity: Account domain entity

        Returns:
            AccountModel for database persistence
        """
        return AccountModel(
            account_id=entity.account_id,
            parent_account_id=entity.parent_account_id,
            owner_user_id=entity.owner_user_id,
            created_by_user_id=entity.created_by_user_id,
            name=entity.name,
            company=entity.company,
            plan=entity.plan.value,
            status=entity.status.value,
            level=entity.level,
            account_path=entity.account_path,
            settings=entity.settings.to_dict(),
            usage=entity.usage.to_dict(),
            version=entity.version,
            created_at=entity.created_at or datetime.now(UTC),
            updated_at=entity.updated_at or datetime.now(UTC),
        )
