"""Mapper between UserAccount domain entity and UserAccountModel."""

from datetime import UTC, datetime

from account_hierarchy.application.exceptions import StoreDataError
from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.domain.value_objects.enums import MembershipRole, MembershipStatus
from account_hierarchy.domain.value_objects.permission import UserPermissions
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.mappers.account_mapper import (
    as_utc,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.user_account_model import (
    UserAccountModel,
)


class UserAccountMapper:
    """Mapper between UserAccount entity and UserAccountModel."""

    @staticmethod
    def to_entity(model: UserAccountModel) -> UserAccount:
        """
        Convert SQLAlchemy model to domain entity.

        Raises:
            StoreDataError: If role, status or permissions cannot be parsed
        """
        try:
            return UserAccount(
                user_id=model.user_id,
                account_id=model.account_id,
                role=MembershipRole(model.role),
                status=MembershipStatus(model.status),
                permissions=UserPermissions.from_dict(model.permissions or {}),
                linked_at=as_utc(model.linked_at),
                updated_at=as_utc(model.updated_at),
            )
        except (ValueError, TypeError, AttributeError) as e:
            raise StoreDataError(
                message=f"Malformed membership row ({model.user_id}, {model.account_id}): {e}",
                operation="user_account.to_entity",
            ) from e

    @staticmethod
    def to_model(entity: UserAccount) -> UserAccountModel:
        """Convert domain entity to SQLAlchemy model (for INSERT operations)."""
        return UserAccountModel(
            user_id=entity.user_id,
            account_id=entity.account_id,
            role=entity.role.value,
            status=entity.status.value,
            permissions=entity.permissions.to_dict(),
            linked_at=entity.linked_at or datetime.now(UTC),
            updated_at=entity.updated_at or datetime.now(UTC),
        )
