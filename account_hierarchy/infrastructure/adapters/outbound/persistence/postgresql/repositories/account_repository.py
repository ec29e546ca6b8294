"""
SQLAlchemy implementation of AccountRepositoryPort.

Descendant queries are prefix matches on the materialized path, served by
the ``ix_accounts_account_path`` B-tree index.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from account_hierarchy.application.ports.outbound.account_repository_port import (
    AccountRepositoryPort,
)
from account_hierarchy.domain.entities.account import Account
from account_hierarchy.domain.value_objects.account_settings import AccountSettings
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.mappers.account_mapper import (
    AccountMapper,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.account_model import (
    AccountModel,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)

# account_path, level and the identity columns are fixed at creation
UPDATABLE_FIELDS = frozenset({"name", "company", "settings", "plan", "status"})


class PostgresAccountRepository(BaseRepository[AccountModel, Account], AccountRepositoryPort):
    """
    SQLAlchemy implementation of AccountRepositoryPort.

    Inherits guarded execution from BaseRepository and implements
    Account-specific operations defined in AccountRepositoryPort.
    """

    resource_type = "Account"

    def __init__(self, session: AsyncSession, operation_timeout: Optional[float] = None):
        """
        Initialize account repository.

        Args:
            session: SQLAlchemy async session
            operation_timeout: Deadline in seconds applied to every statement
        """
        super().__init__(session, AccountModel, AccountMapper, operation_timeout)

    async def add(self, account: Account) -> Account:
        return await self._insert("account.add", account)

    async def get_by_id(self, account_id: str) -> Optional[Account]:
        """
        Retrieve account by ID.

        Args:
            account_id: Canonical account identifier

        Returns:
            Account entity if found, None otherwise
        """
        stmt = (
            select(AccountModel)
            .where(AccountModel.account_id == account_id)
            .execution_options(populate_existing=True)
        )
        result = await self._execute("account.get_by_id", stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self.mapper.to_entity(model)

    async def get_for_update(self, account_id: str) -> Optional[Account]:
        """
        Retrieve an account and lock its row until the transaction ends.

        The lock is a no-op UPDATE rather than SELECT ... FOR UPDATE: it takes
        the row lock on PostgreSQL and the database write lock on SQLite, which
        has no FOR UPDATE. Setting updated_at to itself keeps the onupdate
        default from firing.

        Args:
            account_id: Canonical account identifier

        Returns:
            Account entity if found, None otherwise
        """
        stmt = (
            update(AccountModel)
            .where(AccountModel.account_id == account_id)
            .values(updated_at=AccountModel.updated_at)
            .execution_options(synchronize_session=False)
        )
        result = await self._execute("account.get_for_update", stmt)
        if result.rowcount == 0:
            return None

        return await self.get_by_id(account_id)

    async def get_many(self, account_ids: list[str]) -> dict[str, Account]:
        """
        Retrieve several accounts with one IN query.

        Args:
            account_ids: Canonical account identifiers

        Returns:
            Mapping of account_id to Account for the ids that exist
        """
        if not account_ids:
            return {}

        stmt = (
            select(AccountModel)
            .where(AccountModel.account_id.in_(set(account_ids)))
            .execution_options(populate_existing=True)
        )
        result = await self._execute("account.get_many", stmt)

        return {
            model.account_id: self.mapper.to_entity(model)
            for model in result.scalars().all()
        }

    async def list_by_path_prefix(
        self, path_prefix: str, exclude_account_id: Optional[str] = None
    ) -> list[Account]:
        """
        List accounts whose path starts with a prefix.

        ``autoescape`` makes LIKE wildcards in the prefix match literally.
        Since every path segment ends with the separator, a prefix of
        "1/" never matches "12/".

        Args:
            path_prefix: Path prefix ending with the separator
            exclude_account_id: Account to leave out (usually the prefix owner)

        Returns:
            Matching accounts ordered by (level, account_path)
        """
        stmt = select(AccountModel).where(
            AccountModel.account_path.startswith(path_prefix, autoescape=True)
        )

        if exclude_account_id is not None:
            stmt = stmt.where(AccountModel.account_id != exclude_account_id)

        stmt = stmt.order_by(AccountModel.level, AccountModel.account_path)

        result = await self._execute("account.list_by_path_prefix", stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def count_children(self, parent_account_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(AccountModel)
            .where(AccountModel.parent_account_id == parent_account_id)
        )
        result = await self._execute("account.count_children", stmt)
        return result.scalar_one()

    async def update_fields(
        self,
        account_id: str,
        changes: dict[str, Any],
        expected_version: Optional[int] = None,
    ) -> Optional[Account]:
        """
        Conditionally update some columns of an account.

        The UPDATE matches on account_id and, when given, on the expected
        version. It bumps version and updated_at in the same statement.

        Args:
            account_id: Account to update
            changes: Column values to set
            expected_version: Only update if the stored version matches

        Returns:
            Updated account, or None if no row matched

        Raises:
            ValueError: If changes name a column that cannot be updated
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update account fields: {sorted(unknown)}")

        values: dict[str, Any] = {}
        for field, value in changes.items():
            if isinstance(value, AccountSettings):
                value = value.to_dict()
            elif isinstance(value, Enum):
                value = value.value
            values[field] = value

        values["updated_at"] = datetime.now(UTC)
        values["version"] = AccountModel.version + 1

        stmt = update(AccountModel).where(AccountModel.account_id == account_id)
        if expected_version is not None:
            stmt = stmt.where(AccountModel.version == expected_version)
        stmt = stmt.values(**values).execution_options(synchronize_session=False)

        result = await self._execute("account.update_fields", stmt)
        if result.rowcount == 0:
            return None

        return await self.get_by_id(account_id)

    async def delete(self, account_id: str) -> bool:
        """
        Hard delete an account row.

        Deleting a missing account is not an error, which keeps compensating
        deletes safe to retry.

        Returns:
            True if a row was deleted
        """
        stmt = delete(AccountModel).where(AccountModel.account_id == account_id)
        result = await self._execute("account.delete", stmt)
        return result.rowcount > 0
