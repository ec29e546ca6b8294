"""SQLAlchemy implementation of UserAccountRepositoryPort."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from account_hierarchy.application.ports.outbound.user_account_repository_port import (
    UserAccountRepositoryPort,
)
from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.mappers.user_account_mapper import (
    UserAccountMapper,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.user_account_model import (
    UserAccountModel,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresUserAccountRepository(
    BaseRepository[UserAccountModel, UserAccount], UserAccountRepositoryPort
):
    """SQLAlchemy implementation of UserAccountRepositoryPort."""

    resource_type = "UserAccount"

    def __init__(self, session: AsyncSession, operation_timeout: Optional[float] = None):
        """
        Initialize membership repository.

        Args:
            session: SQLAlchemy async session
            operation_timeout: Deadline in seconds applied to every statement
        """
        super().__init__(session, UserAccountModel, UserAccountMapper, operation_timeout)

    async def add(self, membership: UserAccount) -> UserAccount:
        return await self._insert("user_account.add", membership)

    async def get(self, user_id: str, account_id: str) -> Optional[UserAccount]:
        """
        Retrieve the membership for a (user, account) pair.

        Returns:
            UserAccount if found, None otherwise
        """
        stmt = (
            select(UserAccountModel)
            .where(
                UserAccountModel.user_id == user_id,
                UserAccountModel.account_id == account_id,
            )
            .execution_options(populate_existing=True)
        )
        result = await self._execute("user_account.get", stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self.mapper.to_entity(model)

    async def list_by_user(self, user_id: str) -> list[UserAccount]:
        """
        List all memberships of a user.

        Returns:
            Memberships ordered by (linked_at, account_id)
        """
        stmt = (
            select(UserAccountModel)
            .where(UserAccountModel.user_id == user_id)
            .order_by(UserAccountModel.linked_at, UserAccountModel.account_id)
        )
        result = await self._execute("user_account.list_by_user", stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def list_by_account(self, account_id: str) -> list[UserAccount]:
        stmt = (
            select(UserAccountModel)
            .where(UserAccountModel.account_id == account_id)
            .order_by(UserAccountModel.linked_at, UserAccountModel.user_id)
        )
        result = await self._execute("user_account.list_by_account", stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def delete(self, user_id: str, account_id: str) -> bool:
        stmt = delete(UserAccountModel).where(
            UserAccountModel.user_id == user_id,
            UserAccountModel.account_id == account_id,
        )
        result = await self._execute("user_account.delete", stmt)
        return result.rowcount > 0

    async def delete_by_account(self, account_id: str) -> int:
        stmt = delete(UserAccountModel).where(UserAccountModel.account_id == account_id)
        result = await self._execute("user_account.delete_by_account", stmt)
        return result.rowcount
