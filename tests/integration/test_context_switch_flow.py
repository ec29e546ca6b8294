"""Account listing and context switching against a real database."""

import pytest

from account_hierarchy.application.exceptions import ForbiddenError
from account_hierarchy.application.use_cases.context.list_user_accounts import (
    ListUserAccountsUseCase,
)
from account_hierarchy.application.use_cases.context.switch_account_context import (
    SwitchAccountContextUseCase,
)
from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.domain.value_objects.enums import MembershipRole

pytestmark = pytest.mark.integration


class TestContextSwitch:
    """Test AuthContext construction from stored memberships."""

    @pytest.mark.asyncio
    async def test_switch_between_accounts(self, uow_factory, create_root, create_sub):
        # Arrange
        await create_root("account:R", name="Root")
        await create_sub("account:R", "account:S", name="Child")

        # Act
        async with uow_factory() as uow:
            context = await SwitchAccountContextUseCase(uow).execute("user:U1", "account:S")

        # Assert
        claims = context.to_claims()
        assert claims["accountId"] == "account:S"
        assert claims["accountName"] == "Child"
        assert claims["role"] == "Admin"
        assert claims["accountPath"] == "R/S/"
        assert claims["level"] == 1
        assert [(a["accountId"], a["isCurrent"]) for a in claims["availableAccounts"]] == [
            ("account:R", False),
            ("account:S", True),
        ]

    @pytest.mark.asyncio
    async def test_switch_without_membership_forbidden(self, uow_factory, create_root):
        await create_root("account:R")

        async with uow_factory() as uow:
            with pytest.raises(ForbiddenError):
                await SwitchAccountContextUseCase(uow).execute("user:U2", "account:R")


class TestListUserAccounts:
    @pytest.mark.asyncio
    async def test_dangling_membership_is_skipped(self, uow_factory, create_root):
        # Arrange
        await create_root("account:R")
        async with uow_factory() as uow:
            await uow.memberships.add(
                UserAccount.for_role("user:U1", "account:GONE", MembershipRole.MEMBER)
            )
            await uow.commit()

        # Act
        async with uow_factory() as uow:
            result = await ListUserAccountsUseCase(uow).execute("user:U1")

        # Assert
        assert [a.account_id for a in result.accounts] == ["account:R"]
