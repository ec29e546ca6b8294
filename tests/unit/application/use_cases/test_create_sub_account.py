"""Unit tests for CreateSubAccountUseCase."""

from unittest.mock import AsyncMock

import pytest

from account_hierarchy.application.dto.account_dto import CreateSubAccountInput
from account_hierarchy.application.exceptions import (
    CompensationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from account_hierarchy.application.use_cases.accounts.create_sub_account import (
    CreateSubAccountUseCase,
)
from account_hierarchy.domain.value_objects.account_settings import AccountSettings
from account_hierarchy.domain.value_objects.enums import MembershipRole
from account_hierarchy.domain.value_objects.permission import UserPermissions


@pytest.fixture
def parent(make_account):
    return make_account("account:R")


@pytest.fixture
def owner_membership(make_membership):
    return make_membership("user:U1", "account:R", MembershipRole.OWNER)


@pytest.fixture
def configured_uow(mock_uow, parent, owner_membership):
    mock_uow.memberships.get = AsyncMock(return_value=owner_membership)
    mock_uow.accounts.get_for_update = AsyncMock(return_value=parent)
    mock_uow.accounts.count_children = AsyncMock(return_value=0)
    mock_uow.accounts.add = AsyncMock(side_effect=lambda account: account)
    mock_uow.memberships.add = AsyncMock(side_effect=lambda membership: membership)
    return mock_uow


class TestCreateSubAccountUseCase:
    """Test sub-account creation."""

    @pytest.mark.asyncio
    async def test_create_sub_account_success(self, configured_uow):
        # Arrange
        use_case = CreateSubAccountUseCase(configured_uow, id_factory=lambda: "account:S")

        # Act
        result = await use_case.execute(
            "account:R", CreateSubAccountInput(name="Team"), "user:U1"
        )

        # Assert
        assert result.account_id == "account:S"
        assert result.parent_account_id == "account:R"
        assert result.account_path == "R/S/"
        assert result.level == 1
        assert result.plan == "starter"
        assert result.owner_user_id == "user:U1"
        configured_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_owner_gets_admin_membership_with_all_permissions(self, configured_uow):
        use_case = CreateSubAccountUseCase(configured_uow, id_factory=lambda: "account:S")

        await use_case.execute(
            "account:R", CreateSubAccountInput(name="Team", owner_user_id="U2"), "user:U1"
        )

        membership = configured_uow.memberships.add.await_args.args[0]
        assert membership.user_id == "user:U2"
        assert membership.account_id == "account:S"
        assert membership.role == MembershipRole.ADMIN
        assert membership.permissions == UserPermissions.full()
        created = configured_uow.accounts.add.await_args.args[0]
        assert created.owner_user_id == "user:U2"
        assert created.created_by_user_id == "user:U1"

    @pytest.mark.asyncio
    async def test_non_member_is_forbidden_and_nothing_is_read_or_written(self, configured_uow):
        # Arrange
        configured_uow.memberships.get = AsyncMock(return_value=None)
        use_case = CreateSubAccountUseCase(configured_uow)

        # Act
        with pytest.raises(ForbiddenError):
            await use_case.execute("account:R", CreateSubAccountInput(name="Team"), "user:U2")

        # Assert
        configured_uow.accounts.get_for_update.assert_not_awaited()
        configured_uow.accounts.add.assert_not_awaited()
        configured_uow.memberships.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_member_without_flag_is_forbidden(self, configured_uow, make_membership):
        configured_uow.memberships.get = AsyncMock(
            return_value=make_membership("user:U3", "account:R", MembershipRole.MANAGER)
        )
        use_case = CreateSubAccountUseCase(configured_uow)

        with pytest.raises(ForbiddenError) as exc_info:
            await use_case.execute("account:R", CreateSubAccountInput(name="Team"), "user:U3")

        assert exc_info.value.details["required_permission"] == "can_create_sub_accounts"
        configured_uow.accounts.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_permission_is_checked_before_parent_lookup(self, configured_uow):
        """Test that a non-member learns nothing about whether the parent exists."""
        configured_uow.memberships.get = AsyncMock(return_value=None)
        configured_uow.accounts.get_for_update = AsyncMock(return_value=None)
        use_case = CreateSubAccountUseCase(configured_uow)

        with pytest.raises(ForbiddenError):
            await use_case.execute("account:MISSING", CreateSubAccountInput(name="X"), "user:U1")

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, configured_uow):
        configured_uow.accounts.get_for_update = AsyncMock(return_value=None)
        use_case = CreateSubAccountUseCase(configured_uow)

        with pytest.raises(NotFoundError):
            await use_case.execute("account:R", CreateSubAccountInput(name="Team"), "user:U1")

        configured_uow.accounts.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, configured_uow):
        use_case = CreateSubAccountUseCase(configured_uow)

        with pytest.raises(ValidationError):
            await use_case.execute("account:R", CreateSubAccountInput(name=" "), "user:U1")

    @pytest.mark.asyncio
    async def test_malformed_owner_rejected(self, configured_uow):
        use_case = CreateSubAccountUseCase(configured_uow)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                "account:R",
                CreateSubAccountInput(name="Team", owner_user_id="a/b"),
                "user:U1",
            )

        assert exc_info.value.details["field"] == "owner_user_id"

    @pytest.mark.asyncio
    async def test_quota_exhausted_raises_conflict(self, configured_uow):
        configured_uow.accounts.count_children = AsyncMock(return_value=5)
        use_case = CreateSubAccountUseCase(configured_uow)

        with pytest.raises(ConflictError):
            await use_case.execute("account:R", CreateSubAccountInput(name="Team"), "user:U1")

        configured_uow.accounts.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_parent_is_locked_before_children_are_counted(self, configured_uow, parent):
        calls = []

        async def lock(account_id):
            calls.append(("lock", account_id))
            return parent

        async def count(account_id):
            calls.append(("count", account_id))
            return 0

        configured_uow.accounts.get_for_update = lock
        configured_uow.accounts.count_children = count
        use_case = CreateSubAccountUseCase(configured_uow)

        await use_case.execute("account:R", CreateSubAccountInput(name="Team"), "user:U1")

        assert calls == [("lock", "account:R"), ("count", "account:R")]

    @pytest.mark.asyncio
    async def test_disabled_sub_accounts_raise_conflict(self, configured_uow, make_account):
        configured_uow.accounts.get_for_update = AsyncMock(
            return_value=make_account(
                "account:R", settings=AccountSettings(allow_sub_accounts=False)
            )
        )
        use_case = CreateSubAccountUseCase(configured_uow)

        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute("account:R", CreateSubAccountInput(name="Team"), "user:U1")

        assert exc_info.value.details["current_state"] == "sub-accounts disabled"

    @pytest.mark.asyncio
    async def test_grandchild_path(self, configured_uow, make_account, make_membership):
        root = make_account("account:R")
        child = make_account("account:S", parent=root)
        configured_uow.accounts.get_for_update = AsyncMock(return_value=child)
        configured_uow.memberships.get = AsyncMock(
            return_value=make_membership("user:U1", "account:S", MembershipRole.ADMIN)
        )
        use_case = CreateSubAccountUseCase(configured_uow, id_factory=lambda: "account:T")

        result = await use_case.execute(
            "account:S", CreateSubAccountInput(name="Squad"), "user:U1"
        )

        assert result.account_path == "R/S/T/"
        assert result.level == 2

    @pytest.mark.asyncio
    async def test_too_deep_hierarchy_raises_conflict(
        self, configured_uow, make_account, make_membership
    ):
        # Arrange: 55 uuid-sized segments leave no room for one more level
        segments = [f"{index:036d}" for index in range(55)]
        deep = make_account(
            "account:" + segments[-1],
            parent_account_id="account:" + segments[-2],
            account_path="/".join(segments) + "/",
            level=54,
        )
        configured_uow.accounts.get_for_update = AsyncMock(return_value=deep)
        configured_uow.memberships.get = AsyncMock(
            return_value=make_membership("user:U1", deep.account_id, MembershipRole.OWNER)
        )
        use_case = CreateSubAccountUseCase(
            configured_uow, id_factory=lambda: "account:" + "f" * 36
        )

        # Act
        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(
                deep.account_id, CreateSubAccountInput(name="Squad"), "user:U1"
            )

        # Assert
        assert exc_info.value.retryable is False
        assert exc_info.value.details["current_state"] == "parent at level 54"
        configured_uow.accounts.add.assert_not_awaited()


class TestCreateSubAccountWithoutTransactions:
    """Test sub-account creation on a store without transactions."""

    @pytest.fixture
    def seeded_uow(self, memory_uow, parent, owner_membership):
        memory_uow.accounts.rows[parent.account_id] = parent
        memory_uow.memberships.rows[owner_membership.key] = owner_membership
        return memory_uow

    @pytest.mark.asyncio
    async def test_both_rows_written(self, seeded_uow):
        use_case = CreateSubAccountUseCase(seeded_uow, id_factory=lambda: "account:S")

        await use_case.execute("account:R", CreateSubAccountInput(name="Team"), "user:U1")

        assert "account:S" in seeded_uow.accounts.rows
        assert ("user:U1", "account:S") in seeded_uow.memberships.rows

    @pytest.mark.asyncio
    async def test_membership_failure_leaves_no_orphan_account(self, seeded_uow):
        # Arrange
        seeded_uow.memberships.fail_on_add = StoreUnavailableError(operation="user_account.add")
        use_case = CreateSubAccountUseCase(seeded_uow, id_factory=lambda: "account:S")

        # Act
        with pytest.raises(StoreUnavailableError):
            await use_case.execute("account:R", CreateSubAccountInput(name="Team"), "user:U1")

        # Assert
        assert "account:S" not in seeded_uow.accounts.rows
        assert await seeded_uow.accounts.count_children("account:R") == 0

    @pytest.mark.asyncio
    async def test_failed_cleanup_raises_compensation_error(self, seeded_uow):
        seeded_uow.memberships.fail_on_add = StoreUnavailableError(operation="user_account.add")
        seeded_uow.accounts.fail_on_delete = StoreUnavailableError(operation="account.delete")
        use_case = CreateSubAccountUseCase(seeded_uow, id_factory=lambda: "account:S")

        with pytest.raises(CompensationError) as exc_info:
            await use_case.execute("account:R", CreateSubAccountInput(name="Team"), "user:U1")

        assert exc_info.value.details["resource_id"] == "account:S"
        assert exc_info.value.retryable is True
