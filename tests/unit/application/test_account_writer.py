"""Unit tests for paired account and owner-membership writes."""

from unittest.mock import AsyncMock

import pytest

from account_hierarchy.application.exceptions import (
    CompensationError,
    StoreTimeoutError,
    StoreUnavailableError,
)
from account_hierarchy.application.services.account_writer import write_account_with_owner


class TestWriteWithoutTransactions:
    """Test the compensating delete used on non-transactional stores."""

    @pytest.mark.asyncio
    async def test_writes_both_rows(self, memory_uow, make_account, make_membership):
        account = make_account("account:R")
        owner = make_membership(account_id="account:R")

        saved = await write_account_with_owner(memory_uow, account, owner)

        assert saved.account_id == "account:R"
        assert "account:R" in memory_uow.accounts.rows
        assert ("user:U1", "account:R") in memory_uow.memberships.rows
        assert memory_uow.commits == 1

    @pytest.mark.asyncio
    async def test_membership_failure_removes_account(
        self, memory_uow, make_account, make_membership
    ):
        # Arrange
        memory_uow.memberships.fail_on_add = StoreUnavailableError(operation="user_account.add")

        # Act
        with pytest.raises(StoreUnavailableError):
            await write_account_with_owner(
                memory_uow, make_account("account:R"), make_membership(account_id="account:R")
            )

        # Assert
        assert memory_uow.accounts.rows == {}
        assert memory_uow.accounts.delete_calls == ["account:R"]
        assert memory_uow.commits == 0

    @pytest.mark.asyncio
    async def test_failed_cleanup_reports_both_errors(
        self, memory_uow, make_account, make_membership
    ):
        # Arrange
        original = StoreUnavailableError(operation="user_account.add")
        cleanup = StoreTimeoutError(operation="account.delete", timeout_seconds=5.0)
        memory_uow.memberships.fail_on_add = original
        memory_uow.accounts.fail_on_delete = cleanup

        # Act
        with pytest.raises(CompensationError) as exc_info:
            await write_account_with_owner(
                memory_uow, make_account("account:R"), make_membership(account_id="account:R")
            )

        # Assert
        error = exc_info.value
        assert error.original_error is original
        assert error.compensation_error is cleanup
        assert error.error_code == "COMPENSATION_FAILED"
        assert error.details["resource_id"] == "account:R"
        assert "account:R" in memory_uow.accounts.rows


class TestWriteWithTransactions:
    @pytest.mark.asyncio
    async def test_membership_failure_skips_compensation(
        self, mock_uow, make_account, make_membership
    ):
        account = make_account("account:R")
        mock_uow.accounts.add = AsyncMock(return_value=account)
        mock_uow.accounts.delete = AsyncMock()
        mock_uow.memberships.add = AsyncMock(side_effect=StoreUnavailableError())

        with pytest.raises(StoreUnavailableError):
            await write_account_with_owner(
                mock_uow, account, make_membership(account_id="account:R")
            )

        mock_uow.accounts.delete.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()
