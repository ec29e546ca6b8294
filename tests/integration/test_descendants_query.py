"""Materialized-path prefix queries against a real database."""

import pytest

pytestmark = pytest.mark.integration


class TestListByPathPrefix:
    """Test the repository's descendant query."""

    @pytest.mark.asyncio
    async def test_shared_numeric_prefix_not_matched(self, uow_factory, create_root, create_sub):
        # Arrange
        await create_root("account:1")
        await create_root("account:12")
        await create_sub("account:1", "account:1x")
        await create_sub("account:12", "account:12x")

        # Act
        async with uow_factory() as uow:
            found = await uow.accounts.list_by_path_prefix("1/", exclude_account_id="account:1")

        # Assert
        assert [a.account_id for a in found] == ["account:1x"]

    @pytest.mark.asyncio
    async def test_like_wildcards_match_literally(self, uow_factory, create_root):
        await create_root("account:a_")
        await create_root("account:ab")

        async with uow_factory() as uow:
            found = await uow.accounts.list_by_path_prefix("a_/")

        assert [a.account_id for a in found] == ["account:a_"]

    @pytest.mark.asyncio
    async def test_ordered_by_level_then_path(self, uow_factory, create_root, create_sub):
        await create_root("account:R")
        await create_sub("account:R", "account:B")
        await create_sub("account:B", "account:C")
        await create_sub("account:R", "account:A")

        async with uow_factory() as uow:
            found = await uow.accounts.list_by_path_prefix("R/")

        assert [a.account_path for a in found] == ["R/", "R/A/", "R/B/", "R/B/C/"]

    @pytest.mark.asyncio
    async def test_get_many_ignores_missing_ids(self, uow_factory, create_root):
        await create_root("account:R")

        async with uow_factory() as uow:
            found = await uow.accounts.get_many(["account:R", "account:GONE"])

        assert list(found) == ["account:R"]
