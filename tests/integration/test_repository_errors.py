"""Store error translation against a real database."""

from datetime import UTC, datetime

import pytest
from sqlalchemy.exc import OperationalError

from account_hierarchy.application.dto.account_dto import CreateRootAccountInput
from account_hierarchy.application.exceptions import (
    AlreadyExistsError,
    StoreDataError,
    StoreUnavailableError,
)
from account_hierarchy.application.use_cases.accounts.create_root_account import (
    CreateRootAccountUseCase,
)
from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.domain.value_objects.enums import MembershipRole
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.account_model import (
    AccountModel,
)

pytestmark = pytest.mark.integration


class TestRepositoryErrors:
    @pytest.mark.asyncio
    async def test_duplicate_membership_raises_already_exists(self, uow_factory):
        membership = UserAccount.for_role("user:U1", "account:R", MembershipRole.OWNER)
        async with uow_factory() as uow:
            await uow.memberships.add(membership)
            await uow.commit()

        async with uow_factory() as uow:
            with pytest.raises(AlreadyExistsError) as exc_info:
                await uow.memberships.add(membership)

        assert exc_info.value.details["resource_type"] == "UserAccount"

    @pytest.mark.asyncio
    async def test_malformed_row_raises_store_data_error(self, db_config, uow_factory):
        # Arrange: level disagrees with the path
        now = datetime.now(UTC)
        async with db_config.get_session() as session:
            session.add(
                AccountModel(
                    account_id="account:X",
                    parent_account_id=None,
                    owner_user_id="user:U1",
                    created_by_user_id="user:U1",
                    name="Broken",
                    company="",
                    plan="free",
                    status="active",
                    level=2,
                    account_path="X/",
                    settings={},
                    usage={},
                    version=1,
                    created_at=now,
                    updated_at=now,
                )
            )
            await session.commit()

        # Act / Assert
        async with uow_factory() as uow:
            with pytest.raises(StoreDataError):
                await uow.accounts.get_by_id("account:X")

    @pytest.mark.asyncio
    async def test_lost_connection_at_commit_raises_store_unavailable(
        self, uow_factory, monkeypatch
    ):
        async with uow_factory() as uow:
            async def lost_commit():
                raise OperationalError("COMMIT", {}, Exception("connection lost"))

            monkeypatch.setattr(uow._session, "commit", lost_commit)
            use_case = CreateRootAccountUseCase(uow, id_factory=lambda: "account:R")

            with pytest.raises(StoreUnavailableError) as exc_info:
                await use_case.execute(CreateRootAccountInput(name="Root"), "user:U1")

        assert exc_info.value.details["operation"] == "uow.commit"
        async with uow_factory() as uow:
            assert await uow.accounts.get_by_id("account:R") is None

    @pytest.mark.asyncio
    async def test_health_check(self, db_config):
        assert await db_config.health_check() is True
