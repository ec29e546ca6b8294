"""
Integration test fixtures.

Runs the SQLAlchemy repositories and unit of work against a throwaway
SQLite database (aiosqlite) created per test.
"""

import pytest
import pytest_asyncio

from account_hierarchy.application.dto.account_dto import (
    CreateRootAccountInput,
    CreateSubAccountInput,
)
from account_hierarchy.application.use_cases.accounts.create_root_account import (
    CreateRootAccountUseCase,
)
from account_hierarchy.application.use_cases.accounts.create_sub_account import (
    CreateSubAccountUseCase,
)
from account_hierarchy.infrastructure.config.database import DatabaseConfig
from account_hierarchy.infrastructure.config.dependencies import create_uow_factory
from account_hierarchy.infrastructure.config.settings import Settings


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'accounts.db'}",
        db_use_null_pool=True,
        store_timeout_seconds=5.0,
        _env_file=None,
    )


@pytest_asyncio.fixture
async def db_config(test_settings):
    """Create tables in a fresh database, drop them and dispose the engine afterwards."""
    config = DatabaseConfig.from_settings(test_settings)
    await config.create_tables()
    yield config
    await config.drop_tables()
    await config.close()


@pytest.fixture
def uow_factory(db_config, test_settings):
    return create_uow_factory(db_config, test_settings)


@pytest.fixture
def create_root(uow_factory):
    """Create a root account with a fixed id through the use case."""

    async def _create(account_id: str, user_id: str = "user:U1", name: str = "Root"):
        async with uow_factory() as uow:
            use_case = CreateRootAccountUseCase(uow, id_factory=lambda: account_id)
            return await use_case.execute(CreateRootAccountInput(name=name), user_id)

    return _create


@pytest.fixture
def create_sub(uow_factory):
    """Create a sub-account with a fixed id through the use case."""

    async def _create(
        parent_id: str, account_id: str, user_id: str = "user:U1", name: str = "Sub"
    ):
        async with uow_factory() as uow:
            use_case = CreateSubAccountUseCase(uow, id_factory=lambda: account_id)
            return await use_case.execute(
                parent_id, CreateSubAccountInput(name=name), user_id
            )

    return _create
