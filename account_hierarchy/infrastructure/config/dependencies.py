"""
Dependency injection helpers for infrastructure components.

These factories hand out units of work without relying on global state.

Usage:
    settings = Settings()
    db_config = DatabaseConfig.from_settings(settings)
    uow_factory = create_uow_factory(db_config, settings)

    async with uow_factory() as uow:
        account = await CreateRootAccountUseCase(uow).execute(data, user_id)
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.unit_of_work import (
    PostgresUnitOfWork,
)
from account_hierarchy.infrastructure.config.database import DatabaseConfig
from account_hierarchy.infrastructure.config.settings import Settings


def create_uow_factory(db_config: DatabaseConfig, settings: Settings):
    """
    Create a Unit of Work factory.

    Each call opens a fresh session wrapped in a PostgresUnitOfWork whose
    repositories use ``settings.store_timeout_seconds`` as their deadline.
    The unit of work is closed when the context exits.

    Args:
        db_config: DatabaseConfig instance
        settings: Settings built by the host process

    Returns:
        Callable returning an async context manager that yields a unit of work
    """

    @asynccontextmanager
    async def get_uow() -> AsyncGenerator[PostgresUnitOfWork, None]:
        async with db_config.get_session() as session:
            uow = PostgresUnitOfWork(session, operation_timeout=settings.store_timeout_seconds)
            try:
                yield uow
            finally:
                await uow.close()

    return get_uow
