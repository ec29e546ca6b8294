"""Infrastructure configuration: settings, logging and database."""

from account_hierarchy.infrastructure.config.database import DatabaseConfig
from account_hierarchy.infrastructure.config.dependencies import create_uow_factory
from account_hierarchy.infrastructure.config.logging import (
    CorrelationIdFilter,
    get_logging_config,
    set_correlation_id,
    setup_logging,
)
from account_hierarchy.infrastructure.config.settings import Settings

__all__ = [
    "CorrelationIdFilter",
    "DatabaseConfig",
    "Settings",
    "create_uow_factory",
    "get_logging_config",
    "set_correlation_id",
    "setup_logging",
]
