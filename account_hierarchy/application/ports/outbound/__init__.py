"""Outbound ports (repository and unit of work interfaces)."""

from account_hierarchy.application.ports.outbound.account_repository_port import (
    AccountRepositoryPort,
)
from account_hierarchy.application.ports.outbound.unit_of_work_port import (
    UnitOfWorkPort,
)
from account_hierarchy.application.ports.outbound.user_account_repository_port import (
    UserAccountRepositoryPort,
)

__all__ = [
    "AccountRepositoryPort",
    "UnitOfWorkPort",
    "UserAccountRepositoryPort",
]
