"""Application services."""

from account_hierarchy.application.services.access_control_service import (
    AccessControlService,
)
from account_hierarchy.application.services.account_writer import write_account_with_owner

__all__ = [
    "AccessControlService",
    "write_account_with_owner",
]
