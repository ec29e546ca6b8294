"""Domain services package."""

from account_hierarchy.domain.services.hierarchy import HierarchyManager
from account_hierarchy.domain.services.permission_checker import PermissionChecker

__all__ = [
    "HierarchyManager",
    "PermissionChecker",
]
