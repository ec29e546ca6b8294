"""Hierarchy query use cases."""

from account_hierarchy.application.use_cases.hierarchy.list_ancestors import (
    ListAncestorsUseCase,
)
from account_hierarchy.application.use_cases.hierarchy.list_descendants import (
    ListDescendantsUseCase,
)

__all__ = [
    "ListAncestorsUseCase",
    "ListDescendantsUseCase",
]
