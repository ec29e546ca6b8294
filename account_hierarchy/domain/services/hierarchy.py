"""Hierarchy manager domain service."""

from account_hierarchy.domain.entities.account import Account
from account_hierarchy.domain.exceptions import (
    AccountHierarchyTooDeepError,
    InvalidAccountHierarchyError,
)
from account_hierarchy.domain.value_objects.identifiers import (
    ACCOUNT_ID_PREFIX,
    MAX_ACCOUNT_PATH_LENGTH,
    PATH_SEPARATOR,
    bare_account_id,
)


class HierarchyManager:
    """
    Domain service for materialized account paths.

    Every account stores ``account_path``: the bare ids of its ancestors and of
    itself, each followed by the separator (``"R/S/"``). Because each segment
    is terminated, a plain prefix test on paths is a correct descendant test.
    """

    @staticmethod
    def build_child_path(parent: Account | None, child_id: str) -> tuple[str, int]:
        """
        Compute path and level for a new account.

        Args:
            parent: Parent account, or None for a root account
            child_id: Canonical id of the new account

        Returns:
            Tuple of (account_path, level)

        Raises:
            AccountHierarchyTooDeepError: If the path would exceed
                MAX_ACCOUNT_PATH_LENGTH
        """
        segment = bare_account_id(child_id) + PATH_SEPARATOR
        if parent is None:
            account_path, level = segment, 0
        else:
            account_path, level = parent.account_path + segment, parent.level + 1

        if len(account_path) > MAX_ACCOUNT_PATH_LENGTH:
            raise AccountHierarchyTooDeepError(
                child_id, len(account_path), MAX_ACCOUNT_PATH_LENGTH
            )
        return account_path, level

    @staticmethod
    def path_segments(account_path: str) -> list[str]:
        """Split a materialized path into bare ids, root first."""
        return [segment for segment in account_path.split(PATH_SEPARATOR) if segment]

    @classmethod
    def ancestor_ids(cls, account: Account) -> list[str]:
        """
        Canonical ids of all ancestors of an account, root first.

        The account itself is not included.
        """
        segments = cls.path_segments(account.account_path)[:-1]
        return [ACCOUNT_ID_PREFIX + segment for segment in segments]

    @staticmethod
    def is_descendant_path(candidate_path: str, ancestor_path: str) -> bool:
        """
        Check if a path lies strictly below another path.

        Args:
            candidate_path: Path of the possible descendant
            ancestor_path: Path of the possible ancestor

        Returns:
            True if ancestor_path is a proper, separator-aligned prefix
        """
        if not ancestor_path.endswith(PATH_SEPARATOR):
            return False
        return candidate_path != ancestor_path and candidate_path.startswith(ancestor_path)

    @classmethod
    def validate(cls, account: Account, parent: Account | None) -> None:
        """
        Check that an account's path and level derive from its parent.

        Args:
            account: Account to validate
            parent: Its parent account, or None for a root

        Raises:
            InvalidAccountHierarchyError: If the account breaks the path invariant
        """
        if parent is None and not account.is_root():
            raise InvalidAccountHierarchyError(
                account.account_id, "parent account is required to validate a sub-account"
            )

        if parent is not None and account.parent_account_id != parent.account_id:
            raise InvalidAccountHierarchyError(
                account.account_id,
                f"parent is {account.parent_account_id}, not {parent.account_id}"
            )

        expected_path, expected_level = cls.build_child_path(parent, account.account_id)
        if account.account_path != expected_path or account.level != expected_level:
            raise InvalidAccountHierarchyError(
                account.account_id,
                f"expected path {expected_path!r} at level {expected_level}, "
                f"got {account.account_path!r} at level {account.level}"
            )
