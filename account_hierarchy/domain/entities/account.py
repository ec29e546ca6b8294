"""Account domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from account_hierarchy.domain.exceptions import InvalidAccountHierarchyError
from account_hierarchy.domain.value_objects.account_settings import (
    AccountSettings,
    AccountUsage,
)
from account_hierarchy.domain.value_objects.enums import AccountPlan, AccountStatus
from account_hierarchy.domain.value_objects.identifiers import (
    PATH_SEPARATOR,
    bare_account_id,
)

MAX_NAME_LENGTH = 100


@dataclass
class Account:
    """
    Account entity representing a tenant or one of its sub-accounts.

    Accounts form a tree. Each node stores its full ancestry as a materialized
    path (``account_path``) made of the bare identifiers of every ancestor and
    of the account itself, each followed by the path separator. ``level`` is
    the depth in the tree (root = 0). Both fields are derived when the account
    is created and cannot be changed afterwards.
    """

    account_id: str
    owner_user_id: str
    created_by_user_id: str
    name: str
    account_path: str
    level: int
    parent_account_id: str | None = None
    company: str = ""
    plan: AccountPlan = AccountPlan.FREE
    status: AccountStatus = AccountStatus.ACTIVE
    settings: AccountSettings = field(default_factory=AccountSettings)
    usage: AccountUsage = field(default_factory=AccountUsage)
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate account after initialization."""
        self.name = self._validate_name(self.name)

        if self.level < 0:
            raise InvalidAccountHierarchyError(self.account_id, "level cannot be negative")

        if not self.account_path.endswith(PATH_SEPARATOR):
            raise InvalidAccountHierarchyError(
                self.account_id,
                f"account path {self.account_path!r} must end with {PATH_SEPARATOR!r}"
            )

        segments = self.path_segments
        if len(segments) - 1 != self.level:
            raise InvalidAccountHierarchyError(
                self.account_id,
                f"level {self.level} does not match path {self.account_path!r}"
            )

        if segments[-1] != self.bare_id:
            raise InvalidAccountHierarchyError(
                self.account_id,
                f"path {self.account_path!r} does not end with the account's own id"
            )

        if (self.parent_account_id is None) != (self.level == 0):
            raise InvalidAccountHierarchyError(
                self.account_id,
                "only accounts without a parent may sit at level 0"
            )

    @staticmethod
    def _validate_name(name: str) -> str:
        if not name or not name.strip():
            raise ValueError("Account name cannot be empty")

        if len(name.strip()) > MAX_NAME_LENGTH:
            raise ValueError(f"Account name cannot exceed {MAX_NAME_LENGTH} characters")

        return name.strip()

    @property
    def bare_id(self) -> str:
        """Account identifier without its namespace prefix."""
        return bare_account_id(self.account_id)

    @property
    def path_segments(self) -> list[str]:
        """Bare identifiers along the path, root first."""
        return [segment for segment in self.account_path.split(PATH_SEPARATOR) if segment]

    def is_root(self) -> bool:
        return self.parent_account_id is None

    def can_add_sub_account(self, existing_sub_accounts: int) -> bool:
        """
        Check whether quotas allow one more direct sub-account.

        Args:
            existing_sub_accounts: Number of direct children already present

        Returns:
            True if sub-accounts are allowed and the cap is not reached
        """
        if not self.settings.allow_sub_accounts:
            return False
        return existing_sub_accounts < self.settings.max_sub_accounts

    def rename(self, new_name: str) -> None:
        """
        Update account name.

        Raises:
            ValueError: If name is invalid
        """
        self.name = self._validate_name(new_name)

    def update_company(self, company: str) -> None:
        self.company = company.strip()

    def replace_settings(self, settings: AccountSettings) -> None:
        self.settings = settings

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (account_id), not value."""
        if not isinstance(other, Account):
            return False
        return self.account_id == other.account_id

    def __hash__(self) -> int:
        """Hash based on identity."""
        return hash(self.account_id)

    def __repr__(self) -> str:
        return (
            f"Account(account_id={self.account_id!r}, name={self.name!r}, "
            f"path={self.account_path!r}, level={self.level})"
        )
