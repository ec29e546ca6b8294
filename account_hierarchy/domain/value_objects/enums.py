"""Enumerations for accounts and memberships."""

from enum import Enum


class AccountPlan(str, Enum):
    """Subscription plan of an account."""

    FREE = "free"
    STARTER = "starter"
    PRO = "pro"
    ENTERPRISE = "enterprise"

    def __str__(self) -> str:
        return self.value


class AccountStatus(str, Enum):
    """Lifecycle status of an account."""

    ACTIVE = "active"
    SUSPENDED = "suspended"

    def __str__(self) -> str:
        return self.value


class MembershipRole(str, Enum):
    """Role a user holds within a single account."""

    OWNER = "Owner"
    ADMIN = "Admin"
    MANAGER = "Manager"
    MEMBER = "Member"
    VIEWER = "Viewer"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "MembershipRole":
        """
        Parse a role name case-insensitively.

        Args:
            value: Role name (e.g., "owner", "Admin")

        Returns:
            MembershipRole enum value

        Raises:
            ValueError: If the role is unknown
        """
        for role in cls:
            if role.value.lower() == value.strip().lower():
                return role
        raise ValueError(f"Invalid role: {value}")


class MembershipStatus(str, Enum):
    """Status of a user's membership in an account."""

    ACTIVE = "Active"
    INVITED = "Invited"
    SUSPENDED = "Suspended"
    INACTIVE = "Inactive"

    def __str__(self) -> str:
        return self.value
