"""UserAccount (membership) domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from account_hierarchy.domain.exceptions import InactiveMembershipError
from account_hierarchy.domain.value_objects.enums import MembershipRole, MembershipStatus
from account_hierarchy.domain.value_objects.permission import UserPermissions


@dataclass
class UserAccount:
    """
    Membership linking a user to one account with a role and permission set.

    Identity is the (user_id, account_id) pair. A user may act on an account
    only through an Active membership for that exact pair.
    """

    user_id: str
    account_id: str
    role: MembershipRole
    status: MembershipStatus = MembershipStatus.ACTIVE
    permissions: UserPermissions = field(default_factory=UserPermissions)
    linked_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def for_role(
        cls,
        user_id: str,
        account_id: str,
        role: MembershipRole,
        status: MembershipStatus = MembershipStatus.ACTIVE,
        permissions: UserPermissions | None = None,
    ) -> "UserAccount":
        """
        Create a membership with the role's default permissions.

        Args:
            user_id: Member's user ID
            account_id: Account the member is linked to
            role: Role within the account
            status: Initial membership status
            permissions: Explicit permission set overriding the role defaults

        Returns:
            New UserAccount entity stamped with the current time
        """
        now = datetime.now(UTC)
        return cls(
            user_id=user_id,
            account_id=account_id,
            role=role,
            status=status,
            permissions=permissions if permissions is not None else UserPermissions.for_role(role),
            linked_at=now,
            updated_at=now,
        )

    @property
    def key(self) -> tuple[str, str]:
        return (self.user_id, self.account_id)

    def is_active(self) -> bool:
        return self.status == MembershipStatus.ACTIVE

    def has_permission(self, permission: str) -> bool:
        """
        Check a permission flag on an active membership.

        Args:
            permission: Permission flag name (e.g. "can_invite_users")

        Returns:
            True only if the membership is active and grants the permission
        """
        if not self.is_active():
            return False
        return self.permissions.has(permission)

    def ensure_active(self) -> None:
        """
        Raises:
            InactiveMembershipError: If the membership is not active
        """
        if not self.is_active():
            raise InactiveMembershipError(self.user_id, self.account_id, self.status.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserAccount):
            return False
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return (
            f"UserAccount(user_id={self.user_id!r}, account_id={self.account_id!r}, "
            f"role={self.role.value}, status={self.status.value})"
        )
