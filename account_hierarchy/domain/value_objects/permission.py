"""Membership permission set value object."""

from dataclasses import asdict, dataclass, fields, replace

from account_hierarchy.domain.value_objects.enums import MembershipRole


@dataclass(frozen=True)
class UserPermissions:
    """
    Fixed set of boolean permissions for one (user, account) membership.

    Permissions are never inherited from ancestor accounts: each membership
    row carries its own complete set.
    """

    can_create_sub_accounts: bool = False
    can_invite_users: bool = False
    can_manage_integrations: bool = False
    can_view_all_data: bool = False
    can_manage_billing: bool = False
    can_delete_account: bool = False
    can_modify_settings: bool = False

    @classmethod
    def names(cls) -> list[str]:
        """Get the names of all permission flags."""
        return [f.name for f in fields(cls)]

    @classmethod
    def full(cls) -> "UserPermissions":
        """Permission set with every flag granted."""
        return cls(**{name: True for name in cls.names()})

    @classmethod
    def none(cls) -> "UserPermissions":
        """Most restrictive permission set."""
        return cls()

    @classmethod
    def for_role(cls, role: MembershipRole) -> "UserPermissions":
        """
        Default permission set for a role.

        Args:
            role: Membership role

        Returns:
            Permissions granted to that role by default
        """
        if role in (MembershipRole.OWNER, MembershipRole.ADMIN):
            return cls.full()
        if role == MembershipRole.MANAGER:
            return cls(
                can_invite_users=True,
                can_manage_integrations=True,
                can_view_all_data=True,
                can_modify_settings=True,
            )
        if role == MembershipRole.MEMBER:
            return cls(can_manage_integrations=True, can_view_all_data=True)
        if role == MembershipRole.VIEWER:
            return cls(can_view_all_data=True)
        return cls.none()

    @classmethod
    def from_dict(cls, data: dict) -> "UserPermissions":
        """Build from a mapping, ignoring unknown keys."""
        known = set(cls.names())
        return cls(**{k: bool(v) for k, v in data.items() if k in known})

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)

    def has(self, permission: str) -> bool:
        """
        Check a single permission flag by name.

        Raises:
            ValueError: If the permission name is unknown
        """
        if permission not in self.names():
            raise ValueError(f"Invalid permission: {permission}")
        return getattr(self, permission)

    def granted(self) -> list[str]:
        """Names of granted permissions."""
        return [name for name in self.names() if getattr(self, name)]

    def with_changes(self, **changes: bool) -> "UserPermissions":
        return replace(self, **changes)
