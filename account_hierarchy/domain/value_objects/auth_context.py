"""Ephemeral authorization context for the active account."""

from dataclasses import dataclass, field

from account_hierarchy.domain.value_objects.enums import MembershipRole
from account_hierarchy.domain.value_objects.permission import UserPermissions


@dataclass(frozen=True)
class AccountAccess:
    """An account the user can switch to, as listed in an AuthContext."""

    account_id: str
    account_name: str
    role: MembershipRole
    permissions: UserPermissions
    is_current: bool = False


@dataclass(frozen=True)
class AuthContext:
    """
    Projection of "which account is active and what can this user do here".

    Rebuilt on every login or account switch and never persisted; an external
    collaborator embeds it into session/JWT claims.
    """

    user_id: str
    account_id: str
    account_name: str
    role: MembershipRole
    permissions: UserPermissions
    account_path: str
    level: int
    available_accounts: list[AccountAccess] = field(default_factory=list)

    @property
    def current_account(self) -> AccountAccess | None:
        """The available-accounts entry flagged as current, if any."""
        for access in self.available_accounts:
            if access.is_current:
                return access
        return None
