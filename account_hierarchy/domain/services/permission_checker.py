"""Permission checker domain service."""

from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.domain.exceptions import (
    InactiveMembershipError,
    InsufficientPermissionsError,
    InvalidRoleError,
)
from account_hierarchy.domain.value_objects.enums import MembershipRole


class PermissionChecker:
    """
    Domain service for checking membership permissions.

    A permission check is a plain read of one membership's flags. Nothing is
    derived from memberships on ancestor accounts.
    """

    @staticmethod
    def check_membership_is_active(membership: UserAccount) -> None:
        """
        Raises:
            InactiveMembershipError: If the membership is not active
        """
        membership.ensure_active()

    @staticmethod
    def check_has_permission(membership: UserAccount, permission: str) -> None:
        """
        Check if an active membership grants a permission.

        Args:
            membership: Membership to check
            permission: Permission flag name

        Raises:
            InactiveMembershipError: If the membership is not active
            InsufficientPermissionsError: If the flag is not granted
        """
        if not membership.is_active():
            raise InactiveMembershipError(
                membership.user_id, membership.account_id, membership.status.value
            )
        if not membership.permissions.has(permission):
            raise InsufficientPermissionsError(
                membership.user_id, membership.account_id, permission
            )

    @staticmethod
    def check_can_grant_role(granter: UserAccount, role: MembershipRole) -> None:
        """
        Check if a member may hand out a role.

        Only owners can create other owners.

        Raises:
            InvalidRoleError: If the role is above what the granter may assign
        """
        if role == MembershipRole.OWNER and granter.role != MembershipRole.OWNER:
            raise InvalidRoleError(
                f"only an {MembershipRole.OWNER.value} can grant the "
                f"{MembershipRole.OWNER.value} role"
            )
