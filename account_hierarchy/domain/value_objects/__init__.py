"""Domain value objects package."""

from account_hierarchy.domain.value_objects.account_settings import (
    AccountSettings,
    AccountUsage,
)
from account_hierarchy.domain.value_objects.auth_context import AccountAccess, AuthContext
from account_hierarchy.domain.value_objects.enums import (
    AccountPlan,
    AccountStatus,
    MembershipRole,
    MembershipStatus,
)
from account_hierarchy.domain.value_objects.identifiers import (
    ACCOUNT_ID_PREFIX,
    MAX_ACCOUNT_PATH_LENGTH,
    PATH_SEPARATOR,
    USER_ID_PREFIX,
    bare_account_id,
    bare_user_id,
    new_account_id,
    normalize_account_id,
    normalize_user_id,
)
from account_hierarchy.domain.value_objects.permission import UserPermissions

__all__ = [
    "ACCOUNT_ID_PREFIX",
    "MAX_ACCOUNT_PATH_LENGTH",
    "PATH_SEPARATOR",
    "USER_ID_PREFIX",
    "AccountAccess",
    "AccountPlan",
    "AccountSettings",
    "AccountStatus",
    "AccountUsage",
    "AuthContext",
    "MembershipRole",
    "MembershipStatus",
    "UserPermissions",
    "bare_account_id",
    "bare_user_id",
    "new_account_id",
    "normalize_account_id",
    "normalize_user_id",
]
