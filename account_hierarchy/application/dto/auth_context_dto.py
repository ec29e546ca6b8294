"""AuthContext DTOs."""

from typing import Any

from pydantic import BaseModel, Field

from account_hierarchy.domain.value_objects.auth_context import AuthContext


class AccountAccessOutput(BaseModel):
    """Output DTO for one entry of the available-accounts list."""

    account_id: str
    account_name: str
    role: str
    permissions: dict[str, bool]
    is_current: bool = False

    model_config = {"frozen": True}


class AuthContextOutput(BaseModel):
    """Output DTO for the active-account authorization context."""

    user_id: str
    account_id: str
    account_name: str
    role: str
    permissions: dict[str, bool]
    account_path: str
    level: int
    available_accounts: list[AccountAccessOutput] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_context(cls, context: AuthContext) -> "AuthContextOutput":
        """
        Create DTO from an AuthContext value object.

        Args:
            context: AuthContext built by the context switch use case

        Returns:
            AuthContextOutput DTO
        """
        return cls(
            user_id=context.user_id,
            account_id=context.account_id,
            account_name=context.account_name,
            role=context.role.value,
            permissions=context.permissions.to_dict(),
            account_path=context.account_path,
            level=context.level,
            available_accounts=[
                AccountAccessOutput(
                    account_id=access.account_id,
                    account_name=access.account_name,
                    role=access.role.value,
                    permissions=access.permissions.to_dict(),
                    is_current=access.is_current,
                )
                for access in context.available_accounts
            ],
        )

    def to_claims(self) -> dict[str, Any]:
        """
        Render as camelCase session/token claims.

        Returns:
            Mapping ready to be embedded into a session or JWT by the caller
        """
        return {
            "userId": self.user_id,
            "accountId": self.account_id,
            "accountName": self.account_name,
            "role": self.role,
            "permissions": dict(self.permissions),
            "accountPath": self.account_path,
            "level": self.level,
            "availableAccounts": [
                {
                    "accountId": access.account_id,
                    "accountName": access.account_name,
                    "role": access.role,
                    "permissions": dict(access.permissions),
                    "isCurrent": access.is_current,
                }
                for access in self.available_accounts
            ],
        }
