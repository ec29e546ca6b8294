"""Membership DTOs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from account_hierarchy.domain.value_objects.enums import MembershipRole, MembershipStatus


class LinkUserInput(BaseModel):
    """Input DTO for linking a user to an account."""

    user_id: str = Field(..., min_length=1, description="User to link")
    role: MembershipRole = Field(..., description="Role within the account")
    status: MembershipStatus = Field(
        MembershipStatus.ACTIVE, description="Initial membership status"
    )

    model_config = {"frozen": True}

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, value):
        """Accept role names case-insensitively."""
        if isinstance(value, str):
            return MembershipRole.from_string(value)
        return value


class UserAccountOutput(BaseModel):
    """Output DTO for a membership."""

    user_id: str
    account_id: str
    role: str
    status: str
    permissions: dict[str, bool]
    linked_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, membership: "UserAccount") -> "UserAccountOutput":
        """
        Create DTO from UserAccount entity.

        Args:
            membership: UserAccount domain entity

        Returns:
            UserAccountOutput DTO
        """
        return cls(
            user_id=membership.user_id,
            account_id=membership.account_id,
            role=membership.role.value,
            status=membership.status.value,
            permissions=membership.permissions.to_dict(),
            linked_at=membership.linked_at,
            updated_at=membership.updated_at,
        )


# Import for type hints
from account_hierarchy.domain.entities.user_account import UserAccount  # noqa: E402

UserAccountOutput.model_rebuild()
