"""Account DTOs (Data Transfer Objects)."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CreateRootAccountInput(BaseModel):
    """Input DTO for creating a new top-level (tenant) account."""

    name: str = Field(..., max_length=100, description="Account name")
    company: str = Field("", max_length=200, description="Company name")

    model_config = {"frozen": True}


class CreateSubAccountInput(BaseModel):
    """Input DTO for creating a sub-account under an existing account."""

    name: str = Field(..., max_length=100, description="Account name")
    company: str = Field("", max_length=200, description="Company name")
    owner_user_id: Optional[str] = Field(
        None, description="Owner of the new account (defaults to the acting user)"
    )

    model_config = {"frozen": True}


class AccountSettingsInput(BaseModel):
    """Partial settings update; only supplied fields change."""

    max_sources: Optional[int] = Field(None, ge=0)
    max_storage_gb: Optional[int] = Field(None, ge=0)
    max_backup_jobs: Optional[int] = Field(None, ge=0)
    retention_days: Optional[int] = Field(None, ge=1)
    two_factor_required: Optional[bool] = None
    encryption_enabled: Optional[bool] = None
    allow_sub_accounts: Optional[bool] = None
    max_sub_accounts: Optional[int] = Field(None, ge=0)

    model_config = {"frozen": True}


class UpdateAccountInput(BaseModel):
    """Input DTO for updating an account."""

    name: Optional[str] = Field(None, max_length=100, description="Account name")
    company: Optional[str] = Field(None, max_length=200, description="Company name")
    settings: Optional[AccountSettingsInput] = Field(
        None, description="Settings fields to change"
    )
    expected_version: Optional[int] = Field(
        None, ge=1, description="Reject the update unless the stored version matches"
    )

    model_config = {"frozen": True}


class AccountSettingsOutput(BaseModel):
    """Output DTO for account settings."""

    max_sources: int
    max_storage_gb: int
    max_backup_jobs: int
    retention_days: int
    two_factor_required: bool
    encryption_enabled: bool
    allow_sub_accounts: bool
    max_sub_accounts: int

    model_config = {"frozen": True, "from_attributes": True}


class AccountUsageOutput(BaseModel):
    """Output DTO for account usage counters."""

    sources: int
    storage_used_gb: int
    backup_jobs: int
    monthly_backups: int
    monthly_api_requests: int

    model_config = {"frozen": True, "from_attributes": True}


class AccountOutput(BaseModel):
    """Output DTO for account information."""

    account_id: str = Field(..., description="Account's canonical identifier")
    parent_account_id: Optional[str] = Field(None, description="Parent account ID")
    owner_user_id: str = Field(..., description="Owner's user ID")
    created_by_user_id: str = Field(..., description="Creator's user ID")
    name: str = Field(..., description="Account name")
    company: str = Field(..., description="Company name")
    plan: str = Field(..., description="Subscription plan")
    status: str = Field(..., description="Account status")
    level: int = Field(..., description="Depth in the hierarchy (root = 0)")
    account_path: str = Field(..., description="Materialized hierarchy path")
    settings: AccountSettingsOutput
    usage: AccountUsageOutput
    version: int = Field(..., description="Optimistic concurrency version")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = {"frozen": True, "from_attributes": True}

    @classmethod
    def from_entity(cls, account: "Account") -> "AccountOutput":
        """
        Create DTO from Account entity.

        Args:
            account: Account domain entity

        Returns:
            AccountOutput DTO
        """
        return cls(
            account_id=account.account_id,
            parent_account_id=account.parent_account_id,
            owner_user_id=account.owner_user_id,
            created_by_user_id=account.created_by_user_id,
            name=account.name,
            company=account.company,
            plan=account.plan.value,
            status=account.status.value,
            level=account.level,
            account_path=account.account_path,
            settings=AccountSettingsOutput.model_validate(account.settings),
            usage=AccountUsageOutput.model_validate(account.usage),
            version=account.version,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AccountListOutput(BaseModel):
    """Output DTO for an ordered list of accounts."""

    accounts: list[AccountOutput] = Field(..., description="Accounts in result order")
    total: int = Field(..., description="Number of accounts returned")

    model_config = {"frozen": True}

    @classmethod
    def from_entities(cls, accounts: list["Account"]) -> "AccountListOutput":
        return cls(
            accounts=[AccountOutput.from_entity(account) for account in accounts],
            total=len(accounts),
        )


# Import for type hints
from account_hierarchy.domain.entities.account import Account  # noqa: E402

AccountOutput.model_rebuild()
AccountListOutput.model_rebuild()
