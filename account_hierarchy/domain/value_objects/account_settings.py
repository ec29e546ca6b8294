"""Account quota/policy settings and usage counters."""

from dataclasses import asdict, dataclass, fields


@dataclass(frozen=True)
class AccountSettings:
    """Quotas and policy flags for an account."""

    max_sources: int = 10
    max_storage_gb: int = 5
    max_backup_jobs: int = 5
    retention_days: int = 30
    two_factor_required: bool = False
    encryption_enabled: bool = True
    allow_sub_accounts: bool = True
    max_sub_accounts: int = 5

    def __post_init__(self) -> None:
        """Validate quota values."""
        for name in ("max_sources", "max_storage_gb", "max_backup_jobs", "max_sub_accounts"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.retention_days < 1:
            raise ValueError("retention_days must be at least 1")

    @classmethod
    def root_defaults(cls) -> "AccountSettings":
        """Defaults for a new top-level tenant."""
        return cls()

    @classmethod
    def sub_account_defaults(cls) -> "AccountSettings":
        """Defaults for a new sub-account."""
        return cls(
            max_sources=10,
            max_storage_gb=5,
            max_backup_jobs=5,
            retention_days=30,
            two_factor_required=False,
            encryption_enabled=True,
            allow_sub_accounts=True,
            max_sub_accounts=5,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "AccountSettings":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AccountUsage:
    """
    Usage counters for an account.

    Maintained by external collaborators (backup jobs, API gateway); this
    subsystem only zeroes them when an account is created.
    """

    sources: int = 0
    storage_used_gb: int = 0
    backup_jobs: int = 0
    monthly_backups: int = 0
    monthly_api_requests: int = 0

    @classmethod
    def zero(cls) -> "AccountUsage":
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> "AccountUsage":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict:
        return asdict(self)
