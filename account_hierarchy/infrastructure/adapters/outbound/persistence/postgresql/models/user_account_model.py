"""UserAccount (membership) SQLAlchemy model."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
    JSONType,
)


class UserAccountModel(Base):
    """
    Membership ORM model keyed by (user_id, account_id).

    The primary key doubles as the "accounts of a user" access path; a
    separate index on account_id serves "members of an account".
    """

    __tablename__ = "user_accounts"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    account_id: Mapped[str] = mapped_column(String(64), primary_key=True, index=True)

    role: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    permissions: Mapped[dict[str, Any]] = mapped_column(JSONType, nullable=False)

    linked_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
