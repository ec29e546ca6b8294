"""
Account SQLAlchemy model.

Each row stores its materialized path (``account_path``). Descendant lookups
are a range scan over the path index; on PostgreSQL the index uses
``text_pattern_ops`` so ``LIKE 'prefix%'`` can use it under any collation.
"""

from typing import Any, Optional

from sqlalchemy import CheckConstraint, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from account_hierarchy.domain.value_objects.identifiers import MAX_ACCOUNT_PATH_LENGTH
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
    JSONType,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.mixins import (
    TimestampMixin,
)


class AccountModel(Base, TimestampMixin):
    """
    Account ORM model. Pure SQLAlchemy with no business logic.

    Business logic lives in domain.entities.account.Account.
    """

    __tablename__ = "accounts"

    account_id: Mapped[str] = mapped_column(String(64), primary_key=True)

    # NULL for root accounts
    parent_account_id: Mapped[Optional[str]] = mapped_column(
        String(64), nullable=True, index=True
    )

    owner_user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    created_by_user_id: Mapped[str] = mapped_column(String(64), nullable=False)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    company: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    plan: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)

    # Hierarchy (derived at creation, never updated)
    level: Mapped[int] = mapped_column(Integer, nullable=False)
    account_path: Mapped[str] = mapped_column(String(MAX_ACCOUNT_PATH_LENGTH), nullable=False)

    settings: Mapped[dict[str, Any]] = mapped_column(JSONType, nullable=False)
    usage: Mapped[dict[str, Any]] = mapped_column(JSONType, nullable=False)

    # Optimistic concurrency
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    __table_args__ = (
        CheckConstraint("level >= 0", name="level_non_negative"),
        CheckConstraint("version >= 1", name="version_positive"),
        Index(
            "ix_accounts_account_path",
            "account_path",
            postgresql_ops={"account_path": "text_pattern_ops"},
        ),
    )
