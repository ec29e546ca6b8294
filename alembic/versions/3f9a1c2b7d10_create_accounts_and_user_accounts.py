"""Create accounts and user_accounts tables

Revision ID: 3f9a1c2b7d10
Revises:
Create Date: 2026-10-17

Tables Created:
- accounts: account tree with materialized path (account_path) and level
- user_accounts: (user, account) memberships with role and permissions

The account_path index uses text_pattern_ops on PostgreSQL so prefix
(LIKE 'path%') lookups are served by the B-tree.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '3f9a1c2b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "accounts",
        sa.Column("account_id", sa.String(length=64), nullable=False),
        sa.Column("parent_account_id", sa.String(length=64), nullable=True),
        sa.Column("owner_user_id", sa.String(length=64), nullable=False),
        sa.Column("created_by_user_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("company", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("plan", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False),
        sa.Column("account_path", sa.String(length=2048), nullable=False),
        sa.Column("settings", JSON_TYPE, nullable=False),
        sa.Column("usage", JSON_TYPE, nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("account_id", name=op.f("pk_accounts")),
        sa.CheckConstraint("level >= 0", name=op.f("ck_accounts_level_non_negative")),
        sa.CheckConstraint("version >= 1", name=op.f("ck_accounts_version_positive")),
    )

    # Create indexes for accounts table
    op.create_index(
        "ix_accounts_account_path",
        "accounts",
        ["account_path"],
        unique=False,
        postgresql_ops={"account_path": "text_pattern_ops"},
    )
    op.create_index(
        op.f("ix_accounts_parent_account_id"),
        "accounts",
        ["parent_account_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_accounts_owner_user_id"), "accounts", ["owner_user_id"], unique=False
    )

    op.create_table(
        "user_accounts",
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("account_id", sa.String(length=64), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("permissions", JSON_TYPE, nullable=False),
        sa.Column(
            "linked_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("user_id", "account_id", name=op.f("pk_user_accounts")),
    )

    # Members of an account
    op.create_index(
        op.f("ix_user_accounts_account_id"), "user_accounts", ["account_id"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_user_accounts_account_id"), table_name="user_accounts")
    op.drop_table("user_accounts")

    op.drop_index(op.f("ix_accounts_owner_user_id"), table_name="accounts")
    op.drop_index(op.f("ix_accounts_parent_account_id"), table_name="accounts")
    op.drop_index("ix_accounts_account_path", table_name="accounts")
    op.drop_table("accounts")
