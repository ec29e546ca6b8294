"""
Base model class for all database models.

This module provides the declarative base and common model configuration.
All SQLAlchemy models should inherit from Base.
"""

from sqlalchemy import JSON, MetaData, inspect
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase

# Naming convention for constraints
# This ensures consistent naming across all database objects
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """
    Base class for all database models.

    Tables are declared without a schema. A deployment that keeps them in a
    dedicated schema maps it at execution time through schema_translate_map.

    Usage:
        class AccountModel(Base):
            __tablename__ = "accounts"
            account_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    # Type annotation for repr
    __name__: str

    def __repr__(self) -> str:
        """
        String representation of model instance.

        Returns:
            String in format: ModelName(pk1, pk2)
        """
        identity = inspect(self).identity or ()
        return f"{self.__class__.__name__}({', '.join(str(v) for v in identity)})"
