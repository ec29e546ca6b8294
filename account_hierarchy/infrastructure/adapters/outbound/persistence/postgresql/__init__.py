"""SQLAlchemy async persistence adapter (PostgreSQL in production)."""
