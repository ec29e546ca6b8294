"""Hierarchical multi-tenant accounts and access control."""

__version__ = "0.1.0"
