"""Domain layer package.

The domain layer contains the account hierarchy rules with zero external
dependencies: entities, value objects, domain services and exceptions.
"""

__all__ = []
