"""
Pytest configuration and shared fixtures for account hierarchy tests.

This module provides:
- A mocked Unit of Work (unit tests of use cases)
- Account / membership factories
- An in-memory, non-transactional Unit of Work used to exercise the
  compensating-delete path
"""

from dataclasses import replace
from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest

from account_hierarchy.application.exceptions import AlreadyExistsError
from account_hierarchy.domain.entities.account import Account
from account_hierarchy.domain.entities.user_account import UserAccount
from account_hierarchy.domain.services.hierarchy import HierarchyManager
from account_hierarchy.domain.value_objects.enums import MembershipRole, MembershipStatus


# ============================================================================
# Mocked Unit of Work
# ============================================================================
@pytest.fixture
def mock_uow():
    """Create a mock Unit of Work."""
    uow = Mock()
    uow.accounts = Mock()
    uow.memberships = Mock()
    uow.supports_transactions = True
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)  # Don't suppress exceptions
    return uow


# ============================================================================
# Entity factories
# ============================================================================
@pytest.fixture
def make_account():
    """Factory building accounts with a consistent path and level."""

    def _make(
        account_id: str = "account:R",
        parent: Account | None = None,
        owner_user_id: str = "user:U1",
        **overrides,
    ) -> Account:
        account_path, level = HierarchyManager.build_child_path(parent, account_id)
        now = datetime.now(UTC)
        fields = {
            "account_id": account_id,
            "parent_account_id": parent.account_id if parent else None,
            "owner_user_id": owner_user_id,
            "created_by_user_id": owner_user_id,
            "name": f"Account {account_id}",
            "account_path": account_path,
            "level": level,
            "created_at": now,
            "updated_at": now,
        }
        fields.update(overrides)
        return Account(**fields)

    return _make


@pytest.fixture
def make_membership():
    """Factory building memberships with role-default permissions."""

    def _make(
        user_id: str = "user:U1",
        account_id: str = "account:R",
        role: MembershipRole = MembershipRole.OWNER,
        status: MembershipStatus = MembershipStatus.ACTIVE,
        **overrides,
    ) -> UserAccount:
        membership = UserAccount.for_role(user_id, account_id, role, status=status)
        if overrides:
            membership = replace(membership, **overrides)
        return membership

    return _make


# ============================================================================
# In-memory Unit of Work without transactions
# ============================================================================
class InMemoryAccountRepository:
    """Dict-backed account store; every write is immediately durable."""

    def __init__(self):
        self.rows: dict[str, Account] = {}
        self.fail_on_delete: Exception | None = None
        self.delete_calls: list[str] = []

    async def add(self, account):
        if account.account_id in self.rows:
            raise AlreadyExistsError(resource_type="Account")
        self.rows[account.account_id] = account
        return account

    async def get_by_id(self, account_id):
        return self.rows.get(account_id)

    async def get_for_update(self, account_id):
        return self.rows.get(account_id)

    async def get_many(self, account_ids):
        return {i: self.rows[i] for i in account_ids if i in self.rows}

    async def list_by_path_prefix(self, path_prefix, exclude_account_id=None):
        matches = [
            a for a in self.rows.values()
            if a.account_path.startswith(path_prefix) and a.account_id != exclude_account_id
        ]
        return sorted(matches, key=lambda a: (a.level, a.account_path))

    async def count_children(self, parent_account_id):
        return sum(1 for a in self.rows.values() if a.parent_account_id == parent_account_id)

    async def update_fields(self, account_id, changes, expected_version=None):
        account = self.rows.get(account_id)
        if account is None:
            return None
        if expected_version is not None and account.version != expected_version:
            return None
        updated = replace(
            account, **changes, version=account.version + 1, updated_at=datetime.now(UTC)
        )
        self.rows[account_id] = updated
        return updated

    async def delete(self, account_id):
        self.delete_calls.append(account_id)
        if self.fail_on_delete is not None:
            raise self.fail_on_delete
        return self.rows.pop(account_id, None) is not None


class InMemoryUserAccountRepository:
    """Dict-backed membership store keyed by (user_id, account_id)."""

    def __init__(self):
        self.rows: dict[tuple[str, str], UserAccount] = {}
        self.fail_on_add: Exception | None = None

    async def add(self, membership):
        if self.fail_on_add is not None:
            raise self.fail_on_add
        if membership.key in self.rows:
            raise AlreadyExistsError(resource_type="UserAccount")
        self.rows[membership.key] = membership
        return membership

    async def get(self, user_id, account_id):
        return self.rows.get((user_id, account_id))

    async def list_by_user(self, user_id):
        found = [m for m in self.rows.values() if m.user_id == user_id]
        return sorted(found, key=lambda m: (m.linked_at, m.account_id))

    async def list_by_account(self, account_id):
        found = [m for m in self.rows.values() if m.account_id == account_id]
        return sorted(found, key=lambda m: (m.linked_at, m.user_id))

    async def delete(self, user_id, account_id):
        return self.rows.pop((user_id, account_id), None) is not None

    async def delete_by_account(self, account_id):
        keys = [k for k in self.rows if k[1] == account_id]
        for key in keys:
            del self.rows[key]
        return len(keys)


class InMemoryUnitOfWork:
    """Unit of Work over the in-memory stores; commit and rollback do nothing."""

    supports_transactions = False

    def __init__(self):
        self.accounts = InMemoryAccountRepository()
        self.memberships = InMemoryUserAccountRepository()
        self.commits = 0

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def commit(self):
        self.commits += 1

    async def rollback(self):
        return None


@pytest.fixture
def memory_uow():
    """Non-transactional in-memory Unit of Work."""
    return InMemoryUnitOfWork()
