"""Unit tests for namespaced account and user identifiers."""

import pytest

from account_hierarchy.domain.exceptions import InvalidAccountIdentifierError
from account_hierarchy.domain.value_objects.identifiers import (
    bare_account_id,
    bare_user_id,
    new_account_id,
    normalize_account_id,
    normalize_user_id,
)


class TestNormalizeAccountId:
    """Test canonical account identifier handling."""

    def test_adds_prefix_to_bare_id(self):
        assert normalize_account_id("abc") == "account:abc"

    def test_keeps_canonical_id(self):
        assert normalize_account_id("account:abc") == "account:abc"

    def test_strips_surrounding_whitespace(self):
        assert normalize_account_id("  abc ") == "account:abc"

    @pytest.mark.parametrize("raw", ["", "   ", None, "account:"])
    def test_rejects_empty_identifier(self, raw):
        with pytest.raises(InvalidAccountIdentifierError):
            normalize_account_id(raw)

    def test_rejects_path_separator(self):
        """Test that ids containing '/' are rejected so paths stay unambiguous."""
        with pytest.raises(InvalidAccountIdentifierError) as exc_info:
            normalize_account_id("a/b")

        assert exc_info.value.code == "INVALID_IDENTIFIER"


class TestNormalizeUserId:
    """Test canonical user identifier handling."""

    def test_adds_prefix(self):
        assert normalize_user_id("U1") == "user:U1"

    def test_keeps_canonical_id(self):
        assert normalize_user_id("user:U1") == "user:U1"

    def test_rejects_separator(self):
        with pytest.raises(InvalidAccountIdentifierError):
            normalize_user_id("user:U/1")


class TestBareIds:
    def test_bare_account_id_strips_prefix(self):
        assert bare_account_id("account:R") == "R"

    def test_bare_account_id_leaves_bare_id(self):
        assert bare_account_id("R") == "R"

    def test_bare_user_id_strips_prefix(self):
        assert bare_user_id("user:U1") == "U1"


class TestNewAccountId:
    def test_is_canonical_and_unique(self):
        first = new_account_id()
        second = new_account_id()

        assert first.startswith("account:")
        assert "/" not in bare_account_id(first)
        assert first != second
        assert normalize_account_id(first) == first
