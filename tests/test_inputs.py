"""Tests for local input checks: lookup mode, exclusivity, filters."""

from __future__ import annotations

import sys

import pytest

from reconcile_core.errors import ConflictingInputError, ErrorKind, ValidationError
from reconcile_core.inputs import (
    require_exactly_one,
    require_non_blank,
    require_not_both,
    resolve_lookup_mode,
    validate_limit,
)
from reconcile_core.tristate import TriState

K = TriState.known
NULL = TriState.null()


# ── resolve_lookup_mode ───────────────────────────────────────────────


class TestResolveLookupMode:
    def test_id_only(self):
        assert resolve_lookup_mode("tag", K("t-1"), NULL) == "id"

    def test_name_only(self):
        assert resolve_lookup_mode("tag", NULL, K("prod")) == "name"

    def test_name_with_searchable(self):
        assert resolve_lookup_mode("tag", NULL, K("prod"), {"project_id": K("p")}) == "name"

    def test_neither_raises_validation(self):
        with pytest.raises(ValidationError) as exc:
            resolve_lookup_mode("tag", NULL, NULL)
        assert exc.value.kind is ErrorKind.validation
        assert "either 'id' or 'name'" in str(exc.value)

    def test_empty_strings_count_as_missing(self):
        with pytest.raises(ValidationError):
            resolve_lookup_mode("tag", K(""), K(""))

    def test_id_and_name_conflict(self):
        with pytest.raises(ConflictingInputError) as exc:
            resolve_lookup_mode("tag", K("t-1"), K("prod"))
        assert exc.value.fields == ("id", "name")

    def test_id_and_searchable_conflict(self):
        with pytest.raises(ConflictingInputError) as exc:
            resolve_lookup_mode("tag", K("t-1"), NULL, {"org_name": K("acme")})
        assert exc.value.fields == ("id", "org_name")

    def test_unknown_searchable_is_ignored(self):
        assert resolve_lookup_mode("tag", K("t-1"), NULL, {"org_name": TriState.unknown()}) == "id"


# ── Exclusivity ───────────────────────────────────────────────────────


class TestRequireExactlyOne:
    def test_one_present(self):
        assert require_exactly_one("acl", user_id=K("u"), group_id=NULL, role_id=NULL) == "user_id"

    def test_none_present(self):
        with pytest.raises(ConflictingInputError, match="Exactly one of user_id, group_id, or role_id"):
            require_exactly_one("acl", user_id=NULL, group_id=NULL, role_id=NULL)

    def test_two_present(self):
        with pytest.raises(ConflictingInputError):
            require_exactly_one("acl", user_id=K("u"), group_id=K("g"), role_id=NULL)


def test_require_not_both_rejects_two_cursors():
    with pytest.raises(ConflictingInputError, match="starting_after"):
        require_not_both("tags", starting_after=K("a"), ending_before=K("b"))


def test_require_not_both_accepts_one():
    require_not_both("tags", starting_after=K("a"), ending_before=NULL)


# ── Filter values ─────────────────────────────────────────────────────


def test_non_blank_passes_values_through():
    assert require_non_blank("ids", ("a", "b")) == ["a", "b"]


def test_non_blank_drops_none_entries():
    assert require_non_blank("ids", ["a", None, "b"]) == ["a", "b"]


@pytest.mark.parametrize("bad", ["", "   ", "\t"])
def test_non_blank_rejects_blank(bad):
    with pytest.raises(ValidationError, match="ids"):
        require_non_blank("ids", ["ok", bad])


@pytest.mark.parametrize("limit", [1, 2, 100, sys.maxsize])
def test_valid_limit(limit):
    assert validate_limit(limit) == limit


@pytest.mark.parametrize("limit", [0, -1, sys.maxsize + 1])
def test_invalid_limit(limit):
    with pytest.raises(ValidationError):
        validate_limit(limit)
