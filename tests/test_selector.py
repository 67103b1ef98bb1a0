"""Tests for select_unique: exact-name selection under all orderings."""

from __future__ import annotations

import itertools
from dataclasses import dataclass

import pytest

from reconcile_core.errors import AmbiguousError, ErrorKind, NotFoundError
from reconcile_core.selector import is_deleted, select_unique


@dataclass
class Item:
    id: str
    name: str
    deleted_at: str | None = None


def test_single_exact_match_in_every_order():
    items = [Item("1", "alpha"), Item("2", "beta"), Item("3", "alphabet")]
    for perm in itertools.permutations(items):
        assert select_unique(perm, "alpha").id == "1"


def test_no_match_in_every_order():
    items = [Item("1", "alpha"), Item("2", "beta")]
    for perm in itertools.permutations(items):
        with pytest.raises(NotFoundError):
            select_unique(perm, "gamma")


def test_duplicate_names_in_every_order():
    items = [Item("1", "dup"), Item("2", "other"), Item("3", "dup")]
    for perm in itertools.permutations(items):
        with pytest.raises(AmbiguousError):
            select_unique(perm, "dup")


def test_match_is_case_sensitive():
    with pytest.raises(NotFoundError):
        select_unique([Item("1", "Alpha")], "alpha")


def test_empty_candidates():
    with pytest.raises(NotFoundError) as exc:
        select_unique([], "x", entity="tag")
    assert exc.value.kind is ErrorKind.not_found
    assert exc.value.entity == "tag"
    assert "No tag found with name: x" in str(exc.value)


def test_ambiguous_message_suggests_id():
    with pytest.raises(AmbiguousError) as exc:
        select_unique([Item("1", "a"), Item("2", "a")], "a", entity="view")
    assert exc.value.kind is ErrorKind.ambiguous
    assert "use 'id'" in str(exc.value)


# -- Soft-deleted candidates --------------------------------------------------


def test_deleted_duplicate_does_not_cause_ambiguity():
    items = [Item("1", "dup", deleted_at="2024-01-01"), Item("2", "dup")]
    for perm in itertools.permutations(items):
        assert select_unique(perm, "dup").id == "2"


def test_only_deleted_match_is_not_found():
    with pytest.raises(NotFoundError):
        select_unique([Item("1", "gone", deleted_at="2024-01-01")], "gone")


def test_is_deleted():
    assert is_deleted(Item("1", "a", deleted_at="2024"))
    assert not is_deleted(Item("1", "a", deleted_at=""))
    assert not is_deleted(object())
