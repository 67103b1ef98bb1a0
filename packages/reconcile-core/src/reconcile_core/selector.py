"""Exact-name selection of a single entity from a candidate list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar, runtime_checkable

from reconcile_core.errors import AmbiguousError, NotFoundError


@runtime_checkable
class Named(Protocol):
    """Anything with a ``name``; a truthy ``deleted_at`` marks it soft-deleted."""

    name: str


E = TypeVar("E", bound=Named)


def is_deleted(entity: object) -> bool:
    """True when the entity carries a non-empty deletion marker."""
    return bool(getattr(entity, "deleted_at", None))


def select_unique(candidates: Iterable[E], name: str, *, entity: str = "entity") -> E:
    """Return the single live candidate whose name equals *name* exactly.

    Raises:
        NotFoundError: no live candidate has that name.
        AmbiguousError: two or more live candidates have that name.
    """
    matches = [c for c in candidates if c.name == name and not is_deleted(c)]
    if not matches:
        raise NotFoundError(entity, name=name)
    if len(matches) > 1:
        raise AmbiguousError(entity, name)
    return matches[0]
