"""Local checks on identification and filter inputs.

Everything here runs before any remote call and raises
``ConflictingInputError`` or ``ValidationError``.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Literal

from reconcile_core.errors import ConflictingInputError, ValidationError
from reconcile_core.tristate import TriState, known_string

LookupMode = Literal["id", "name"]


def resolve_lookup_mode(
    entity: str,
    id: TriState[str],
    name: TriState[str],
    searchable: dict[str, TriState[str]] | None = None,
) -> LookupMode:
    """Decide whether an entity is looked up by id or by searchable attributes."""
    searchable = searchable or {}
    has_id = known_string(id) is not None
    has_name = known_string(name) is not None
    extra = sorted(field for field, value in searchable.items() if known_string(value) is not None)

    if not has_id and not has_name:
        raise ValidationError("id", f"must specify either 'id' or 'name' to look up the {entity}")
    if has_id and (has_name or extra):
        fields = ("id", *(("name",) if has_name else ()), *extra)
        raise ConflictingInputError(
            entity,
            fields,
            f"Cannot combine 'id' with searchable attributes when looking up the {entity}",
        )
    return "id" if has_id else "name"


def require_exactly_one(entity: str, **fields: TriState[str]) -> str:
    """Return the single non-null field name, or raise ``ConflictingInputError``."""
    present = [name for name, value in fields.items() if not value.is_null]
    if len(present) != 1:
        names = tuple(fields)
        joined = ", ".join(names[:-1]) + f", or {names[-1]}"
        raise ConflictingInputError(entity, names, f"Exactly one of {joined} must be specified")
    return present[0]


def require_not_both(entity: str, **fields: TriState[str]) -> None:
    """Two mutually exclusive filters must not both be set."""
    (a, a_value), (b, b_value) = fields.items()
    if known_string(a_value) is not None and known_string(b_value) is not None:
        raise ConflictingInputError(entity, (a, b), f"cannot specify both '{a}' and '{b}'")


def require_non_blank(field: str, values: Iterable[str | None]) -> list[str]:
    """Reject blank entries; ``None`` elements of partial lists are dropped."""
    values = [v for v in values if v is not None]
    for value in values:
        if not value.strip():
            raise ValidationError(field, f"'{field}' cannot contain empty values")
    return values


def validate_limit(limit: int) -> int:
    if limit < 1:
        raise ValidationError("limit", "'limit' must be greater than or equal to 1")
    if limit > sys.maxsize:
        raise ValidationError("limit", "'limit' exceeds supported platform integer size")
    return limit
