"""Error taxonomy for lookups and locally detected input problems."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds raised by the reconciliation layer."""

    not_found = "not_found"
    ambiguous = "ambiguous"
    conflicting_input = "conflicting_input"
    validation = "validation"


class ReconcileError(Exception):
    """Base class; ``kind`` identifies the failure without string matching."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ReconcileError):
    """A lookup by name or id matched nothing (or only deleted entries)."""

    kind = ErrorKind.not_found

    def __init__(self, entity: str, name: str | None = None, id: str | None = None) -> None:
        self.entity = entity
        self.name = name
        self.id = id
        if id is not None:
            msg = f"No {entity} found with id: {id}"
        elif name is not None:
            msg = f"No {entity} found with name: {name}"
        else:
            msg = f"No {entity} found"
        super().__init__(msg)


class AmbiguousError(ReconcileError):
    """A lookup by name matched more than one live entity."""

    kind = ErrorKind.ambiguous

    def __init__(self, entity: str, name: str) -> None:
        self.entity = entity
        self.name = name
        super().__init__(
            f"Searchable attributes matched multiple {entity} entries named {name!r}. "
            "Refine the query or use 'id' for deterministic lookup."
        )


class ConflictingInputError(ReconcileError):
    """Mutually exclusive identification or filter fields were combined."""

    kind = ErrorKind.conflicting_input

    def __init__(self, entity: str, fields: tuple[str, ...], detail: str | None = None) -> None:
        self.entity = entity
        self.fields = fields
        names = ", ".join(repr(f) for f in fields)
        super().__init__(detail or f"Cannot combine {names} when identifying {entity}")


class ValidationError(ReconcileError):
    """A structural precondition failed; nothing was sent to the remote API."""

    kind = ErrorKind.validation

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field}: {message}")
