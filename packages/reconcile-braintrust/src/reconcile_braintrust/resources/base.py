"""Lifecycle helpers shared by every resource adapter."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import fields, replace
from typing import Any, TypeVar

from reconcile_core.errors import ValidationError
from reconcile_core.selector import is_deleted
from reconcile_core.tristate import TriState, known_string

from reconcile_braintrust.client.errors import APIError, is_not_found

logger = logging.getLogger(__name__)

E = TypeVar("E")
M = TypeVar("M")


def fetch_live(entity: str, get: Callable[[str], E], id: str) -> E | None:
    """Fetch by id; ``None`` when the entity is gone (404 or soft-deleted)."""
    try:
        obj = get(id)
    except APIError as e:
        if is_not_found(e):
            logger.info("%s %s not found; removing from state", entity, id)
            return None
        raise
    if is_deleted(obj):
        logger.info("%s %s was deleted remotely; removing from state", entity, id)
        return None
    return obj


def delete_idempotent(entity: str, delete: Callable[[str], None], id: str) -> None:
    """Delete by id, treating 404 as already deleted."""
    try:
        delete(id)
    except APIError as e:
        if is_not_found(e):
            logger.debug("%s %s already deleted", entity, id)
            return
        raise
    logger.debug("deleted %s %s", entity, id)


def require_id(entity: str, id: TriState[str]) -> str:
    value = known_string(id)
    if value is None:
        raise ValidationError("id", f"cannot update {entity} because id is unknown or empty")
    return value


def require_name(entity: str, name: TriState[str]) -> None:
    if not name.is_known:
        raise ValidationError("name", f"cannot write {entity} because name is {name.state.value}")


def settle(model: M) -> M:
    """Replace leftover unknown fields with null; stored state is never unknown."""
    changes = {
        f.name: TriState.null()
        for f in fields(model)
        if isinstance(getattr(model, f.name), TriState) and getattr(model, f.name).is_unknown
    }
    return replace(model, **changes) if changes else model


def metadata_on_read(metadata: dict[str, Any] | None) -> TriState[dict[str, str]]:
    """Flatten server metadata into a string map; empty or absent is null."""
    if not metadata:
        return TriState.null()
    return TriState.known({k: _stringify(v) for k, v in metadata.items()})


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)
