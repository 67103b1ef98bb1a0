"""Scalar field reconciliation for partial-update payloads."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any, TypeVar

from reconcile_core.tristate import OMIT, TriState, _OmitType

T = TypeVar("T")


def reconcile_scalar(desired: TriState[T], clear_value: Any = None) -> T | Any | _OmitType:
    """Turn a desired tri-state into a payload entry.

    Known values are sent as-is, null sends *clear_value* (the remote API reads
    an empty container as "clear" and a missing field as "no change"), and
    unknown yields ``OMIT``.
    """
    if desired.is_known:
        return desired.value
    if desired.is_null:
        return clear_value
    return OMIT


def reconcile_changed(desired: TriState[T], current: TriState[T]) -> T | _OmitType:
    """Send a known value only when it differs from what state already holds.

    Null and unknown both yield ``OMIT``; for fields the server cannot clear,
    a missing value means "leave as is".
    """
    if desired.is_known and desired != current:
        return desired.value
    return OMIT


def reconcile_scalar_on_read(server_value: T | None) -> TriState[T]:
    """Lift a server value into state; absent or empty becomes null."""
    if server_value is None:
        return TriState.null()
    if isinstance(server_value, Sized) and len(server_value) == 0:
        return TriState.null()
    return TriState.known(server_value)


def build_payload(**fields: Any) -> dict[str, Any]:
    """Collect payload fields, dropping every ``OMIT`` entry.

    ``None``, empty containers and empty strings are kept: they are explicit
    clears.
    """
    return {name: value for name, value in fields.items() if not isinstance(value, _OmitType)}
