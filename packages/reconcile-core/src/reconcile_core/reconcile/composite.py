"""Reconciliation of nested objects that are written all-or-nothing.

Some write endpoints accept a nested object but do not echo it on every
response path. After a write the stored value is only replaced when the
caller asked for it or the server actually returned something; absence in a
response is never read as a deletion the caller did not request.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel

from reconcile_core.tristate import OMIT, TriState, _OmitType

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def build_composite_payload(desired: TriState[M]) -> dict[str, Any] | _OmitType:
    """Serialize a known object wholesale; null and unknown are omitted."""
    if not desired.is_known:
        return OMIT
    return desired.value.model_dump(exclude_none=True)


def reconcile_after_write(
    *,
    in_config: bool,
    submitted: TriState[M],
    echoed: M | None,
    prior: TriState[M],
) -> TriState[M]:
    """Decide the stored value of a composite field after a write call.

    Args:
        in_config: Whether the user's configuration set the field at all.
        submitted: Tri-state of the value that went into the payload.
        echoed: What the server returned for the field, ``None`` if absent.
        prior: The value held in state before the write.

    Returns:
        ``prior`` when the field was absent from config, or when the server
        echoed nothing for a null/unknown submission. Otherwise the echoed
        value (null if the server returned nothing).
    """
    if not in_config:
        return prior
    if echoed is None and not submitted.is_known:
        logger.debug("server omitted composite field; keeping prior state")
        return prior
    return composite_on_read(echoed)


def composite_on_read(echoed: M | None) -> TriState[M]:
    if echoed is None:
        return TriState.null()
    return TriState.known(echoed)
