"""Filter validation for the plural (list) data sources."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from reconcile_core.inputs import require_non_blank, require_not_both, validate_limit
from reconcile_core.selector import is_deleted
from reconcile_core.tristate import TriState, known_string

from reconcile_braintrust.client.models import ListOptions

logger = logging.getLogger(__name__)

E = TypeVar("E")

_NULL: TriState = TriState.null()


def _trimmed(value: TriState[str]) -> str | None:
    text = known_string(value)
    if text is None:
        return None
    return text.strip() or None


def build_list_options(
    entity: str,
    *,
    name: TriState[str] = _NULL,
    org_name: TriState[str] = _NULL,
    project_id: TriState[str] = _NULL,
    starting_after: TriState[str] = _NULL,
    ending_before: TriState[str] = _NULL,
    limit: TriState[int] = _NULL,
    ids: TriState[list[str]] = _NULL,
    types: TriState[list[str]] = _NULL,
) -> ListOptions:
    """Turn list filters into ``ListOptions``.

    Blank strings count as unset. Cursors are mutually exclusive, ``limit``
    must be positive and fit a platform integer, and ``ids``/``types`` may
    not contain blank entries.
    """
    require_not_both(entity, starting_after=starting_after, ending_before=ending_before)

    opts = ListOptions(
        name=_trimmed(name),
        org_name=_trimmed(org_name),
        project_id=_trimmed(project_id),
        starting_after=_trimmed(starting_after),
        ending_before=_trimmed(ending_before),
    )
    if limit.is_known:
        opts.limit = validate_limit(limit.value)
    if ids.is_known:
        opts.ids = [v.strip() for v in require_non_blank("ids", ids.value)]
    if types.is_known:
        opts.types = [v.strip() for v in require_non_blank("types", types.value)]
    return opts


def list_live(entity: str, list_fn: Callable[[ListOptions], list[E]], opts: ListOptions) -> list[E]:
    """List entities, dropping soft-deleted entries."""
    items = list_fn(opts)
    live = [item for item in items if not is_deleted(item)]
    if len(live) != len(items):
        logger.debug("skipped %d deleted %s entries", len(items) - len(live), entity)
    return live
