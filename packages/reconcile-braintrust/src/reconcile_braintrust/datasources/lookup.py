"""Singular data sources: resolve one entity by ``id`` or by ``name``.

By id the entity is fetched directly. By name the list endpoint is queried
with the name and any searchable filters, and the result goes through
``select_unique`` so that zero or several exact matches fail loudly instead
of picking one at random.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from reconcile_core.config.models import ReconcileConfig
from reconcile_core.errors import NotFoundError, ValidationError
from reconcile_core.inputs import resolve_lookup_mode
from reconcile_core.selector import is_deleted, select_unique
from reconcile_core.tristate import TriState, known_string

from reconcile_braintrust.client.base import BraintrustAPI
from reconcile_braintrust.client.errors import APIError, is_not_found
from reconcile_braintrust.client.models import ListOptions, check_object_type

logger = logging.getLogger(__name__)

E = TypeVar("E")

_NULL: TriState = TriState.null()


@dataclass(frozen=True)
class EntityLookup(Generic[E]):
    """Lookup for one entity type.

    ``searchable`` names the ``ListOptions`` fields that may narrow a
    by-name query.
    """

    entity: str
    get: Callable[[str], E]
    list_fn: Callable[[ListOptions], list[E]]
    searchable: tuple[str, ...] = ()
    limit: int = 2

    def lookup(
        self,
        id: TriState[str] = _NULL,
        name: TriState[str] = _NULL,
        searchable: dict[str, TriState[str]] | None = None,
    ) -> E:
        searchable = searchable or {}
        unsupported = sorted(set(searchable) - set(self.searchable))
        if unsupported:
            raise ValidationError(
                unsupported[0], f"{self.entity} lookups cannot be filtered by {unsupported[0]!r}"
            )

        mode = resolve_lookup_mode(self.entity, id, name, searchable)
        if mode == "id":
            return self._by_id(id.value)
        return self._by_name(name.value, searchable)

    def _by_id(self, id: str) -> E:
        try:
            found = self.get(id)
        except APIError as e:
            if is_not_found(e):
                raise NotFoundError(self.entity, id=id) from e
            raise
        if is_deleted(found):
            logger.info("%s %s has been deleted", self.entity, id)
            raise NotFoundError(self.entity, id=id)
        return found

    def _by_name(self, name: str, searchable: dict[str, TriState[str]]) -> E:
        filters = {
            field: known_string(value)
            for field, value in searchable.items()
            if known_string(value) is not None
        }
        if "object_type" in filters:
            check_object_type("object_type", filters["object_type"])
        opts = ListOptions(name=name, limit=self.limit, **filters)
        logger.debug("looking up %s by name %r with %s", self.entity, name, filters or "no filters")
        candidates = self.list_fn(opts)
        return select_unique(candidates, name, entity=self.entity)


def build_lookups(
    client: BraintrustAPI, config: ReconcileConfig | None = None
) -> dict[str, EntityLookup]:
    """One ``EntityLookup`` per entity type, keyed by entity name."""
    limit = (config or ReconcileConfig()).lookup.name_lookup_limit
    specs: list[tuple[str, Callable, Callable, tuple[str, ...]]] = [
        ("project", client.get_project, client.list_projects, ("org_name",)),
        ("experiment", client.get_experiment, client.list_experiments, ("project_id",)),
        ("dataset", client.get_dataset, client.list_datasets, ("project_id",)),
        ("role", client.get_role, client.list_roles, ("org_name",)),
        ("group", client.get_group, client.list_groups, ("org_name",)),
        ("organization", client.get_organization, client.list_organizations, ()),
        ("ai_secret", client.get_ai_secret, client.list_ai_secrets, ("org_name",)),
        ("api_key", client.get_api_key, client.list_api_keys, ("org_name",)),
        ("prompt", client.get_prompt, client.list_prompts, ("project_id",)),
        ("view", client.get_view, client.list_views, ("object_id", "object_type")),
        ("tag", client.get_tag, client.list_tags, ("project_id", "org_name")),
    ]
    return {
        entity: EntityLookup(entity, get, list_fn, searchable, limit)
        for entity, get, list_fn, searchable in specs
    }
