"""Read-only data sources: single-entity lookups and list filters."""

from reconcile_braintrust.datasources.listing import build_list_options, list_live
from reconcile_braintrust.datasources.lookup import EntityLookup, build_lookups

__all__ = ["EntityLookup", "build_list_options", "build_lookups", "list_live"]
