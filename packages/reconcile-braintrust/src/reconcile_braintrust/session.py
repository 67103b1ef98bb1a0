"""Entry point: load config, set up logging, wire adapters to one client."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from reconcile_core.config import ReconcileConfig, load_config
from reconcile_core.log import configure_logging

from reconcile_braintrust.client.base import BraintrustAPI
from reconcile_braintrust.datasources.lookup import EntityLookup, build_lookups
from reconcile_braintrust.resources import (
    ACLResource,
    APIKeyResource,
    DatasetResource,
    ExperimentResource,
    GroupResource,
    OrgResource,
    ProjectResource,
    RoleResource,
)

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Everything a caller needs to reconcile against one Braintrust org."""

    config: ReconcileConfig
    lookups: dict[str, EntityLookup]
    projects: ProjectResource
    experiments: ExperimentResource
    datasets: DatasetResource
    roles: RoleResource
    groups: GroupResource
    acls: ACLResource
    api_keys: APIKeyResource
    orgs: OrgResource


def open_session(
    client: BraintrustAPI,
    config_path: str | None = None,
    *,
    config: ReconcileConfig | None = None,
) -> Session:
    """Build a session; *config* wins over loading from *config_path*."""
    config = config or load_config(config_path)
    configure_logging(config)
    logger.debug(
        "session for %s (lookup limit %d)", config.client.api_url, config.lookup.name_lookup_limit
    )
    return Session(
        config=config,
        lookups=build_lookups(client, config),
        projects=ProjectResource(client),
        experiments=ExperimentResource(client),
        datasets=DatasetResource(client),
        roles=RoleResource(client),
        groups=GroupResource(client),
        acls=ACLResource(client),
        api_keys=APIKeyResource(client),
        orgs=OrgResource(client, default_org_id=config.client.org_id),
    )
