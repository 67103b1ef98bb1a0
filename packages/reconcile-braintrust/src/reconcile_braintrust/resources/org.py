"""Organization adapter: adopts an existing org and patches its settings.

Organizations are never created or deleted through the API. "Create" adopts
the org and applies the configured settings; "delete" only forgets it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from reconcile_core.errors import ValidationError
from reconcile_core.reconcile import build_payload, reconcile_changed, reconcile_scalar
from reconcile_core.tristate import OMIT, TriState, known_string

from reconcile_braintrust.client.base import OrganizationAPI
from reconcile_braintrust.client.models import Organization, PatchOrganizationRequest
from reconcile_braintrust.resources.base import fetch_live, settle

logger = logging.getLogger(__name__)

# Settings the org patch endpoint accepts.
_SETTINGS = (
    "name",
    "api_url",
    "proxy_url",
    "realtime_url",
    "image_rendering_mode",
    "is_universal_api",
    "is_dataplane_private",
)


@dataclass(frozen=True)
class OrgModel:
    id: TriState[str] = field(default_factory=TriState.unknown)
    org_id: TriState[str] = field(default_factory=TriState.null)
    name: TriState[str] = field(default_factory=TriState.unknown)
    api_url: TriState[str] = field(default_factory=TriState.null)
    proxy_url: TriState[str] = field(default_factory=TriState.null)
    realtime_url: TriState[str] = field(default_factory=TriState.null)
    image_rendering_mode: TriState[str] = field(default_factory=TriState.null)
    is_universal_api: TriState[bool] = field(default_factory=TriState.null)
    is_dataplane_private: TriState[bool] = field(default_factory=TriState.null)
    created: TriState[str] = field(default_factory=TriState.unknown)


def _optional(value):
    if value is None or value == "":
        return TriState.null()
    return TriState.known(value)


def populate_org(data: OrgModel, org: Organization, org_id: str) -> OrgModel:
    """Write a server org into the model; absent settings become null."""
    resolved = org.id or org_id
    return settle(
        replace(
            data,
            id=TriState.known(resolved),
            org_id=TriState.known(resolved),
            name=TriState.known(org.name),
            api_url=_optional(org.api_url),
            proxy_url=_optional(org.proxy_url),
            realtime_url=_optional(org.realtime_url),
            image_rendering_mode=_optional(org.image_rendering_mode),
            is_universal_api=_optional(org.is_universal_api),
            is_dataplane_private=_optional(org.is_dataplane_private),
            created=_optional(org.created),
        )
    )


class OrgResource:
    """Adopt/read/patch/forget for organizations."""

    entity = "organization"

    def __init__(self, client: OrganizationAPI, default_org_id: str | None = None) -> None:
        self._client = client
        self._default_org_id = default_org_id

    def resolve_org_id(self, model: OrgModel) -> str:
        """Org id from the model, falling back to the client's default org."""
        org_id = known_string(model.org_id)
        if org_id is not None and org_id.strip():
            return org_id.strip()
        if self._default_org_id:
            return self._default_org_id
        raise ValidationError(
            "org_id", "set 'org_id' or configure a default organization for the client"
        )

    def create(self, plan: OrgModel) -> OrgModel:
        org_id = self.resolve_org_id(plan)
        # null settings are left as the org has them
        payload = build_payload(
            **{name: reconcile_scalar(getattr(plan, name), OMIT) for name in _SETTINGS}
        )
        org = self._write(org_id, payload)
        logger.debug("adopted organization %s", org_id)
        return populate_org(plan, org, org_id)

    def read(self, state: OrgModel) -> OrgModel | None:
        org_id = known_string(state.id) or self.resolve_org_id(state)
        org = fetch_live(self.entity, self._client.get_organization, org_id)
        if org is None:
            return None
        return populate_org(state, org, org_id)

    def update(self, plan: OrgModel, state: OrgModel) -> OrgModel | None:
        org_id = known_string(state.id) or self.resolve_org_id(plan)
        payload = build_payload(
            **{
                name: reconcile_changed(getattr(plan, name), getattr(state, name))
                for name in _SETTINGS
            }
        )
        if payload:
            logger.debug("organization %s changed settings: %s", org_id, sorted(payload))
        org = fetch_live(self.entity, lambda id: self._write(id, payload), org_id)
        if org is None:
            return None
        return populate_org(plan, org, org_id)

    def delete(self, state: OrgModel) -> None:
        logger.warning(
            "organizations cannot be deleted through the API; %s removed from state only",
            known_string(state.id) or "organization",
        )

    def _write(self, org_id: str, payload: dict) -> Organization:
        if payload:
            return self._client.update_organization(org_id, PatchOrganizationRequest(**payload))
        return self._client.get_organization(org_id)
