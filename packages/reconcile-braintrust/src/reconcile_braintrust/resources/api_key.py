"""API key adapter. The secret ``key`` is only ever returned by create."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from reconcile_core.reconcile import reconcile_scalar_on_read
from reconcile_core.tristate import TriState

from reconcile_braintrust.client.base import APIKeyAPI
from reconcile_braintrust.client.models import APIKey, CreateAPIKeyRequest, UpdateAPIKeyRequest
from reconcile_braintrust.resources.base import (
    delete_idempotent,
    fetch_live,
    require_id,
    require_name,
    settle,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class APIKeyModel:
    id: TriState[str] = field(default_factory=TriState.unknown)
    name: TriState[str] = field(default_factory=TriState.null)
    org_id: TriState[str] = field(default_factory=TriState.unknown)
    preview_name: TriState[str] = field(default_factory=TriState.unknown)
    user_id: TriState[str] = field(default_factory=TriState.unknown)
    user_email: TriState[str] = field(default_factory=TriState.unknown)
    created: TriState[str] = field(default_factory=TriState.unknown)
    key: TriState[str] = field(default_factory=TriState.unknown)


def _echoed_or(value: str | None, current: TriState[str]) -> TriState[str]:
    return TriState.known(value) if value else current


def populate_api_key(data: APIKeyModel, api_key: APIKey) -> APIKeyModel:
    """Write a server key into the model.

    ``key`` is left to the caller, and owner fields the server leaves out keep
    their current value.
    """
    return settle(
        replace(
            data,
            id=TriState.known(api_key.id),
            name=TriState.known(api_key.name),
            org_id=reconcile_scalar_on_read(api_key.org_id),
            preview_name=reconcile_scalar_on_read(api_key.preview_name),
            user_id=_echoed_or(api_key.user_id, data.user_id),
            user_email=_echoed_or(api_key.user_email, data.user_email),
            created=reconcile_scalar_on_read(api_key.created),
        )
    )


class APIKeyResource:
    """Create/read/rename/delete for API keys."""

    entity = "api_key"

    def __init__(self, client: APIKeyAPI) -> None:
        self._client = client

    def create(self, plan: APIKeyModel) -> APIKeyModel:
        require_name(self.entity, plan.name)
        created = self._client.create_api_key(CreateAPIKeyRequest(name=plan.name.value))
        logger.debug("created api_key %s", created.id)
        return populate_api_key(replace(plan, key=reconcile_scalar_on_read(created.key)), created)

    def read(self, state: APIKeyModel) -> APIKeyModel | None:
        api_key = fetch_live(self.entity, self._client.get_api_key, state.id.value)
        if api_key is None:
            return None
        return populate_api_key(state, api_key)

    def update(self, plan: APIKeyModel, state: APIKeyModel) -> APIKeyModel:
        key_id = require_id(self.entity, state.id)
        require_name(self.entity, plan.name)
        updated = self._client.update_api_key(key_id, UpdateAPIKeyRequest(name=plan.name.value))
        # only the name is mutable; everything else the server assigned stays
        return settle(
            replace(
                state,
                name=TriState.known(updated.name),
                preview_name=reconcile_scalar_on_read(updated.preview_name),
            )
        )

    def delete(self, state: APIKeyModel) -> None:
        delete_idempotent(self.entity, self._client.delete_api_key, state.id.value)
