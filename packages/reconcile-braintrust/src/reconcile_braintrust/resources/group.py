"""Group adapter: membership is sent as a full replacement list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from reconcile_core.reconcile import (
    build_payload,
    membership_on_read,
    reconcile_scalar,
    reconcile_scalar_on_read,
    replace_membership,
)
from reconcile_core.tristate import OMIT, TriState

from reconcile_braintrust.client.base import GroupAPI
from reconcile_braintrust.client.models import CreateGroupRequest, Group, UpdateGroupRequest
from reconcile_braintrust.resources.base import (
    delete_idempotent,
    fetch_live,
    require_id,
    require_name,
    settle,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupModel:
    id: TriState[str] = field(default_factory=TriState.unknown)
    name: TriState[str] = field(default_factory=TriState.null)
    description: TriState[str] = field(default_factory=TriState.null)
    org_name: TriState[str] = field(default_factory=TriState.null)
    member_users: TriState[frozenset[str]] = field(default_factory=TriState.null)
    member_groups: TriState[frozenset[str]] = field(default_factory=TriState.null)
    org_id: TriState[str] = field(default_factory=TriState.unknown)
    created: TriState[str] = field(default_factory=TriState.unknown)


def populate_group(data: GroupModel, group: Group) -> GroupModel:
    return settle(
        replace(
            data,
            id=TriState.known(group.id),
            name=TriState.known(group.name),
            description=reconcile_scalar_on_read(group.description),
            org_id=reconcile_scalar_on_read(group.org_id),
            created=reconcile_scalar_on_read(group.created),
            member_users=membership_on_read(group.member_users, data.member_users),
            member_groups=membership_on_read(group.member_groups, data.member_groups),
        )
    )


class GroupResource:
    """Create/read/update/delete for groups."""

    entity = "group"

    def __init__(self, client: GroupAPI) -> None:
        self._client = client

    def create(self, plan: GroupModel) -> GroupModel:
        require_name(self.entity, plan.name)
        payload = build_payload(
            name=plan.name.value,
            org_name=reconcile_scalar(plan.org_name, OMIT),
            description=reconcile_scalar(plan.description, OMIT),
            member_users=replace_membership(plan.member_users) or OMIT,
            member_groups=replace_membership(plan.member_groups) or OMIT,
        )
        group = self._client.create_group(CreateGroupRequest(**payload))
        logger.debug("created group %s", group.id)
        return populate_group(plan, group)

    def read(self, state: GroupModel) -> GroupModel | None:
        group = fetch_live(self.entity, self._client.get_group, state.id.value)
        if group is None:
            return None
        return populate_group(state, group)

    def update(self, plan: GroupModel, state: GroupModel) -> GroupModel:
        group_id = require_id(self.entity, state.id)
        require_name(self.entity, plan.name)
        payload = build_payload(
            name=plan.name.value,
            description=reconcile_scalar(plan.description, ""),
            member_users=replace_membership(plan.member_users),
            member_groups=replace_membership(plan.member_groups),
        )
        group = self._client.update_group(group_id, UpdateGroupRequest(**payload))
        result = populate_group(plan, group)
        # the update response does not carry these
        return replace(result, id=state.id, org_id=state.org_id, created=state.created)

    def delete(self, state: GroupModel) -> None:
        delete_idempotent(self.entity, self._client.delete_group, state.id.value)
