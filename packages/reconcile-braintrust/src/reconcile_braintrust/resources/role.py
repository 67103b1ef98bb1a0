"""Role adapter: incremental membership updates via add/remove lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from reconcile_core.reconcile import (
    build_payload,
    diff_membership,
    membership_on_read,
    reconcile_scalar,
    reconcile_scalar_on_read,
)
from reconcile_core.tristate import OMIT, TriState, _OmitType

from reconcile_braintrust.client.base import RoleAPI
from reconcile_braintrust.client.models import (
    CreateRoleRequest,
    Role,
    RoleMemberPermission,
    UpdateRoleRequest,
)
from reconcile_braintrust.resources.base import (
    delete_idempotent,
    fetch_live,
    require_id,
    require_name,
    settle,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoleModel:
    id: TriState[str] = field(default_factory=TriState.unknown)
    name: TriState[str] = field(default_factory=TriState.null)
    description: TriState[str] = field(default_factory=TriState.null)
    org_name: TriState[str] = field(default_factory=TriState.null)
    member_permissions: TriState[frozenset[str]] = field(default_factory=TriState.null)
    member_roles: TriState[frozenset[str]] = field(default_factory=TriState.null)
    org_id: TriState[str] = field(default_factory=TriState.unknown)
    user_id: TriState[str] = field(default_factory=TriState.unknown)
    created: TriState[str] = field(default_factory=TriState.unknown)


def _permissions(names: list[str]) -> list[RoleMemberPermission] | None:
    if not names:
        return None
    return [RoleMemberPermission(permission=n) for n in names]


def _known_members(value: TriState[frozenset[str]]) -> list[str] | _OmitType:
    return sorted(value.value) if value.is_known else OMIT


def populate_role(data: RoleModel, role: Role) -> RoleModel:
    """Write a server role into the model; memberships not echoed keep their value."""
    return settle(
        replace(
            data,
            id=TriState.known(role.id),
            name=TriState.known(role.name),
            description=reconcile_scalar_on_read(role.description),
            org_id=reconcile_scalar_on_read(role.org_id),
            user_id=reconcile_scalar_on_read(role.user_id),
            created=reconcile_scalar_on_read(role.created),
            member_permissions=membership_on_read(role.permission_names(), data.member_permissions),
            member_roles=membership_on_read(role.member_roles, data.member_roles),
        )
    )


class RoleResource:
    """Create/read/update/delete for roles."""

    entity = "role"

    def __init__(self, client: RoleAPI) -> None:
        self._client = client

    def create(self, plan: RoleModel) -> RoleModel:
        require_name(self.entity, plan.name)
        payload = build_payload(
            name=plan.name.value,
            description=reconcile_scalar(plan.description, OMIT),
            org_name=reconcile_scalar(plan.org_name, OMIT),
            member_permissions=(
                _permissions(sorted(plan.member_permissions.value)) or []
                if plan.member_permissions.is_known
                else OMIT
            ),
            member_roles=_known_members(plan.member_roles),
        )
        created = self._client.create_role(CreateRoleRequest(**payload))
        logger.debug("created role %s", created.id)
        # the create response does not always carry memberships
        role = self._client.get_role(created.id)
        return populate_role(plan, role)

    def read(self, state: RoleModel) -> RoleModel | None:
        role = fetch_live(self.entity, self._client.get_role, state.id.value)
        if role is None:
            return None
        return populate_role(state, role)

    def update(self, plan: RoleModel, state: RoleModel) -> RoleModel:
        role_id = require_id(self.entity, state.id)
        require_name(self.entity, plan.name)

        permissions = diff_membership(
            state.member_permissions.value_or(frozenset()), plan.member_permissions
        )
        roles = diff_membership(state.member_roles.value_or(frozenset()), plan.member_roles)
        logger.debug(
            "role %s membership diff: +%d/-%d permissions, +%d/-%d roles",
            role_id,
            len(permissions.additions),
            len(permissions.removals),
            len(roles.additions),
            len(roles.removals),
        )

        payload = build_payload(
            name=reconcile_scalar(plan.name, OMIT),
            description=reconcile_scalar(plan.description, ""),
            add_member_permissions=_permissions(permissions.sorted_additions()) or OMIT,
            remove_member_permissions=_permissions(permissions.sorted_removals()) or OMIT,
            add_member_roles=roles.sorted_additions() or OMIT,
            remove_member_roles=roles.sorted_removals() or OMIT,
        )
        updated = self._client.update_role(role_id, UpdateRoleRequest(**payload))

        # re-read so membership fields reflect the server after the patch
        role = self._client.get_role(updated.id)
        return populate_role(plan, role)

    def delete(self, state: RoleModel) -> None:
        delete_idempotent(self.entity, self._client.delete_role, state.id.value)
