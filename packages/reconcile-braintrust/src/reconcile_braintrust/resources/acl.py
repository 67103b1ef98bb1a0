"""ACL adapter. ACLs are immutable: any change is a replacement."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from reconcile_core.errors import ValidationError
from reconcile_core.inputs import require_exactly_one
from reconcile_core.reconcile import build_payload, reconcile_scalar, reconcile_scalar_on_read
from reconcile_core.tristate import OMIT, TriState

from reconcile_braintrust.client.base import ACLAPI
from reconcile_braintrust.client.models import ACL, CreateACLRequest, check_object_type
from reconcile_braintrust.resources.base import delete_idempotent, fetch_live, settle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ACLModel:
    id: TriState[str] = field(default_factory=TriState.unknown)
    object_id: TriState[str] = field(default_factory=TriState.null)
    object_type: TriState[str] = field(default_factory=TriState.null)
    user_id: TriState[str] = field(default_factory=TriState.null)
    group_id: TriState[str] = field(default_factory=TriState.null)
    role_id: TriState[str] = field(default_factory=TriState.null)
    permission: TriState[str] = field(default_factory=TriState.null)
    restrict_object_type: TriState[str] = field(default_factory=TriState.null)
    created: TriState[str] = field(default_factory=TriState.unknown)


def populate_acl(data: ACLModel, acl: ACL) -> ACLModel:
    return settle(
        replace(
            data,
            id=TriState.known(acl.id),
            object_id=TriState.known(acl.object_id),
            object_type=TriState.known(acl.object_type),
            user_id=reconcile_scalar_on_read(acl.user_id),
            group_id=reconcile_scalar_on_read(acl.group_id),
            role_id=reconcile_scalar_on_read(acl.role_id),
            permission=reconcile_scalar_on_read(acl.permission),
            restrict_object_type=reconcile_scalar_on_read(acl.restrict_object_type),
            created=reconcile_scalar_on_read(acl.created),
        )
    )


class ACLResource:
    entity = "acl"

    def __init__(self, client: ACLAPI) -> None:
        self._client = client

    def create(self, plan: ACLModel) -> ACLModel:
        for name in ("object_id", "object_type"):
            value = getattr(plan, name)
            if not value.is_known or not value.value:
                raise ValidationError(name, f"'{name}' must be provided and non-empty")
        check_object_type("object_type", plan.object_type.value)
        if plan.restrict_object_type.is_known:
            check_object_type("restrict_object_type", plan.restrict_object_type.value)
        require_exactly_one(
            self.entity, user_id=plan.user_id, group_id=plan.group_id, role_id=plan.role_id
        )

        payload = build_payload(
            object_id=plan.object_id.value,
            object_type=plan.object_type.value,
            user_id=reconcile_scalar(plan.user_id, OMIT),
            group_id=reconcile_scalar(plan.group_id, OMIT),
            role_id=reconcile_scalar(plan.role_id, OMIT),
            permission=reconcile_scalar(plan.permission, OMIT),
            restrict_object_type=reconcile_scalar(plan.restrict_object_type, OMIT),
        )
        acl = self._client.create_acl(CreateACLRequest(**payload))
        logger.debug("created acl %s on %s %s", acl.id, acl.object_type, acl.object_id)
        return populate_acl(plan, acl)

    def read(self, state: ACLModel) -> ACLModel | None:
        acl = fetch_live(self.entity, self._client.get_acl, state.id.value)
        if acl is None:
            return None
        return populate_acl(state, acl)

    def update(self, plan: ACLModel, state: ACLModel) -> ACLModel:
        raise ValidationError(
            "acl", "ACLs are immutable and cannot be updated; all changes require replacement"
        )

    def delete(self, state: ACLModel) -> None:
        delete_idempotent(self.entity, self._client.delete_acl, state.id.value)
