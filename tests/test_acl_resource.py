"""Tests for ACLResource — principal validation and immutability."""

from __future__ import annotations

from dataclasses import replace

import pytest

from reconcile_core.errors import ConflictingInputError, ReconcileError, ValidationError
from reconcile_core.tristate import TriState
from reconcile_braintrust.resources.acl import ACLModel, ACLResource

K = TriState.known


@pytest.fixture()
def resource(acl_api) -> ACLResource:
    return ACLResource(acl_api)


def _plan(**fields) -> ACLModel:
    return ACLModel(object_id=K("proj-1"), object_type=K("project"), **fields)


def test_create_user_grant(resource, acl_api, sample_acl):
    acl_api.create_acl.return_value = sample_acl

    result = resource.create(_plan(user_id=K("user-2"), permission=K("read")))

    payload = acl_api.create_acl.call_args.args[0].to_payload()
    assert payload == {
        "object_id": "proj-1",
        "object_type": "project",
        "user_id": "user-2",
        "permission": "read",
    }
    assert result.id == K("acl-1")
    assert result.group_id.is_null
    assert result.created == K("2024-05-04T00:00:00Z")


@pytest.mark.parametrize(
    "fields",
    [
        {},
        {"user_id": K("u"), "group_id": K("g")},
        {"group_id": K("g"), "role_id": K("r")},
        {"user_id": K("u"), "group_id": K("g"), "role_id": K("r")},
    ],
)
def test_create_requires_exactly_one_principal(resource, acl_api, fields):
    with pytest.raises(ConflictingInputError, match="Exactly one of user_id, group_id, or role_id"):
        resource.create(_plan(**fields))
    acl_api.create_acl.assert_not_called()


def test_create_requires_object(resource, acl_api):
    with pytest.raises(ValidationError, match="object_id"):
        resource.create(ACLModel(object_type=K("project"), user_id=K("u")))


@pytest.mark.parametrize("field", ["object_type", "restrict_object_type"])
def test_create_rejects_unknown_object_type(resource, acl_api, field):
    plan = replace(_plan(user_id=K("u1")), **{field: K("bogus")})
    with pytest.raises(ValidationError, match=f"Invalid {field}") as exc:
        resource.create(plan)
    assert isinstance(exc.value, ReconcileError)
    acl_api.create_acl.assert_not_called()


def test_update_is_rejected(resource, acl_api):
    with pytest.raises(ValidationError, match="immutable"):
        resource.update(_plan(user_id=K("u")), _plan(user_id=K("v")))
    assert acl_api.method_calls == []


def test_read_missing(resource, acl_api, not_found):
    acl_api.get_acl.side_effect = not_found
    assert resource.read(ACLModel(id=K("acl-1"))) is None


def test_delete_idempotent(resource, acl_api, not_found):
    acl_api.delete_acl.side_effect = not_found
    resource.delete(ACLModel(id=K("acl-1")))
    acl_api.delete_acl.assert_called_once_with("acl-1")
