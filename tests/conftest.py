"""Shared test fixtures for the reconcile packages."""

import logging

import pytest
from unittest.mock import MagicMock

from reconcile_core.config.models import ReconcileConfig
from reconcile_braintrust.client.base import (
    ACLAPI,
    APIKeyAPI,
    BraintrustAPI,
    DatasetAPI,
    ExperimentAPI,
    GroupAPI,
    OrganizationAPI,
    ProjectAPI,
    RoleAPI,
)
from reconcile_braintrust.client.errors import APIError
from reconcile_braintrust.client.models import (
    ACL,
    APIKey,
    Dataset,
    Experiment,
    Group,
    Organization,
    Project,
    RepoInfo,
    Role,
    RoleMemberPermission,
)


@pytest.fixture
def sample_config():
    return ReconcileConfig()


@pytest.fixture
def restore_root():
    """Put the root logger back the way it was after configure_logging runs."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


@pytest.fixture
def not_found():
    return APIError(404, "object not found")


@pytest.fixture
def server_error():
    return APIError(500, "internal error")


# -- REST collaborators -------------------------------------------------------


@pytest.fixture
def role_api():
    return MagicMock(spec=RoleAPI)


@pytest.fixture
def group_api():
    return MagicMock(spec=GroupAPI)


@pytest.fixture
def experiment_api():
    return MagicMock(spec=ExperimentAPI)


@pytest.fixture
def project_api():
    return MagicMock(spec=ProjectAPI)


@pytest.fixture
def dataset_api():
    return MagicMock(spec=DatasetAPI)


@pytest.fixture
def acl_api():
    return MagicMock(spec=ACLAPI)


@pytest.fixture
def org_api():
    return MagicMock(spec=OrganizationAPI)


@pytest.fixture
def api_key_api():
    return MagicMock(spec=APIKeyAPI)


@pytest.fixture
def braintrust_api():
    return MagicMock(spec=BraintrustAPI)


# -- Server-side entities -----------------------------------------------------


@pytest.fixture
def sample_role():
    return Role(
        id="role-1",
        name="reviewers",
        org_id="org-1",
        description="Can read and comment",
        created="2024-05-01T00:00:00Z",
        user_id="user-1",
        member_permissions=[
            RoleMemberPermission(permission="read"),
            RoleMemberPermission(permission="update"),
        ],
        member_roles=["role-base"],
    )


@pytest.fixture
def sample_group():
    return Group(
        id="group-1",
        name="ml-team",
        org_id="org-1",
        description="Model builders",
        created="2024-05-01T00:00:00Z",
        member_users=["u1", "u2"],
        member_groups=["g-sub"],
    )


@pytest.fixture
def sample_repo_info():
    return RepoInfo(commit="abc123", branch="main", dirty=False, author_name="dev")


@pytest.fixture
def sample_experiment(sample_repo_info):
    return Experiment(
        id="exp-1",
        project_id="proj-1",
        name="baseline",
        description="First run",
        created="2024-05-02T00:00:00Z",
        user_id="user-1",
        org_id="org-1",
        public=False,
        metadata={"model": "gpt-4o", "temperature": 0.2},
        tags=["nightly", "baseline"],
        repo_info=sample_repo_info,
    )


@pytest.fixture
def sample_project():
    return Project(
        id="proj-1",
        name="evals",
        org_id="org-1",
        description="Evaluation runs",
        created="2024-05-01T00:00:00Z",
        user_id="user-1",
    )


@pytest.fixture
def sample_dataset():
    return Dataset(
        id="ds-1",
        project_id="proj-1",
        name="golden",
        description="Golden answers",
        created="2024-05-03T00:00:00Z",
        user_id="user-1",
        org_id="org-1",
        metadata={"source": "manual"},
    )


@pytest.fixture
def sample_acl():
    return ACL(
        id="acl-1",
        object_id="proj-1",
        object_type="project",
        created="2024-05-04T00:00:00Z",
        user_id="user-2",
        permission="read",
    )


@pytest.fixture
def sample_org():
    return Organization(
        id="org-1",
        name="acme",
        api_url="https://api.acme.example",
        is_universal_api=True,
        created="2024-01-01T00:00:00Z",
    )


@pytest.fixture
def sample_api_key():
    return APIKey(
        id="key-1",
        name="ci",
        org_id="org-1",
        preview_name="sk-abc",
        user_id="user-1",
        user_email="dev@acme.example",
        created="2024-05-05T00:00:00Z",
    )
