"""REST client contract consumed by the resource adapters and data sources.

Implementations own transport, authentication and retries. Every method is
synchronous and raises ``APIError`` for non-2xx responses.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from reconcile_braintrust.client.models import (
    ACL,
    AISecret,
    APIKey,
    CreateACLRequest,
    CreateAPIKeyRequest,
    CreateDatasetRequest,
    CreateExperimentRequest,
    CreateGroupRequest,
    CreateProjectRequest,
    CreateRoleRequest,
    Dataset,
    Experiment,
    Group,
    ListOptions,
    Organization,
    PatchOrganizationRequest,
    Project,
    Prompt,
    Role,
    Tag,
    UpdateAPIKeyRequest,
    UpdateDatasetRequest,
    UpdateExperimentRequest,
    UpdateGroupRequest,
    UpdateProjectRequest,
    UpdateRoleRequest,
    View,
)


@runtime_checkable
class ProjectAPI(Protocol):
    def create_project(self, req: CreateProjectRequest) -> Project: ...

    def get_project(self, id: str) -> Project: ...

    def update_project(self, id: str, req: UpdateProjectRequest) -> Project: ...

    def delete_project(self, id: str) -> None: ...

    def list_projects(self, opts: ListOptions) -> list[Project]: ...


@runtime_checkable
class ExperimentAPI(Protocol):
    def create_experiment(self, req: CreateExperimentRequest) -> Experiment: ...

    def get_experiment(self, id: str) -> Experiment: ...

    def update_experiment(self, id: str, req: UpdateExperimentRequest) -> Experiment: ...

    def delete_experiment(self, id: str) -> None: ...

    def list_experiments(self, opts: ListOptions) -> list[Experiment]: ...


@runtime_checkable
class DatasetAPI(Protocol):
    def create_dataset(self, req: CreateDatasetRequest) -> Dataset: ...

    def get_dataset(self, id: str) -> Dataset: ...

    def update_dataset(self, id: str, req: UpdateDatasetRequest) -> Dataset: ...

    def delete_dataset(self, id: str) -> None: ...

    def list_datasets(self, opts: ListOptions) -> list[Dataset]: ...


@runtime_checkable
class RoleAPI(Protocol):
    def create_role(self, req: CreateRoleRequest) -> Role: ...

    def get_role(self, id: str) -> Role: ...

    def update_role(self, id: str, req: UpdateRoleRequest) -> Role: ...

    def delete_role(self, id: str) -> None: ...

    def list_roles(self, opts: ListOptions) -> list[Role]: ...


@runtime_checkable
class GroupAPI(Protocol):
    def create_group(self, req: CreateGroupRequest) -> Group: ...

    def get_group(self, id: str) -> Group: ...

    def update_group(self, id: str, req: UpdateGroupRequest) -> Group: ...

    def delete_group(self, id: str) -> None: ...

    def list_groups(self, opts: ListOptions) -> list[Group]: ...


@runtime_checkable
class ACLAPI(Protocol):
    def create_acl(self, req: CreateACLRequest) -> ACL: ...

    def get_acl(self, id: str) -> ACL: ...

    def delete_acl(self, id: str) -> None: ...


@runtime_checkable
class OrganizationAPI(Protocol):
    """Organizations can be read and patched but never created or deleted."""

    def get_organization(self, id: str) -> Organization: ...

    def update_organization(self, id: str, req: PatchOrganizationRequest) -> Organization: ...


@runtime_checkable
class APIKeyAPI(Protocol):
    def create_api_key(self, req: CreateAPIKeyRequest) -> APIKey: ...

    def get_api_key(self, id: str) -> APIKey: ...

    def update_api_key(self, id: str, req: UpdateAPIKeyRequest) -> APIKey: ...

    def delete_api_key(self, id: str) -> None: ...


@runtime_checkable
class LookupAPI(Protocol):
    """Read-only endpoints used by data sources."""

    def get_organization(self, id: str) -> Organization: ...

    def list_organizations(self, opts: ListOptions) -> list[Organization]: ...

    def get_ai_secret(self, id: str) -> AISecret: ...

    def list_ai_secrets(self, opts: ListOptions) -> list[AISecret]: ...

    def get_api_key(self, id: str) -> APIKey: ...

    def list_api_keys(self, opts: ListOptions) -> list[APIKey]: ...

    def get_prompt(self, id: str) -> Prompt: ...

    def list_prompts(self, opts: ListOptions) -> list[Prompt]: ...

    def get_view(self, id: str) -> View: ...

    def list_views(self, opts: ListOptions) -> list[View]: ...

    def get_tag(self, id: str) -> Tag: ...

    def list_tags(self, opts: ListOptions) -> list[Tag]: ...


@runtime_checkable
class BraintrustAPI(
    ProjectAPI,
    ExperimentAPI,
    DatasetAPI,
    RoleAPI,
    GroupAPI,
    ACLAPI,
    OrganizationAPI,
    APIKeyAPI,
    LookupAPI,
    Protocol,
):
    """Full client surface."""

    ...
