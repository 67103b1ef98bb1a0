"""Pydantic request/response models for the REST collaborator.

Response models mirror what the API returns: fields are present or
absent, there is no null/unknown distinction. Request models are built only
from fields a reconciler decided to send; ``to_payload()`` serializes exactly
those fields, so an explicit ``None`` or ``{}`` clear survives while an
unset field stays out of the body.
"""

from __future__ import annotations

from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

from reconcile_core.errors import ValidationError

ACLObjectType = Literal[
    "organization",
    "project",
    "experiment",
    "dataset",
    "prompt",
    "prompt_session",
    "group",
    "role",
    "org_member",
    "project_log",
    "org_project",
]

ACL_OBJECT_TYPES: tuple[str, ...] = get_args(ACLObjectType)


def check_object_type(field: str, value: str) -> str:
    """Reject *value* unless it names an ACL object type."""
    if value not in ACL_OBJECT_TYPES:
        raise ValidationError(
            field, f"'{value}' is not one of: {', '.join(ACL_OBJECT_TYPES)}"
        )
    return value


class RequestModel(BaseModel):
    """Base for write requests: only explicitly set fields are sent."""

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


# -- Projects --------------------------------------------------------------


class Project(BaseModel):
    id: str
    name: str
    org_id: str | None = None
    description: str | None = None
    created: str | None = None
    deleted_at: str | None = None
    user_id: str | None = None


class CreateProjectRequest(RequestModel):
    name: str
    description: str | None = None
    org_name: str | None = None


class UpdateProjectRequest(RequestModel):
    name: str | None = None
    description: str | None = None


# -- Experiments -----------------------------------------------------------


class RepoInfo(BaseModel):
    """Git snapshot attached to an experiment; replaced as a whole."""

    model_config = ConfigDict(frozen=True)

    commit: str | None = None
    branch: str | None = None
    tag: str | None = None
    dirty: bool | None = None
    author_name: str | None = None
    author_email: str | None = None
    commit_message: str | None = None
    commit_time: str | None = None
    git_diff: str | None = None


class Experiment(BaseModel):
    id: str
    project_id: str
    name: str
    description: str | None = None
    created: str | None = None
    deleted_at: str | None = None
    user_id: str | None = None
    org_id: str | None = None
    public: bool = False
    metadata: dict[str, Any] | None = None
    tags: list[str] | None = None
    repo_info: RepoInfo | None = None


class CreateExperimentRequest(RequestModel):
    project_id: str
    name: str
    description: str | None = None
    public: bool | None = None
    metadata: dict[str, Any] | None = None
    tags: list[str] | None = None
    repo_info: dict[str, Any] | None = None


class UpdateExperimentRequest(RequestModel):
    name: str | None = None
    description: str | None = None
    public: bool | None = None
    metadata: dict[str, Any] | None = None
    tags: list[str] | None = None
    repo_info: dict[str, Any] | None = None


# -- Datasets --------------------------------------------------------------


class Dataset(BaseModel):
    id: str
    project_id: str
    name: str
    description: str | None = None
    created: str | None = None
    deleted_at: str | None = None
    user_id: str | None = None
    org_id: str | None = None
    metadata: dict[str, Any] | None = None


class CreateDatasetRequest(RequestModel):
    project_id: str
    name: str
    description: str | None = None
    metadata: dict[str, Any] | None = None


class UpdateDatasetRequest(RequestModel):
    name: str | None = None
    description: str | None = None
    metadata: dict[str, Any] | None = None


# -- Roles -----------------------------------------------------------------


class RoleMemberPermission(BaseModel):
    model_config = ConfigDict(frozen=True)

    permission: str
    restrict_object_type: ACLObjectType | None = None


class Role(BaseModel):
    id: str
    name: str
    org_id: str | None = None
    description: str | None = None
    created: str | None = None
    deleted_at: str | None = None
    user_id: str | None = None
    member_permissions: list[RoleMemberPermission] | None = None
    member_roles: list[str] | None = None

    def permission_names(self) -> list[str] | None:
        """Permission strings, skipping blank entries; ``None`` if not echoed."""
        if self.member_permissions is None:
            return None
        return [p.permission for p in self.member_permissions if p.permission]


class CreateRoleRequest(RequestModel):
    name: str
    description: str | None = None
    org_name: str | None = None
    member_permissions: list[RoleMemberPermission] | None = None
    member_roles: list[str] | None = None


class UpdateRoleRequest(RequestModel):
    name: str | None = None
    description: str | None = None
    add_member_permissions: list[RoleMemberPermission] | None = None
    remove_member_permissions: list[RoleMemberPermission] | None = None
    add_member_roles: list[str] | None = None
    remove_member_roles: list[str] | None = None


# -- Groups ----------------------------------------------------------------


class Group(BaseModel):
    id: str
    name: str
    org_id: str | None = None
    description: str | None = None
    created: str | None = None
    deleted_at: str | None = None
    member_users: list[str] | None = None
    member_groups: list[str] | None = None


class CreateGroupRequest(RequestModel):
    name: str
    org_name: str | None = None
    description: str | None = None
    member_users: list[str] | None = None
    member_groups: list[str] | None = None


class UpdateGroupRequest(RequestModel):
    name: str | None = None
    description: str | None = None
    member_users: list[str] | None = None
    member_groups: list[str] | None = None


# -- ACLs ------------------------------------------------------------------


class ACL(BaseModel):
    id: str
    object_id: str
    object_type: ACLObjectType
    created: str | None = None
    user_id: str | None = None
    group_id: str | None = None
    role_id: str | None = None
    permission: str | None = None
    restrict_object_type: ACLObjectType | None = None


class CreateACLRequest(RequestModel):
    object_id: str
    object_type: ACLObjectType
    user_id: str | None = None
    group_id: str | None = None
    role_id: str | None = None
    permission: str | None = None
    restrict_object_type: ACLObjectType | None = None


# -- Organizations ---------------------------------------------------------


class Organization(BaseModel):
    id: str
    name: str
    api_url: str | None = None
    proxy_url: str | None = None
    realtime_url: str | None = None
    image_rendering_mode: str | None = None
    is_universal_api: bool | None = None
    is_dataplane_private: bool | None = None
    created: str | None = None


class PatchOrganizationRequest(RequestModel):
    name: str | None = None
    api_url: str | None = None
    proxy_url: str | None = None
    realtime_url: str | None = None
    image_rendering_mode: str | None = None
    is_universal_api: bool | None = None
    is_dataplane_private: bool | None = None


# -- API keys --------------------------------------------------------------


class APIKey(BaseModel):
    id: str
    name: str
    org_id: str | None = None
    preview_name: str | None = None
    user_id: str | None = None
    user_email: str | None = None
    created: str | None = None
    # Only returned by the create call.
    key: str | None = None


class CreateAPIKeyRequest(RequestModel):
    name: str


class UpdateAPIKeyRequest(RequestModel):
    name: str


# -- Read-only lookups -----------------------------------------------------


class AISecret(BaseModel):
    id: str
    name: str
    org_id: str | None = None
    type: str | None = None
    created: str | None = None
    metadata: dict[str, Any] | None = None
    preview_secret: str | None = None


class Prompt(BaseModel):
    id: str
    project_id: str
    name: str
    slug: str | None = None
    description: str | None = None
    created: str | None = None
    deleted_at: str | None = None
    tags: list[str] | None = None


class View(BaseModel):
    id: str
    name: str
    object_id: str
    object_type: ACLObjectType
    view_type: str | None = None
    created: str | None = None
    deleted_at: str | None = None


class Tag(BaseModel):
    id: str
    name: str
    project_id: str
    color: str | None = None
    description: str | None = None
    created: str | None = None


class ListOptions(BaseModel):
    """Query filters for list endpoints; cursors are passed through as-is."""

    name: str | None = None
    org_name: str | None = None
    project_id: str | None = None
    object_id: str | None = None
    object_type: ACLObjectType | None = None
    starting_after: str | None = None
    ending_before: str | None = None
    limit: int | None = None
    ids: list[str] = Field(default_factory=list)
    types: list[str] = Field(default_factory=list)

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, exclude_defaults=True)
