"""REST collaborator contract: protocols, models and errors."""

from reconcile_braintrust.client.base import (
    ACLAPI,
    APIKeyAPI,
    BraintrustAPI,
    DatasetAPI,
    ExperimentAPI,
    GroupAPI,
    LookupAPI,
    OrganizationAPI,
    ProjectAPI,
    RoleAPI,
)
from reconcile_braintrust.client.errors import (
    APIError,
    is_not_found,
    is_rate_limited,
    is_unauthorized,
    sanitize_message,
)

__all__ = [
    "ACLAPI",
    "APIError",
    "APIKeyAPI",
    "BraintrustAPI",
    "DatasetAPI",
    "ExperimentAPI",
    "GroupAPI",
    "LookupAPI",
    "OrganizationAPI",
    "ProjectAPI",
    "RoleAPI",
    "is_not_found",
    "is_rate_limited",
    "is_unauthorized",
    "sanitize_message",
]
