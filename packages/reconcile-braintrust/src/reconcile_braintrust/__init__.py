"""Reconcile Braintrust - resource adapters and lookups over the Braintrust REST API."""

from reconcile_braintrust.client import APIError, BraintrustAPI
from reconcile_braintrust.datasources import EntityLookup, build_list_options, build_lookups
from reconcile_braintrust.resources import (
    ACLResource,
    APIKeyResource,
    DatasetResource,
    ExperimentResource,
    GroupResource,
    OrgResource,
    ProjectResource,
    RoleResource,
)
from reconcile_braintrust.session import Session, open_session

__version__ = "0.1.0"

__all__ = [
    "ACLResource",
    "APIError",
    "APIKeyResource",
    "BraintrustAPI",
    "DatasetResource",
    "EntityLookup",
    "ExperimentResource",
    "GroupResource",
    "OrgResource",
    "ProjectResource",
    "RoleResource",
    "Session",
    "build_list_options",
    "build_lookups",
    "open_session",
]
