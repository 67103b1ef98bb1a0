"""Resource adapters: map tri-state models onto REST create/read/update/delete."""

from reconcile_braintrust.resources.acl import ACLModel, ACLResource
from reconcile_braintrust.resources.api_key import APIKeyModel, APIKeyResource
from reconcile_braintrust.resources.dataset import DatasetModel, DatasetResource
from reconcile_braintrust.resources.experiment import ExperimentModel, ExperimentResource
from reconcile_braintrust.resources.group import GroupModel, GroupResource
from reconcile_braintrust.resources.org import OrgModel, OrgResource
from reconcile_braintrust.resources.project import ProjectModel, ProjectResource
from reconcile_braintrust.resources.role import RoleModel, RoleResource

__all__ = [
    "ACLModel",
    "ACLResource",
    "APIKeyModel",
    "APIKeyResource",
    "DatasetModel",
    "DatasetResource",
    "ExperimentModel",
    "ExperimentResource",
    "GroupModel",
    "GroupResource",
    "OrgModel",
    "OrgResource",
    "ProjectModel",
    "ProjectResource",
    "RoleModel",
    "RoleResource",
]
