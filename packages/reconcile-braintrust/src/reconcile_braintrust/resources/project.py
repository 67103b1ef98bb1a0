"""Project adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from reconcile_core.reconcile import build_payload, reconcile_scalar, reconcile_scalar_on_read
from reconcile_core.tristate import OMIT, TriState

from reconcile_braintrust.client.base import ProjectAPI
from reconcile_braintrust.client.models import CreateProjectRequest, Project, UpdateProjectRequest
from reconcile_braintrust.resources.base import (
    delete_idempotent,
    fetch_live,
    require_id,
    require_name,
    settle,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectModel:
    id: TriState[str] = field(default_factory=TriState.unknown)
    name: TriState[str] = field(default_factory=TriState.null)
    description: TriState[str] = field(default_factory=TriState.null)
    org_name: TriState[str] = field(default_factory=TriState.null)
    org_id: TriState[str] = field(default_factory=TriState.unknown)
    user_id: TriState[str] = field(default_factory=TriState.unknown)
    created: TriState[str] = field(default_factory=TriState.unknown)


def populate_project(data: ProjectModel, project: Project) -> ProjectModel:
    return settle(
        replace(
            data,
            id=TriState.known(project.id),
            name=TriState.known(project.name),
            description=reconcile_scalar_on_read(project.description),
            org_id=reconcile_scalar_on_read(project.org_id),
            user_id=reconcile_scalar_on_read(project.user_id),
            created=reconcile_scalar_on_read(project.created),
        )
    )


class ProjectResource:
    entity = "project"

    def __init__(self, client: ProjectAPI) -> None:
        self._client = client

    def create(self, plan: ProjectModel) -> ProjectModel:
        require_name(self.entity, plan.name)
        payload = build_payload(
            name=plan.name.value,
            description=reconcile_scalar(plan.description, OMIT),
            org_name=reconcile_scalar(plan.org_name, OMIT),
        )
        project = self._client.create_project(CreateProjectRequest(**payload))
        logger.debug("created project %s", project.id)
        return populate_project(plan, project)

    def read(self, state: ProjectModel) -> ProjectModel | None:
        project = fetch_live(self.entity, self._client.get_project, state.id.value)
        if project is None:
            return None
        return populate_project(state, project)

    def update(self, plan: ProjectModel, state: ProjectModel) -> ProjectModel:
        project_id = require_id(self.entity, state.id)
        require_name(self.entity, plan.name)
        payload = build_payload(
            name=plan.name.value,
            description=reconcile_scalar(plan.description, ""),
        )
        project = self._client.update_project(project_id, UpdateProjectRequest(**payload))
        result = populate_project(plan, project)
        return replace(
            result,
            id=state.id,
            org_id=state.org_id,
            user_id=state.user_id,
            created=state.created,
        )

    def delete(self, state: ProjectModel) -> None:
        delete_idempotent(self.entity, self._client.delete_project, state.id.value)
