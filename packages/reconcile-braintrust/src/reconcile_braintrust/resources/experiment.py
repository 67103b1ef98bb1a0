"""Experiment adapter.

Carries the ``repo_info`` nested object, which the update endpoint accepts
but does not echo on every response. The stored value is decided by the
composite reconciler so a missing echo never reads as a deletion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from reconcile_core.errors import ValidationError
from reconcile_core.reconcile import (
    build_composite_payload,
    build_payload,
    composite_on_read,
    reconcile_after_write,
    reconcile_scalar,
    reconcile_scalar_on_read,
    replace_membership,
)
from reconcile_core.tristate import OMIT, TriState

from reconcile_braintrust.client.base import ExperimentAPI
from reconcile_braintrust.client.models import (
    CreateExperimentRequest,
    Experiment,
    RepoInfo,
    UpdateExperimentRequest,
)
from reconcile_braintrust.resources.base import (
    delete_idempotent,
    fetch_live,
    metadata_on_read,
    require_id,
    require_name,
    settle,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExperimentModel:
    id: TriState[str] = field(default_factory=TriState.unknown)
    project_id: TriState[str] = field(default_factory=TriState.null)
    name: TriState[str] = field(default_factory=TriState.null)
    description: TriState[str] = field(default_factory=TriState.null)
    public: TriState[bool] = field(default_factory=TriState.null)
    metadata: TriState[dict[str, str]] = field(default_factory=TriState.null)
    tags: TriState[frozenset[str]] = field(default_factory=TriState.null)
    repo_info: TriState[RepoInfo] = field(default_factory=TriState.null)
    created: TriState[str] = field(default_factory=TriState.unknown)
    user_id: TriState[str] = field(default_factory=TriState.unknown)
    org_id: TriState[str] = field(default_factory=TriState.unknown)


def _response_fields(experiment: Experiment) -> dict:
    return {
        "name": TriState.known(experiment.name),
        "description": reconcile_scalar_on_read(experiment.description),
        "public": TriState.known(experiment.public),
        "metadata": metadata_on_read(experiment.metadata),
        "tags": reconcile_scalar_on_read(frozenset(experiment.tags or ())),
    }


def populate_experiment(data: ExperimentModel, experiment: Experiment) -> ExperimentModel:
    """Write a full server experiment into the model (read path)."""
    return settle(
        replace(
            data,
            id=TriState.known(experiment.id),
            project_id=TriState.known(experiment.project_id),
            created=reconcile_scalar_on_read(experiment.created),
            user_id=reconcile_scalar_on_read(experiment.user_id),
            org_id=reconcile_scalar_on_read(experiment.org_id),
            repo_info=composite_on_read(experiment.repo_info),
            **_response_fields(experiment),
        )
    )


def build_update_request(plan: ExperimentModel) -> UpdateExperimentRequest:
    """Partial update: null metadata/tags are sent as empty clears, unknown is omitted."""
    payload = build_payload(
        name=plan.name.value,
        description=reconcile_scalar(plan.description, ""),
        public=reconcile_scalar(plan.public, OMIT),
        metadata=reconcile_scalar(plan.metadata, {}),
        tags=replace_membership(plan.tags),
        repo_info=build_composite_payload(plan.repo_info),
    )
    return UpdateExperimentRequest(**payload)


class ExperimentResource:
    """Create/read/update/delete for experiments."""

    entity = "experiment"

    def __init__(self, client: ExperimentAPI) -> None:
        self._client = client

    def create(self, plan: ExperimentModel) -> ExperimentModel:
        require_name(self.entity, plan.name)
        if not plan.project_id.is_known:
            raise ValidationError("project_id", "experiments require a known project_id")
        payload = build_payload(
            project_id=plan.project_id.value,
            name=plan.name.value,
            description=reconcile_scalar(plan.description, OMIT),
            public=reconcile_scalar(plan.public, OMIT),
            metadata=reconcile_scalar(plan.metadata, OMIT),
            tags=replace_membership(plan.tags) or OMIT,
            repo_info=build_composite_payload(plan.repo_info),
        )
        created = self._client.create_experiment(CreateExperimentRequest(**payload))
        logger.debug("created experiment %s", created.id)
        # re-read so state holds what the server persisted
        experiment = self._client.get_experiment(created.id)
        result = populate_experiment(plan, experiment)
        return replace(
            result,
            repo_info=reconcile_after_write(
                in_config=not plan.repo_info.is_null,
                submitted=plan.repo_info,
                echoed=experiment.repo_info,
                prior=TriState.null(),
            ),
        )

    def read(self, state: ExperimentModel) -> ExperimentModel | None:
        experiment = fetch_live(self.entity, self._client.get_experiment, state.id.value)
        if experiment is None:
            return None
        return populate_experiment(state, experiment)

    def update(
        self,
        plan: ExperimentModel,
        state: ExperimentModel,
        config: ExperimentModel | None = None,
    ) -> ExperimentModel:
        """Apply *plan* over *state*.

        *config* is the raw user configuration; it tells whether ``repo_info``
        was written at all. Without it the plan is taken as the config.
        """
        experiment_id = require_id(self.entity, plan.id)
        require_name(self.entity, plan.name)

        req = build_update_request(plan)
        experiment = self._client.update_experiment(experiment_id, req)

        repo_info = reconcile_after_write(
            in_config=not (config or plan).repo_info.is_null,
            submitted=plan.repo_info,
            echoed=experiment.repo_info,
            prior=state.repo_info,
        )
        result = replace(plan, repo_info=repo_info, **_response_fields(experiment))
        # the update response does not carry these reliably
        return settle(
            replace(
                result,
                id=state.id,
                project_id=state.project_id,
                created=state.created,
                user_id=state.user_id,
                org_id=state.org_id,
            )
        )

    def delete(self, state: ExperimentModel) -> None:
        delete_idempotent(self.entity, self._client.delete_experiment, state.id.value)
