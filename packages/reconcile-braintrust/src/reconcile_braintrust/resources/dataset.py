"""Dataset adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from reconcile_core.errors import ValidationError
from reconcile_core.reconcile import build_payload, reconcile_scalar, reconcile_scalar_on_read
from reconcile_core.tristate import OMIT, TriState

from reconcile_braintrust.client.base import DatasetAPI
from reconcile_braintrust.client.models import CreateDatasetRequest, Dataset, UpdateDatasetRequest
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
class DatasetModel:
    id: TriState[str] = field(default_factory=TriState.unknown)
    project_id: TriState[str] = field(default_factory=TriState.null)
    name: TriState[str] = field(default_factory=TriState.null)
    description: TriState[str] = field(default_factory=TriState.null)
    metadata: TriState[dict[str, str]] = field(default_factory=TriState.null)
    org_id: TriState[str] = field(default_factory=TriState.unknown)
    user_id: TriState[str] = field(default_factory=TriState.unknown)
    created: TriState[str] = field(default_factory=TriState.unknown)


def populate_dataset(data: DatasetModel, dataset: Dataset) -> DatasetModel:
    return settle(
        replace(
            data,
            id=TriState.known(dataset.id),
            project_id=TriState.known(dataset.project_id),
            name=TriState.known(dataset.name),
            description=reconcile_scalar_on_read(dataset.description),
            metadata=metadata_on_read(dataset.metadata),
            org_id=reconcile_scalar_on_read(dataset.org_id),
            user_id=reconcile_scalar_on_read(dataset.user_id),
            created=reconcile_scalar_on_read(dataset.created),
        )
    )


class DatasetResource:
    entity = "dataset"

    def __init__(self, client: DatasetAPI) -> None:
        self._client = client

    def create(self, plan: DatasetModel) -> DatasetModel:
        require_name(self.entity, plan.name)
        if not plan.project_id.is_known:
            raise ValidationError("project_id", "datasets require a known project_id")
        payload = build_payload(
            project_id=plan.project_id.value,
            name=plan.name.value,
            description=reconcile_scalar(plan.description, OMIT),
            metadata=reconcile_scalar(plan.metadata, OMIT),
        )
        dataset = self._client.create_dataset(CreateDatasetRequest(**payload))
        logger.debug("created dataset %s", dataset.id)
        return populate_dataset(plan, dataset)

    def read(self, state: DatasetModel) -> DatasetModel | None:
        dataset = fetch_live(self.entity, self._client.get_dataset, state.id.value)
        if dataset is None:
            return None
        return populate_dataset(state, dataset)

    def update(self, plan: DatasetModel, state: DatasetModel) -> DatasetModel:
        dataset_id = require_id(self.entity, state.id)
        require_name(self.entity, plan.name)
        payload = build_payload(
            name=plan.name.value,
            description=reconcile_scalar(plan.description, ""),
            metadata=reconcile_scalar(plan.metadata, {}),
        )
        dataset = self._client.update_dataset(dataset_id, UpdateDatasetRequest(**payload))
        result = populate_dataset(plan, dataset)
        return replace(
            result,
            id=state.id,
            project_id=state.project_id,
            org_id=state.org_id,
            user_id=state.user_id,
            created=state.created,
        )

    def delete(self, state: DatasetModel) -> None:
        delete_idempotent(self.entity, self._client.delete_dataset, state.id.value)
