"""Tests for ProjectResource and DatasetResource."""

from __future__ import annotations

import pytest

from reconcile_core.errors import ValidationError
from reconcile_core.tristate import TriState
from reconcile_braintrust.client.errors import APIError
from reconcile_braintrust.client.models import Dataset
from reconcile_braintrust.resources.dataset import DatasetModel, DatasetResource
from reconcile_braintrust.resources.project import ProjectModel, ProjectResource

K = TriState.known


# -- Projects -----------------------------------------------------------------


@pytest.fixture()
def projects(project_api) -> ProjectResource:
    return ProjectResource(project_api)


def test_project_create(projects, project_api, sample_project):
    project_api.create_project.return_value = sample_project
    result = projects.create(ProjectModel(name=K("evals"), org_name=K("acme")))

    payload = project_api.create_project.call_args.args[0].to_payload()
    assert payload == {"name": "evals", "org_name": "acme"}
    assert result.id == K("proj-1")
    assert result.description == K("Evaluation runs")
    assert result.org_name == K("acme")


def test_project_update_clears_description(projects, project_api, sample_project):
    project_api.update_project.return_value = sample_project.model_copy(
        update={"description": None}
    )
    state = ProjectModel(id=K("proj-1"), name=K("evals"), created=K("2024-05-01T00:00:00Z"))
    result = projects.update(ProjectModel(id=K("proj-1"), name=K("evals")), state)

    project_id, req = project_api.update_project.call_args.args
    assert project_id == "proj-1"
    assert req.to_payload() == {"name": "evals", "description": ""}
    assert result.description.is_null
    assert result.created == K("2024-05-01T00:00:00Z")


def test_project_read_missing(projects, project_api, not_found):
    project_api.get_project.side_effect = not_found
    assert projects.read(ProjectModel(id=K("proj-1"))) is None


def test_project_delete_unexpected_error(projects, project_api):
    project_api.delete_project.side_effect = APIError(403, "forbidden")
    with pytest.raises(APIError, match="status 403"):
        projects.delete(ProjectModel(id=K("proj-1")))


# -- Datasets -----------------------------------------------------------------


@pytest.fixture()
def datasets(dataset_api) -> DatasetResource:
    return DatasetResource(dataset_api)


def test_dataset_create(datasets, dataset_api, sample_dataset):
    dataset_api.create_dataset.return_value = sample_dataset
    plan = DatasetModel(
        project_id=K("proj-1"),
        name=K("golden"),
        metadata=K({"source": "manual"}),
        description=TriState.unknown(),
    )

    result = datasets.create(plan)

    payload = dataset_api.create_dataset.call_args.args[0].to_payload()
    assert payload == {"project_id": "proj-1", "name": "golden", "metadata": {"source": "manual"}}
    assert result.metadata == K({"source": "manual"})
    assert result.description == K("Golden answers")


def test_dataset_create_requires_project(datasets, dataset_api):
    with pytest.raises(ValidationError, match="project_id"):
        datasets.create(DatasetModel(name=K("golden")))
    dataset_api.create_dataset.assert_not_called()


def test_dataset_update_clears_metadata(datasets, dataset_api):
    dataset_api.update_dataset.return_value = Dataset(id="ds-1", project_id="proj-1", name="golden")
    state = DatasetModel(id=K("ds-1"), project_id=K("proj-1"), name=K("golden"))
    plan = DatasetModel(id=K("ds-1"), project_id=K("proj-1"), name=K("golden"))

    result = datasets.update(plan, state)

    payload = dataset_api.update_dataset.call_args.args[1].to_payload()
    assert payload["metadata"] == {}
    assert result.metadata.is_null
    assert result.project_id == K("proj-1")


def test_dataset_update_unknown_metadata_omitted(datasets, dataset_api, sample_dataset):
    dataset_api.update_dataset.return_value = sample_dataset
    state = DatasetModel(id=K("ds-1"), name=K("golden"))
    plan = DatasetModel(id=K("ds-1"), name=K("golden"), metadata=TriState.unknown())

    result = datasets.update(plan, state)

    assert "metadata" not in dataset_api.update_dataset.call_args.args[1].to_payload()
    assert result.metadata == K({"source": "manual"})


def test_dataset_read_soft_deleted(datasets, dataset_api, sample_dataset):
    dataset_api.get_dataset.return_value = sample_dataset.model_copy(
        update={"deleted_at": "2024-06-01"}
    )
    assert datasets.read(DatasetModel(id=K("ds-1"))) is None


def test_dataset_read_stringifies_metadata(datasets, dataset_api, sample_dataset):
    dataset_api.get_dataset.return_value = sample_dataset.model_copy(
        update={"metadata": {"rows": 10, "labels": ["a", "b"]}}
    )
    result = datasets.read(DatasetModel(id=K("ds-1")))
    assert result.metadata == K({"rows": "10", "labels": '["a", "b"]'})