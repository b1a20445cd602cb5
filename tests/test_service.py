import pytest

from workflow_builder.domain.models import StepKind
from workflow_builder.exceptions import NotFoundError, ValidationError
from workflow_builder.execution.executor import WorkflowExecutor
from workflow_builder.health.aggregator import HealthAggregator
from workflow_builder.health.models import OverallStatus, ServiceHealth
from workflow_builder.health.probes import HealthProbes
from workflow_builder.repositories.workflow import InMemoryWorkflowRepository
from workflow_builder.services.workflows import WorkflowService
from workflow_builder.state.models import RunOutcome


class AllUpProbes(HealthProbes):
    async def ping_orchestrator(self):
        return True

    async def ping_store(self):
        return ServiceHealth.up("store")

    async def ping_llm_provider(self):
        return ServiceHealth.up("llm")


@pytest.fixture
def service(transformer):
    return WorkflowService(
        workflow_repository=InMemoryWorkflowRepository(),
        executor=WorkflowExecutor(transformer),
        health=HealthAggregator(AllUpProbes()),
    )


def test_create_and_list(service):
    created = service.create_workflow("Digest", None, ["clean-text", "summarize"])

    assert [wf.id for wf in service.list_workflows()] == [created.id]
    assert service.get_workflow(created.id) == created


def test_invalid_workflow_is_not_stored(service):
    with pytest.raises(ValidationError):
        service.create_workflow("Digest", None, ["clean-text"])
    assert service.list_workflows() == []


@pytest.mark.asyncio
async def test_run_stored_workflow(service, transformer):
    created = service.create_workflow("Digest", None, ["clean-text", "summarize"])

    run = await service.run_workflow(created.id, "raw text")

    assert run.outcome == RunOutcome.COMPLETED
    assert run.workflow_id == created.id
    assert transformer.calls[1] == (StepKind.SUMMARIZE, "clean-text(raw text)")


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   "])
async def test_run_rejects_empty_input(service, transformer, text):
    created = service.create_workflow("Digest", None, ["clean-text", "summarize"])

    with pytest.raises(ValidationError, match="missing input text"):
        await service.run_workflow(created.id, text)
    assert transformer.calls == []


@pytest.mark.asyncio
async def test_deleted_workflow_cannot_run(service):
    created = service.create_workflow("Digest", None, ["clean-text", "summarize"])

    service.delete_workflow(created.id)

    assert service.list_workflows() == []
    with pytest.raises(NotFoundError):
        await service.run_workflow(created.id, "raw text")


def test_delete_unknown_workflow(service):
    with pytest.raises(NotFoundError):
        service.delete_workflow("nope")


@pytest.mark.asyncio
async def test_get_status(service):
    status = await service.get_status()
    assert status.status == OverallStatus.HEALTHY


def test_step_types_cover_every_kind(service):
    kinds = [info.kind for info in service.list_step_types()]
    assert kinds == list(StepKind)
