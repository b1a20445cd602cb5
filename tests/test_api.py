import pytest
from fastapi.testclient import TestClient

from workflow_builder.app.dependencies import get_workflow_service
from workflow_builder.app.main import app
from workflow_builder.domain.models import StepKind
from workflow_builder.execution.executor import WorkflowExecutor
from workflow_builder.health.aggregator import HealthAggregator
from workflow_builder.health.models import ServiceHealth
from workflow_builder.health.probes import HealthProbes
from workflow_builder.repositories.workflow import InMemoryWorkflowRepository
from workflow_builder.services.workflows import WorkflowService


class StaticProbes(HealthProbes):
    def __init__(self, orchestrator=True, store=True, llm=True):
        self.orchestrator = orchestrator
        self.store = store
        self.llm = llm

    async def ping_orchestrator(self):
        return self.orchestrator

    async def ping_store(self):
        return ServiceHealth.up("store") if self.store else ServiceHealth.down("store")

    async def ping_llm_provider(self):
        return ServiceHealth.up("llm") if self.llm else ServiceHealth.down("llm")


@pytest.fixture
def probes():
    return StaticProbes()


@pytest.fixture
def client(transformer, probes):
    service = WorkflowService(
        workflow_repository=InMemoryWorkflowRepository(),
        executor=WorkflowExecutor(transformer),
        health=HealthAggregator(probes),
    )
    app.dependency_overrides[get_workflow_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def create(client, name="Digest", steps=("clean-text", "summarize")):
    return client.post(
        "/workflows",
        json={"name": name, "description": "d", "steps": [{"type": s} for s in steps]},
    )


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_step_types(client):
    response = client.get("/step-types")

    assert response.status_code == 200
    body = response.json()
    assert [t["type"] for t in body] == [k.value for k in StepKind]
    assert body[0]["label"] == "Clean Text"


def test_create_and_list_workflows(client):
    response = create(client)

    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "Digest"
    assert created["steps"] == [{"type": "clean-text"}, {"type": "summarize"}]

    listed = client.get("/workflows").json()["workflows"]
    assert [wf["id"] for wf in listed] == [created["id"]]

    fetched = client.get(f"/workflows/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["id"] == created["id"]


@pytest.mark.parametrize("payload, message", [
    ({"name": "", "steps": [{"type": "clean-text"}, {"type": "summarize"}]}, "missing name"),
    ({"name": "A", "steps": [{"type": "clean-text"}]}, "step count out of range"),
    ({"name": "A", "steps": [{"type": "clean-text"}, {"type": "translate"}]}, "unknown step type"),
])
def test_create_rejects_invalid_workflows(client, payload, message):
    response = client.post("/workflows", json=payload)

    assert response.status_code == 422
    assert response.json()["detail"] == message


def test_run_workflow(client, transformer):
    workflow_id = create(client).json()["id"]

    response = client.post(
        "/workflows/run", json={"workflow_id": workflow_id, "input_text": "raw text"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["outcome"] == "completed"
    assert [r["step"] for r in body["results"]] == ["clean-text", "summarize"]
    assert body["final_output"] == "summarize(clean-text(raw text))"
    assert body["error"] is None


def test_run_failure_returns_partial_results(client, transformer):
    transformer.fail_on.add(StepKind.SUMMARIZE)
    workflow_id = create(client, steps=("clean-text", "summarize", "tag-category")).json()["id"]

    response = client.post(
        "/workflows/run", json={"workflow_id": workflow_id, "input_text": "raw text"}
    )

    assert response.status_code == 502
    body = response.json()
    assert body["outcome"] == "aborted"
    assert len(body["results"]) == 1
    assert body["error"] == {
        "step_index": 1,
        "step": "summarize",
        "reason": "model unavailable",
    }


def test_run_rejects_empty_input(client):
    workflow_id = create(client).json()["id"]

    response = client.post("/workflows/run", json={"workflow_id": workflow_id, "input_text": " "})

    assert response.status_code == 422


def test_delete_then_run_is_not_found(client):
    workflow_id = create(client).json()["id"]

    assert client.delete(f"/workflows/{workflow_id}").status_code == 204
    assert client.get("/workflows").json()["workflows"] == []
    assert client.get(f"/workflows/{workflow_id}").status_code == 404
    assert client.delete(f"/workflows/{workflow_id}").status_code == 404

    response = client.post(
        "/workflows/run", json={"workflow_id": workflow_id, "input_text": "raw text"}
    )
    assert response.status_code == 404


def test_status_healthy(client):
    response = client.get("/status")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["services"]["store"]["status"] == "connected"


def test_status_degraded(client, probes):
    probes.store = False

    response = client.get("/status")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"


def test_status_unhealthy_is_503(client, probes):
    probes.orchestrator = False

    response = client.get("/status")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "unhealthy"
    assert body["services"]["orchestrator"]["status"] == "disconnected"
