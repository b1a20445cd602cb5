import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Depends, status
from fastapi.responses import JSONResponse, Response

from ..config import settings
from ..exceptions import NotFoundError, ValidationError
from ..health.models import OverallStatus
from ..infrastructure.database.connection import init_db
from .dependencies import get_workflow_service
from ..services.workflows import WorkflowService
from .schemas import (
    CreateWorkflowRequest,
    RunWorkflowRequest,
    RunWorkflowResponse,
    StatusResponse,
    StepTypeRead,
    WorkflowListResponse,
    WorkflowRead,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database initialized")
    yield


app = FastAPI(title="Workflow Builder", lifespan=lifespan)

# --- Endpoints ---

@app.get("/health")
def health():
    """Liveness of this process. The status check probes this endpoint."""
    return {"status": "ok"}


@app.get("/step-types", response_model=list[StepTypeRead])
def list_step_types(
    service: WorkflowService = Depends(get_workflow_service)
):
    return [StepTypeRead.from_domain(info) for info in service.list_step_types()]


@app.get("/workflows", response_model=WorkflowListResponse)
def list_workflows(
    service: WorkflowService = Depends(get_workflow_service)
):
    return WorkflowListResponse(
        workflows=[WorkflowRead.from_domain(wf) for wf in service.list_workflows()]
    )


@app.post(
    "/workflows",
    response_model=WorkflowRead,
    status_code=status.HTTP_201_CREATED
)
def create_workflow(
    request: CreateWorkflowRequest,
    service: WorkflowService = Depends(get_workflow_service)
):
    try:
        workflow = service.create_workflow(
            name=request.name,
            description=request.description,
            steps=[step.type for step in request.steps],
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return WorkflowRead.from_domain(workflow)


@app.post("/workflows/run", response_model=RunWorkflowResponse)
async def run_workflow(
    request: RunWorkflowRequest,
    service: WorkflowService = Depends(get_workflow_service)
):
    """
    Runs a stored workflow against the input text.
    A failed step returns 502 with the partial results and the failed step.
    """
    try:
        run = await service.run_workflow(request.workflow_id, request.input_text)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    body = RunWorkflowResponse.from_run(run)
    if not run.succeeded:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=body.model_dump(mode="json"),
        )
    return body


@app.get("/workflows/{workflow_id}", response_model=WorkflowRead)
def get_workflow(
    workflow_id: str,
    service: WorkflowService = Depends(get_workflow_service)
):
    try:
        return WorkflowRead.from_domain(service.get_workflow(workflow_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.delete("/workflows/{workflow_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workflow(
    workflow_id: str,
    service: WorkflowService = Depends(get_workflow_service)
):
    """
    Deletes a workflow. Returns 204 No Content on success.
    """
    try:
        service.delete_workflow(workflow_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.get("/status", response_model=StatusResponse)
async def get_status(
    response: Response,
    service: WorkflowService = Depends(get_workflow_service)
):
    """Fresh health snapshot of orchestrator, store and LLM provider."""
    system_status = await service.get_status()
    if system_status.status == OverallStatus.UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return StatusResponse.from_domain(system_status)
