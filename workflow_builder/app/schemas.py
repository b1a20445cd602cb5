"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..domain.models import StepKind, StepTypeInfo, Workflow
from ..health.models import SystemStatus
from ..state.models import WorkflowRun


class StepTypeRead(BaseModel):
    type: StepKind
    label: str
    description: str

    @classmethod
    def from_domain(cls, info: StepTypeInfo) -> "StepTypeRead":
        return cls(type=info.kind, label=info.label, description=info.description)


class StepIn(BaseModel):
    # Plain str: unknown kinds are rejected by the WorkflowValidator, not by parsing
    type: str


class CreateWorkflowRequest(BaseModel):
    name: str = ""
    description: Optional[str] = None
    steps: List[StepIn] = Field(default_factory=list)


class StepRead(BaseModel):
    type: StepKind


class WorkflowRead(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    steps: List[StepRead]
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, workflow: Workflow) -> "WorkflowRead":
        return cls(
            id=workflow.id,
            name=workflow.name,
            description=workflow.description,
            steps=[StepRead(type=kind) for kind in workflow.kinds],
            created_at=workflow.created_at,
        )


class WorkflowListResponse(BaseModel):
    workflows: List[WorkflowRead]


class RunWorkflowRequest(BaseModel):
    workflow_id: str
    input_text: str


class StepResultRead(BaseModel):
    step: StepKind
    output: str
    success: bool
    error: Optional[str] = None


class StepFailureRead(BaseModel):
    step_index: int
    step: StepKind
    reason: str


class RunWorkflowResponse(BaseModel):
    workflow_id: Optional[str] = None
    outcome: str
    results: List[StepResultRead]
    final_output: Optional[str] = None
    error: Optional[StepFailureRead] = None

    @classmethod
    def from_run(cls, run: WorkflowRun) -> "RunWorkflowResponse":
        error = None
        if run.error:
            error = StepFailureRead(
                step_index=run.error.step_index,
                step=run.error.kind,
                reason=run.error.reason,
            )
        return cls(
            workflow_id=run.workflow_id,
            outcome=run.outcome.value,
            results=[
                StepResultRead(step=r.kind, output=r.output, success=r.success, error=r.error)
                for r in run.results
            ],
            final_output=run.final_output,
            error=error,
        )


class ServiceHealthRead(BaseModel):
    status: str
    message: Optional[str] = None
    url: Optional[str] = None


class StatusResponse(BaseModel):
    status: str
    services: Dict[str, ServiceHealthRead]
    checked_at: datetime

    @classmethod
    def from_domain(cls, status: SystemStatus) -> "StatusResponse":
        return cls(
            status=status.status.value,
            services={
                name: ServiceHealthRead(
                    status=health.status.value, message=health.message, url=health.url
                )
                for name, health in status.services.items()
            },
            checked_at=status.checked_at,
        )
