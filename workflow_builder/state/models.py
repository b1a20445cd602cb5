"""
State Layer - Runtime Data Models

This module defines the ephemeral values produced while a workflow runs.
A WorkflowRun lives only for the duration of one execution request; it is
returned to the caller and never stored.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from ..domain.models import StepKind


class RunOutcome(str, Enum):
    """
    Terminal state of a run.

    COMPLETED: Every step succeeded.
    ABORTED: A step failed; the remaining steps were not attempted.
    """
    COMPLETED = "completed"
    ABORTED = "aborted"


class StepResult(BaseModel):
    """
    Output of one executed step.
    """
    kind: StepKind
    output: str
    success: bool = True
    error: Optional[str] = None


class StepFailure(BaseModel):
    """
    Identifies the step that aborted a run and why.
    """
    step_index: int = Field(..., ge=0, description="0-based position of the failed step.")
    kind: StepKind
    reason: str


class WorkflowRun(BaseModel):
    """
    Result of executing one workflow against one input text.

    `results` holds the successful steps in execution order. When the run
    was aborted, `error` names the failed step.
    """
    workflow_id: Optional[str] = None
    input_text: str
    results: List[StepResult] = Field(default_factory=list)
    outcome: RunOutcome = RunOutcome.COMPLETED
    error: Optional[StepFailure] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome == RunOutcome.COMPLETED

    @property
    def final_output(self) -> Optional[str]:
        if not self.results:
            return None
        return self.results[-1].output
