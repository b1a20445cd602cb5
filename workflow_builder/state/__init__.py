"""
State Layer - Runtime Data Models

Defines the ephemeral values produced by a workflow run.
"""

from workflow_builder.state.models import (
    RunOutcome,
    StepFailure,
    StepResult,
    WorkflowRun,
)

__all__ = [
    "RunOutcome",
    "StepFailure",
    "StepResult",
    "WorkflowRun",
]
