"""
Domain Layer - Static Data Models

Defines the core domain model of a text processing workflow: Workflows,
Steps, the closed set of StepKinds and the rules that validate them.
"""

from workflow_builder.domain.models import (
    MAX_STEPS,
    MIN_STEPS,
    STEP_CATALOG,
    Step,
    StepKind,
    StepTypeInfo,
    Workflow,
)
from workflow_builder.domain.selection import StepSelection
from workflow_builder.domain.validation import WorkflowValidator, validate_workflow

__all__ = [
    "MAX_STEPS",
    "MIN_STEPS",
    "STEP_CATALOG",
    "Step",
    "StepKind",
    "StepSelection",
    "StepTypeInfo",
    "Workflow",
    "WorkflowValidator",
    "validate_workflow",
]
