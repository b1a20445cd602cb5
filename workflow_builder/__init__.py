"""
Workflow Builder

Define short, ordered text processing workflows (clean, summarize, extract
key points, tag) and run them against input text, each step's output feeding
the next. Also reports the combined health of the API, the workflow store and
the LLM provider.
"""

from workflow_builder.domain import (
    Step,
    StepKind,
    StepSelection,
    StepTypeInfo,
    Workflow,
    WorkflowValidator,
)
from workflow_builder.state import (
    RunOutcome,
    StepFailure,
    StepResult,
    WorkflowRun,
)
from workflow_builder.execution import LLMStepTransformer, StepTransformer, WorkflowExecutor
from workflow_builder.health import HealthAggregator, ServiceHealth, SystemStatus

__all__ = [
    # Domain Layer
    "Step",
    "StepKind",
    "StepSelection",
    "StepTypeInfo",
    "Workflow",
    "WorkflowValidator",
    # State Layer
    "RunOutcome",
    "StepFailure",
    "StepResult",
    "WorkflowRun",
    # Execution Layer
    "LLMStepTransformer",
    "StepTransformer",
    "WorkflowExecutor",
    # Health Layer
    "HealthAggregator",
    "ServiceHealth",
    "SystemStatus",
]
