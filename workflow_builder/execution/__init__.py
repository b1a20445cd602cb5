"""
Execution Layer - Workflow Pipeline and Step Transformation

Defines the WorkflowExecutor (sequential, fail-fast pipeline) and the
StepTransformer contract with its LLM-backed implementation.
"""

from workflow_builder.execution.executor import WorkflowExecutor
from workflow_builder.execution.transformer import LLMStepTransformer, StepTransformer


__all__ = [
    "LLMStepTransformer",
    "StepTransformer",
    "WorkflowExecutor",
]
