"""
Exceptions

Error taxonomy shared by the domain, execution, health and service layers.
The API layer maps these to HTTP responses.
"""

from typing import Optional


class WorkflowBuilderError(Exception):
    """Base class for all errors raised by this package."""
    pass


class ValidationError(WorkflowBuilderError):
    """Raised when a proposed workflow (or run request) is malformed."""
    pass


class NotFoundError(WorkflowBuilderError):
    """Raised when a workflow id does not exist in the store."""

    def __init__(self, workflow_id: str):
        super().__init__(f"Workflow '{workflow_id}' not found.")
        self.workflow_id = workflow_id


class TransformError(WorkflowBuilderError):
    """
    Raised by a StepTransformer when a single transformation fails.

    The executor does not let this escape: it is converted into the
    StepFailure attached to an aborted WorkflowRun.
    """

    def __init__(self, reason: str, kind: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.kind = kind


class ConnectivityError(WorkflowBuilderError):
    """Raised by a health probe that could not reach its target."""

    def __init__(self, service: str, reason: str):
        super().__init__(f"{service}: {reason}")
        self.service = service
        self.reason = reason
