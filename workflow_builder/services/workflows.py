"""
Workflow Service - Application Orchestration Layer

This service is the entry point for all workflow operations. It orchestrates
the interaction between the Data Layer (Repository), the Logic Layer
(Validator, Executor, HealthAggregator) and the API.
"""

import logging
from typing import Iterable, List, Optional

from ..domain.models import STEP_CATALOG, StepTypeInfo, Workflow
from ..domain.validation import StepInput, WorkflowValidator
from ..exceptions import ValidationError
from ..execution.executor import WorkflowExecutor
from ..health.aggregator import HealthAggregator
from ..health.models import SystemStatus
from ..repositories.workflow import WorkflowRepository
from ..state.models import WorkflowRun

logger = logging.getLogger(__name__)

class WorkflowService:
    def __init__(
        self,
        workflow_repository: WorkflowRepository,
        executor: WorkflowExecutor,
        health: HealthAggregator,
        validator: Optional[WorkflowValidator] = None,
    ):
        self.workflow_repo = workflow_repository
        self.executor = executor
        self.health = health
        self.validator = validator or WorkflowValidator()

    def create_workflow(
        self, name: str, description: Optional[str], steps: Iterable[StepInput]
    ) -> Workflow:
        """Validates and stores a new workflow. Raises ValidationError."""
        workflow = self.validator.validate(name, description, steps)
        created = self.workflow_repo.create(workflow)
        logger.info(f"Created workflow '{created.name}' ({created.id}): {[k.value for k in created.kinds]}")
        return created

    def list_workflows(self) -> List[Workflow]:
        return self.workflow_repo.list()

    def get_workflow(self, workflow_id: str) -> Workflow:
        """Raises NotFoundError."""
        return self.workflow_repo.get(workflow_id)

    def delete_workflow(self, workflow_id: str) -> None:
        """Raises NotFoundError."""
        self.workflow_repo.delete(workflow_id)
        logger.info(f"Deleted workflow {workflow_id}")

    async def run_workflow(self, workflow_id: str, input_text: str) -> WorkflowRun:
        """
        The Core Loop:
        1. Reject empty input
        2. Load the stored definition (NotFoundError if missing)
        3. Execute the steps in order

        A failing step does not raise: the returned run is ABORTED and
        carries the partial results and the failed step.
        """
        if not input_text or not input_text.strip():
            raise ValidationError("missing input text")

        workflow = self.workflow_repo.get(workflow_id)
        return await self.executor.execute(workflow, input_text)

    async def get_status(self) -> SystemStatus:
        return await self.health.check()

    def list_step_types(self) -> List[StepTypeInfo]:
        return list(STEP_CATALOG)
