"""
Executor - Workflow Execution Pipeline

The WorkflowExecutor runs a workflow's steps strictly in order, feeding each
step the output of the step before it.
-----------------------------------------------

The run is a small state machine:

    Pending(0) -> Pending(1) -> ... -> Completed
         \\            \\
          Aborted(i, reason)

Every Pending(i) makes exactly one transformer call. A failure (or a call
exceeding the per-step timeout) moves to Aborted(i) immediately: the later
steps have no input without step i's output, so they are never attempted.
The executor never skips, reorders or retries steps. Retrying belongs to the
transformer.

All run state (the current text and the results) is local to execute(), so
one executor instance can serve any number of concurrent runs.
"""

import asyncio
import logging
from typing import List, Optional

from ..config import settings
from ..domain.models import StepKind, Workflow
from ..exceptions import TransformError
from ..state.models import RunOutcome, StepFailure, StepResult, WorkflowRun
from .transformer import StepTransformer

logger = logging.getLogger(__name__)


class WorkflowExecutor:
    def __init__(
        self,
        transformer: StepTransformer,
        step_timeout: Optional[float] = settings.STEP_TIMEOUT_SECONDS,
    ):
        self.transformer = transformer
        self.step_timeout = step_timeout

    async def execute(self, workflow: Workflow, input_text: str) -> WorkflowRun:
        """
        Runs every step of `workflow` against `input_text`.

        Returns a WorkflowRun that is either COMPLETED with one result per
        step, or ABORTED with the results of the steps that succeeded before
        the failure and a StepFailure naming the failed step.
        """
        logger.info(
            f"Running workflow '{workflow.name}' ({workflow.id}) with {len(workflow.steps)} steps"
        )

        results: List[StepResult] = []
        current = input_text

        for index, step in enumerate(workflow.steps):
            try:
                output = await self._transform(step.kind, current)
            except TransformError as e:
                logger.warning(
                    f"Workflow '{workflow.name}' aborted at step {index} ({step.kind.value}): {e.reason}"
                )
                return WorkflowRun(
                    workflow_id=workflow.id,
                    input_text=input_text,
                    results=results,
                    outcome=RunOutcome.ABORTED,
                    error=StepFailure(step_index=index, kind=step.kind, reason=e.reason),
                )

            results.append(StepResult(kind=step.kind, output=output, success=True))
            # Chaining: the next step sees only this step's output
            current = output

        logger.info(f"Workflow '{workflow.name}' completed")
        return WorkflowRun(
            workflow_id=workflow.id,
            input_text=input_text,
            results=results,
            outcome=RunOutcome.COMPLETED,
        )

    async def _transform(self, kind: StepKind, text: str) -> str:
        try:
            return await asyncio.wait_for(
                self.transformer.transform(kind, text),
                timeout=self.step_timeout,
            )
        except asyncio.TimeoutError:
            raise TransformError(
                f"timed out after {self.step_timeout}s", kind=kind.value
            ) from None
