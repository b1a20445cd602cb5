"""
Workflow shape validation.

WorkflowValidator is the only way a Workflow value is built from caller
input. It checks the name, the step count and the step kinds, then returns
a Workflow with the steps in exactly the order they were submitted.
"""

from typing import Iterable, Optional, Union

from ..exceptions import ValidationError
from .models import MAX_STEPS, MIN_STEPS, Step, StepKind, Workflow

StepInput = Union[Step, StepKind, str]


class WorkflowValidator:
    def validate(
        self,
        name: str,
        description: Optional[str],
        steps: Iterable[StepInput],
    ) -> Workflow:
        """
        Build a Workflow from raw input.

        Raises:
            ValidationError: "missing name", "step count out of range" or
                "unknown step type".
        """
        if not name or not name.strip():
            raise ValidationError("missing name")

        raw_steps = list(steps)
        if len(raw_steps) < MIN_STEPS or len(raw_steps) > MAX_STEPS:
            raise ValidationError("step count out of range")

        normalized = tuple(Step(kind=self._parse_kind(raw)) for raw in raw_steps)

        description = description.strip() if description else None
        return Workflow(
            name=name.strip(),
            description=description or None,
            steps=normalized,
        )

    @staticmethod
    def _parse_kind(raw: StepInput) -> StepKind:
        if isinstance(raw, Step):
            raw = raw.kind
        if isinstance(raw, StepKind):
            return raw
        if isinstance(raw, str):
            try:
                return StepKind(raw)
            except ValueError:
                pass
        raise ValidationError("unknown step type")


def validate_workflow(
    name: str, description: Optional[str], steps: Iterable[StepInput]
) -> Workflow:
    """Module-level shortcut for WorkflowValidator().validate()."""
    return WorkflowValidator().validate(name, description, steps)
