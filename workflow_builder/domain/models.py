"""
Domain Layer - Static Data Models

This module defines the core domain model representing a stored text
processing workflow: an ordered, length-bounded sequence of Steps, each one
naming a transformation kind from a closed set.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

MIN_STEPS = 2
MAX_STEPS = 4


class StepKind(str, Enum):
    """
    Closed set of transformations a Step can perform.
    The values are the wire format used by the API and the store.

    CLEAN_TEXT: Remove formatting, fix typos
    SUMMARIZE: Create a concise summary
    EXTRACT_KEY_POINTS: Extract the main points
    TAG_CATEGORY: Categorize the content
    """
    CLEAN_TEXT = "clean-text"
    SUMMARIZE = "summarize"
    EXTRACT_KEY_POINTS = "extract-key-points"
    TAG_CATEGORY = "tag-category"


@dataclass(frozen=True)
class StepTypeInfo:
    """
    Catalog entry describing a StepKind to clients.

    Attributes:
        kind: The StepKind this entry describes.
        label: Human-readable name (e.g., "Clean Text").
        description: One-line explanation of what the step does.
    """
    kind: StepKind
    label: str
    description: str


STEP_CATALOG: Tuple[StepTypeInfo, ...] = (
    StepTypeInfo(StepKind.CLEAN_TEXT, "Clean Text", "Remove formatting, fix typos"),
    StepTypeInfo(StepKind.SUMMARIZE, "Summarize", "Create concise summary"),
    StepTypeInfo(StepKind.EXTRACT_KEY_POINTS, "Extract Key Points", "Extract main points"),
    StepTypeInfo(StepKind.TAG_CATEGORY, "Tag Category", "Categorize content"),
)


@dataclass(frozen=True)
class Step:
    """
    A single transformation in a workflow.

    Carries no configuration: its meaning is its kind plus its position in
    Workflow.steps.
    """
    kind: StepKind


@dataclass(frozen=True)
class Workflow:
    """
    Named, ordered sequence of 2 to 4 steps.

    Built by WorkflowValidator, given an id and a creation time by the
    WorkflowRepository, and never mutated afterwards.

    Attributes:
        name: Non-empty display name.
        steps: Steps in execution order.
        description: Optional free text.
        id: Store-assigned identifier (None until created).
        created_at: Store-assigned creation time (None until created).
    """
    name: str
    steps: Tuple[Step, ...]
    description: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def kinds(self) -> Tuple[StepKind, ...]:
        return tuple(step.kind for step in self.steps)
