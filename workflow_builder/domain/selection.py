"""
Ordered step selection.

A client building a workflow picks step kinds one at a time; the order of the
picks becomes the order of execution. StepSelection holds that pick list as an
immutable ordered set capped at MAX_STEPS.
"""

from dataclasses import dataclass
from typing import Tuple

from .models import MAX_STEPS, StepKind


@dataclass(frozen=True)
class StepSelection:
    kinds: Tuple[StepKind, ...] = ()

    def __len__(self) -> int:
        return len(self.kinds)

    def __contains__(self, kind: object) -> bool:
        return kind in self.kinds

    @property
    def is_full(self) -> bool:
        return len(self.kinds) >= MAX_STEPS

    def position(self, kind: StepKind) -> int:
        """1-based position of kind in the selection, 0 if not selected."""
        return self.kinds.index(kind) + 1 if kind in self.kinds else 0

    def add(self, kind: StepKind) -> "StepSelection":
        # Already selected, or no room left: unchanged
        if kind in self.kinds or self.is_full:
            return self
        return StepSelection(self.kinds + (kind,))

    def remove(self, kind: StepKind) -> "StepSelection":
        return StepSelection(tuple(k for k in self.kinds if k != kind))

    def toggle(self, kind: StepKind) -> "StepSelection":
        if kind in self.kinds:
            return self.remove(kind)
        return self.add(kind)
