"""
Step-by-step navigation for the steps screen.

The cursor only moves forward, one step at a time, and stops at the last
step. There is no "previous" action.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from cookbook.models import Recipe


@dataclass
class StepCursor:
    """
    Position within a recipe's ordered steps.

    Attributes:
        steps: Step descriptions in recipe order
        index: Current position, kept within [0, len(steps) - 1]
    """
    steps: Tuple[str, ...]
    index: int = 0

    def __post_init__(self):
        self.index = self._clamp(self.index)

    @classmethod
    def for_recipe(cls, recipe: Recipe, index: int = 0) -> "StepCursor":
        return cls(steps=recipe.step_descriptions, index=index)

    def _clamp(self, index: int) -> int:
        if not self.steps:
            return 0
        return max(0, min(index, len(self.steps) - 1))

    @property
    def count(self) -> int:
        return len(self.steps)

    @property
    def current(self) -> Optional[str]:
        """Description of the current step, or None for a recipe with no steps."""
        if not self.steps:
            return None
        return self.steps[self.index]

    @property
    def is_last(self) -> bool:
        return self.index >= self.count - 1

    @property
    def has_next(self) -> bool:
        return self.count > 0 and not self.is_last

    def advance(self) -> int:
        """
        Move to the next step. Stays put on the last step (no wraparound).

        Returns:
            The new index
        """
        self.index = self._clamp(self.index + 1)
        return self.index

    def label(self) -> str:
        if not self.steps:
            return "No steps"
        return f"Step {self.index + 1} of {self.count}"
