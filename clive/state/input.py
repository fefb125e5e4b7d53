"""Input state - held modifier keys."""

from __future__ import annotations
from dataclasses import dataclass, replace

from ..config import KEY_LEFT_SHIFT, KEY_RIGHT_SHIFT, STEP_SMALL, STEP_LARGE


@dataclass(frozen=True)
class ModifierState:
    """Which shift keys are currently held."""
    left_shift: bool = False
    right_shift: bool = False

    @property
    def shift(self) -> bool:
        return self.left_shift or self.right_shift

    @property
    def step(self) -> int:
        """Navigation step size for the current modifiers."""
        return STEP_LARGE if self.shift else STEP_SMALL

    def with_key(self, key: int, held: bool) -> ModifierState:
        """Return the state after ``key`` went down (held) or up."""
        if key == KEY_LEFT_SHIFT:
            return replace(self, left_shift=held)
        if key == KEY_RIGHT_SHIFT:
            return replace(self, right_shift=held)
        return self
