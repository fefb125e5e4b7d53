"""Abstract actions and the effects they produce.

Actions are what the input mapper hands to the browser. Effects are what the
browser's reducer asks the outside world to do; the reducer itself never
touches the renderer or the filesystem.
"""

from __future__ import annotations
from dataclasses import dataclass


class Action:
    """Base class for all actions."""


# ═══════════════════════════════════════════════════════════════════════════
# Navigation Actions
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Next(Action):
    """Advance by ``step`` images, staying put at the end of the list."""
    step: int = 1


@dataclass(frozen=True)
class Prev(Action):
    """Go back by ``step`` images, clamping at the first one."""
    step: int = 1


@dataclass(frozen=True)
class First(Action):
    """Jump to the first image."""


@dataclass(frozen=True)
class Last(Action):
    """Jump to the last image."""


# ═══════════════════════════════════════════════════════════════════════════
# Triage / Display / App Control Actions
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Move(Action):
    """Move the current image into the destination folder."""


@dataclass(frozen=True)
class ReRender(Action):
    """Redraw the current image (window resized or exposed)."""


@dataclass(frozen=True)
class Quit(Action):
    """Leave the main loop."""


@dataclass(frozen=True)
class Noop(Action):
    """Nothing to do."""


# ═══════════════════════════════════════════════════════════════════════════
# Effects
# ═══════════════════════════════════════════════════════════════════════════

class Effect:
    """Base class for side effects requested by the reducer."""


@dataclass(frozen=True)
class RenderRequest(Effect):
    path: str


@dataclass(frozen=True)
class EnsureDirectory(Effect):
    path: str


@dataclass(frozen=True)
class MoveFileRequest(Effect):
    src: str
    dst: str
