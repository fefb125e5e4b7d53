"""Input Handler - turns raylib's polled input into raw events.

Raylib exposes input as per-frame state rather than an event queue. The
handler compares modifier keys and window state with the previous poll and
drains the key-press queue to produce the raw events the input mapper
understands. Modifier changes are reported before the presses of the same
frame, so a key pressed right after shift was let go gets the small step.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Set

from .rl_compat import rl
from .config import SHIFT_KEYS
from .types import (
    RawEvent, KeyDown, KeyUp,
    WindowClosed, QuitRequested, WindowResized, WindowExposed,
)


@dataclass
class InputHandler:
    """Event source: one ``poll`` per loop iteration."""

    # Keys tracked by held state rather than through the press queue
    modifier_keys: FrozenSet[int] = SHIFT_KEYS

    _quit_requested: bool = False
    _was_minimized: bool = False
    _last_size: Optional[tuple] = None
    _held: Set[int] = field(default_factory=set)

    def request_quit(self) -> None:
        """Ask for a QuitRequested event on the next poll (signal handlers)."""
        self._quit_requested = True

    def poll(self) -> List[RawEvent]:
        """Drain everything that happened since the previous frame."""
        events: List[RawEvent] = []

        if self._quit_requested:
            self._quit_requested = False
            events.append(QuitRequested())

        if rl.WindowShouldClose():
            events.append(WindowClosed())

        minimized = bool(rl.IsWindowMinimized())
        if self._was_minimized and not minimized:
            events.append(WindowExposed())
        self._was_minimized = minimized

        size = (rl.GetScreenWidth(), rl.GetScreenHeight())
        if rl.IsWindowResized() or (self._last_size is not None and size != self._last_size):
            events.append(WindowResized(width=size[0], height=size[1]))
        self._last_size = size

        for key in sorted(self.modifier_keys):
            down = bool(rl.IsKeyDown(key))
            if down and key not in self._held:
                self._held.add(key)
                events.append(KeyDown(key=key))
            elif not down and key in self._held:
                self._held.discard(key)
                events.append(KeyUp(key=key))

        # Remaining presses in the order they happened
        while True:
            key = rl.GetKeyPressed()
            if not key:
                break
            if key not in self.modifier_keys:
                events.append(KeyDown(key=key))

        return events
