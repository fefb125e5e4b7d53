"""Input mapper - turns raw events into actions.

``map_event`` is a pure function of the held modifiers and one raw event.
The modifier state is passed in and handed back rather than kept anywhere,
so callers own it and tests can drive the mapping without a window.
"""

from __future__ import annotations
from typing import Tuple

from .actions import Action, First, Last, Move, Next, Noop, Prev, Quit, ReRender
from .config import (
    SHIFT_KEYS,
    KEYS_NEXT, KEYS_PREV, KEYS_FIRST, KEYS_LAST, KEYS_MOVE, KEYS_QUIT,
)
from .state import ModifierState
from .types import (
    RawEvent, KeyDown, KeyUp,
    WindowClosed, QuitRequested, WindowResized, WindowExposed,
)


def map_event(mods: ModifierState, event: RawEvent) -> Tuple[ModifierState, Action]:
    """Map one raw event to exactly one action.

    Returns the (possibly updated) modifier state and the action. Unknown
    events map to ``Noop``.
    """
    if isinstance(event, (WindowClosed, QuitRequested)):
        return mods, Quit()

    if isinstance(event, (WindowResized, WindowExposed)):
        return mods, ReRender()

    if isinstance(event, (KeyDown, KeyUp)) and event.key in SHIFT_KEYS:
        return mods.with_key(event.key, held=isinstance(event, KeyDown)), Noop()

    if isinstance(event, KeyDown):
        return mods, _key_action(mods, event.key)

    return mods, Noop()


def _key_action(mods: ModifierState, key: int) -> Action:
    if key in KEYS_NEXT:
        return Next(step=mods.step)
    if key in KEYS_PREV:
        return Prev(step=mods.step)
    if key in KEYS_FIRST:
        return First()
    if key in KEYS_LAST:
        return Last()
    if key in KEYS_MOVE:
        return Move()
    if key in KEYS_QUIT:
        return Quit()
    return Noop()
