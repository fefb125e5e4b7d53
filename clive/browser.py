"""Browser - navigation and triage state machine.

``reduce`` is the whole state machine: it maps a state and an action to the
next state plus the effects that must happen for that transition. It never
performs I/O. ``Browser`` owns the current state and carries effects out
against a renderer and a filesystem collaborator.
"""

from __future__ import annotations
import os
from typing import TYPE_CHECKING, Any, List, Sequence, Tuple

from . import fs
from .actions import (
    Action, Effect,
    Next, Prev, First, Last, Move, ReRender, Quit, Noop,
    RenderRequest, EnsureDirectory, MoveFileRequest,
)
from .errors import LoadError, MoveError, RenderError
from .logging import log, log_error
from .state import BrowserState
from .types import Result
from .view_math import compute_fit_rect

if TYPE_CHECKING:
    from .renderer import RaylibRenderer


def reduce(state: BrowserState, action: Action) -> Tuple[BrowserState, List[Effect]]:
    """Compute the transition for ``action``.

    Every operation on an empty list leaves the state alone and asks for
    nothing. Navigation never wraps and always asks for a redraw, even when
    the index did not change.

    Raises:
        MoveError: If the current path has no file name to move it under.
        ValueError: If a navigation step is smaller than one.
        TypeError: If ``action`` is not a known action.
    """
    if isinstance(action, (Quit, Noop)):
        return state, []

    if isinstance(action, (Next, Prev)) and action.step < 1:
        raise ValueError(f"step must be at least 1, got {action.step}")

    if state.is_empty:
        if isinstance(action, Last):
            return state.with_index(0), []
        if isinstance(action, (Next, Prev, First, Move, ReRender)):
            return state, []
        raise TypeError(f"unknown action: {action!r}")

    if isinstance(action, Next):
        if state.index + action.step <= state.count - 1:
            state = state.with_index(state.index + action.step)
    elif isinstance(action, Prev):
        if state.index >= action.step:
            state = state.with_index(state.index - action.step)
        else:
            state = state.with_index(0)
    elif isinstance(action, First):
        state = state.with_index(0)
    elif isinstance(action, Last):
        state = state.with_index(state.count - 1)
    elif isinstance(action, Move):
        return _reduce_move(state)
    elif not isinstance(action, ReRender):
        raise TypeError(f"unknown action: {action!r}")

    return state, render_effects(state)


def _reduce_move(state: BrowserState) -> Tuple[BrowserState, List[Effect]]:
    src = state.current_path
    name = fs.file_name(src)
    if not name:
        raise MoveError(f"failed to read filename for current image: {src!r}")

    dst = os.path.join(state.dest_folder, name)
    new_state = state.without_current()
    effects: List[Effect] = [
        EnsureDirectory(state.dest_folder),
        MoveFileRequest(src, dst),
    ]
    return new_state, effects + render_effects(new_state)


def render_effects(state: BrowserState) -> List[Effect]:
    """A redraw request for the current image, or nothing for an empty list."""
    path = state.current_path
    if path is None:
        return []
    return [RenderRequest(path)]


class Browser:
    """Holds the browser state and executes the effects of each transition.

    Args:
        images: Image paths in display order.
        dest_folder: Folder that triaged images are moved into.
        renderer: Object with ``load``, ``viewport_size``, ``clear``, ``draw``
            and ``present``.
        filesystem: Object with ``ensure_directory`` and ``move_file``.
            Defaults to :mod:`clive.fs`.
    """

    def __init__(self, images: Sequence[str], dest_folder: str,
                 renderer: "RaylibRenderer", filesystem: Any = fs):
        self.state = BrowserState(images=tuple(images), index=0,
                                  dest_folder=dest_folder)
        self.renderer = renderer
        self.filesystem = filesystem

    @property
    def images(self) -> Tuple[str, ...]:
        return self.state.images

    @property
    def index(self) -> int:
        return self.state.index

    def dispatch(self, action: Action) -> Result:
        """Apply ``action`` and carry out its effects.

        Filesystem effects run before the new state is committed: if any of
        them fails the state stays as it was and a failed result is returned.
        Render problems are logged and never fail the operation.
        """
        try:
            new_state, effects = reduce(self.state, action)
        except MoveError as e:
            return Result.failure(str(e))

        renders: List[RenderRequest] = []
        for effect in effects:
            if isinstance(effect, RenderRequest):
                renders.append(effect)
            elif isinstance(effect, EnsureDirectory):
                try:
                    self.filesystem.ensure_directory(effect.path)
                except OSError as e:
                    return Result.failure(
                        f"failed to create destination folder {effect.path!r}: {e}")
            elif isinstance(effect, MoveFileRequest):
                try:
                    self.filesystem.move_file(effect.src, effect.dst)
                except OSError as e:
                    return Result.failure(
                        f"failed to move {effect.src!r} to {effect.dst!r}: {e}")
                log(f"[MOVE] {effect.src} -> {effect.dst} ({new_state.count} left)")

        self.state = new_state
        for request in renders:
            self._render(request.path)
        return Result.success()

    def render(self) -> Result:
        """Redraw the current image."""
        return self.dispatch(ReRender())

    def _render(self, path: str) -> None:
        try:
            ti = self.renderer.load(path)
        except LoadError as e:
            log_error("RENDER", f"failed to load {os.path.basename(path)}: {e}")
            return

        vw, vh = self.renderer.viewport_size()
        if vw <= 0 or vh <= 0:
            log(f"[RENDER] Viewport is {vw}x{vh}, nothing to draw")
            return

        dest = compute_fit_rect(ti.w, ti.h, vw, vh)
        self.renderer.clear()
        try:
            self.renderer.draw(ti, dest)
        except RenderError as e:
            log_error("RENDER", f"failed to copy image to screen: {e}")
            return
        self.renderer.present()
