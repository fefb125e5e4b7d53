"""Application - main loop orchestrator.

The Application class runs the single-threaded loop that coordinates:
- Input polling (raw events from the event source)
- Input mapping (raw event -> action, tracking held modifiers)
- Browser dispatch (action -> new state + effects)
- Redrawing the retained frame
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence
import signal
import traceback

from .actions import Noop, Quit
from .browser import Browser
from .cli import parse_args
from .input_mapper import map_event
from .logging import log, log_error, increment_frame, get_frame
from .state import ModifierState
from .types import RawEvent


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application(browser, renderer, input_handler)
        exit_code = app.run()
    """

    browser: Browser
    renderer: Any
    input_handler: Any
    modifiers: ModifierState = field(default_factory=ModifierState)
    running: bool = False

    def run(self) -> int:
        """Run the main loop until quit. Returns the process exit code."""
        self.running = True
        exit_code = 0
        log("[APP] Starting main loop")

        try:
            self.browser.render()
            while self.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
            exit_code = 1
        finally:
            self._cleanup()
        return exit_code

    def _frame(self) -> None:
        """Execute a single frame."""
        for event in self.input_handler.poll():
            self.handle_event(event)
            if not self.running:
                return

        self.renderer.frame()
        increment_frame()

    def handle_event(self, event: RawEvent) -> None:
        """Map one raw event and run the resulting action to completion."""
        self.modifiers, action = map_event(self.modifiers, event)

        if isinstance(action, Quit):
            log("[APP] Quit received")
            self.running = False
            return

        if isinstance(action, Noop):
            return

        result = self.browser.dispatch(action)
        if not result.ok:
            tag = type(action).__name__.upper()
            log_error(tag, result.error)

    def _cleanup(self) -> None:
        log(f"[EXIT] frames={get_frame()} remaining={len(self.browser.images)}")
        self.renderer.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    log("[MAIN] Starting application")
    args = parse_args(argv)
    log(f"[DIR] pattern={args.pattern!r} files={len(args.files)} dest={args.dest_folder!r}")
    if not args.files:
        log("[DIR] No images found")

    # raylib is only needed once there is a window to open
    from .renderer import RaylibRenderer
    from .input_handler import InputHandler

    renderer = RaylibRenderer()
    try:
        log("[INIT] Initializing window")
        renderer.open()
    except RuntimeError as e:
        log(f"[INIT][CRITICAL] Failed to initialize window: {e!r}")
        return 1

    input_handler = InputHandler()
    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, lambda *_: input_handler.request_quit())

    app = Application(
        browser=Browser(args.files, args.dest_folder, renderer),
        renderer=renderer,
        input_handler=input_handler,
    )
    return app.run()
