import os

from clive.app import Application
from clive.browser import Browser
from clive.config import KEY_LEFT_SHIFT
from clive.types import KeyDown, KeyUp, WindowClosed, WindowResized

from tests.conftest import DummyFilesystem, DummyRenderer

KEY_RIGHT = 262
KEY_LEFT = 263
KEY_END = 269
KEY_M = 77


class ScriptedEvents:
    """Event source that replays one batch of events per poll, then closes."""

    def __init__(self, *batches):
        self.batches = list(batches)
        self.polls = 0

    def poll(self):
        self.polls += 1
        if self.batches:
            return self.batches.pop(0)
        return [WindowClosed()]


def make_app(images, *batches, renderer=None, filesystem=None):
    renderer = renderer or DummyRenderer()
    filesystem = filesystem or DummyFilesystem()
    browser = Browser(images, "keep", renderer, filesystem)
    return Application(browser=browser, renderer=renderer,
                       input_handler=ScriptedEvents(*batches))


def test_run_renders_first_image_and_quits():
    app = make_app(["a.jpg", "b.jpg"])

    assert app.run() == 0
    assert app.renderer.loaded == ["a.jpg"]
    assert app.renderer.closed
    assert not app.running


def test_events_drive_navigation_with_shift_steps():
    images = [f"{i:02d}.jpg" for i in range(25)]
    app = make_app(
        images,
        [KeyDown(KEY_RIGHT)],
        [KeyDown(KEY_LEFT_SHIFT), KeyDown(KEY_RIGHT)],
        [KeyDown(KEY_RIGHT), KeyUp(KEY_LEFT_SHIFT), KeyDown(KEY_LEFT)],
    )

    app.run()

    assert app.browser.index == 20
    assert app.renderer.loaded == ["00.jpg", "01.jpg", "11.jpg", "21.jpg", "20.jpg"]
    assert app.renderer.frames == 3


def test_quit_stops_processing_remaining_events():
    app = make_app(["a.jpg", "b.jpg"], [WindowClosed(), KeyDown(KEY_RIGHT)])

    app.run()

    assert app.browser.index == 0
    assert app.input_handler.polls == 1


def test_resize_rerenders():
    app = make_app(["a.jpg"], [WindowResized(640, 480)])
    app.run()
    assert app.renderer.loaded == ["a.jpg", "a.jpg"]


def test_failed_move_is_logged_and_loop_continues(captured_log):
    filesystem = DummyFilesystem(mkdir_error=PermissionError("read-only"))
    app = make_app(["a.jpg", "b.jpg"], [KeyDown(KEY_M)], [KeyDown(KEY_END)],
                   filesystem=filesystem)

    assert app.run() == 0
    assert app.browser.images == ("a.jpg", "b.jpg")
    assert app.browser.index == 1
    assert "[MOVE][ERR]" in captured_log.getvalue()


def test_triage_via_keys():
    filesystem = DummyFilesystem()
    app = make_app(["a.jpg", "b.jpg", "c.jpg"],
                   [KeyDown(KEY_RIGHT), KeyDown(KEY_M)],
                   filesystem=filesystem)

    app.run()

    assert filesystem.moves == [("b.jpg", os.path.join("keep", "b.jpg"))]
    assert app.browser.images == ("a.jpg", "c.jpg")
    assert app.browser.index == 1


def test_unexpected_error_is_reported_and_cleans_up(captured_log):
    class Exploding(DummyRenderer):
        def frame(self):
            raise RuntimeError("gpu lost")

    app = make_app(["a.jpg"], [], renderer=Exploding())

    assert app.run() == 1
    assert app.renderer.closed
    assert "[APP][CRITICAL]" in captured_log.getvalue()
