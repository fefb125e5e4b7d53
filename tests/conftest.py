import importlib
import io

import pytest

from clive.errors import LoadError, RenderError
from clive.logging import Logger, set_logger
from clive.types import TextureInfo


def import_raylib_module(name):
    """Import a clive module that binds raylib, skipping when raylib cannot load."""
    try:
        return importlib.import_module(name)
    except (ImportError, OSError) as e:
        pytest.skip(f"raylib unavailable: {e}", allow_module_level=True)


@pytest.fixture(autouse=True)
def captured_log():
    """Route the global logger into a buffer for the duration of a test."""
    buf = io.StringIO()
    set_logger(Logger(stream=buf))
    yield buf
    set_logger(None)


class DummyRenderer:
    """Records the calls the browser makes against the rendering collaborator."""

    def __init__(self, viewport=(1000, 1000), image_size=(800, 600),
                 broken=(), fail_draw=False):
        self.viewport = viewport
        self.image_size = image_size
        self.broken = set(broken)
        self.fail_draw = fail_draw
        self.calls = []
        self.frames = 0
        self.closed = False

    def load(self, path):
        self.calls.append(("load", path))
        if path in self.broken:
            raise LoadError("corrupt data")
        w, h = self.image_size
        return TextureInfo(tex=object(), w=w, h=h, path=path)

    def viewport_size(self):
        return self.viewport

    def clear(self):
        self.calls.append(("clear",))

    def draw(self, ti, rect):
        self.calls.append(("draw", ti.path, rect))
        if self.fail_draw:
            raise RenderError("copy failed")

    def present(self):
        self.calls.append(("present",))

    def frame(self):
        self.frames += 1

    def close(self):
        self.closed = True

    @property
    def loaded(self):
        return [c[1] for c in self.calls if c[0] == "load"]

    @property
    def presented(self):
        return sum(1 for c in self.calls if c[0] == "present")


class DummyFilesystem:
    def __init__(self, mkdir_error=None, move_error=None):
        self.mkdir_error = mkdir_error
        self.move_error = move_error
        self.dirs = []
        self.moves = []

    def ensure_directory(self, path):
        if self.mkdir_error:
            raise self.mkdir_error
        self.dirs.append(path)

    def move_file(self, src, dst):
        if self.move_error:
            raise self.move_error
        self.moves.append((src, dst))


@pytest.fixture
def renderer():
    return DummyRenderer()


@pytest.fixture
def filesystem():
    return DummyFilesystem()
