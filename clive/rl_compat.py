"""Raylib binding shim.

clive is written against python-raylib (``raylib``, cffi). raylibpy is used
instead when it is installed. The two differ in how structs are built and
whether C strings must be bytes; everything clive needs from that
difference lives here.
"""

from __future__ import annotations
from typing import Any

try:
    import raylibpy as rl
    RL_VERSION = "raylibpy"
except ImportError:
    import raylib as rl
    RL_VERSION = "python-raylib"


def _struct(name: str, *values: float) -> Any:
    """Build a raylib struct by value (``Rectangle``, ``Vector2``, ``Color``)."""
    ffi = getattr(rl, "ffi", None)
    if ffi is None:
        return getattr(rl, name)(*values)
    return ffi.new(f"{name} *", list(values))[0]


def make_rect(x: float, y: float, w: float, h: float) -> Any:
    return _struct("Rectangle", float(x), float(y), float(w), float(h))


def make_vec2(x: float, y: float) -> Any:
    return _struct("Vector2", float(x), float(y))


def make_color(r: int, g: int, b: int, a: int = 255) -> Any:
    return _struct("Color", int(r), int(g), int(b), int(a))


def _c_str(text: str) -> Any:
    """python-raylib wants ``bytes`` for ``const char *``; raylibpy takes ``str``."""
    return text.encode("utf-8") if hasattr(rl, "ffi") else text


def init_window(width: int, height: int, title: str) -> None:
    rl.InitWindow(width, height, _c_str(title))


def load_image(path: str) -> Any:
    """Decode a file with raylib's own loaders. Failure gives a 0x0 image."""
    return rl.LoadImage(_c_str(path))


def load_image_from_png(data: bytes) -> Any:
    """Decode in-memory PNG bytes."""
    return rl.LoadImageFromMemory(_c_str(".png"), data, len(data))


def is_texture_valid(tex: Any) -> bool:
    """A texture is usable once the GPU gave it a non-zero id."""
    return (getattr(tex, "id", 0) or 0) > 0


__all__ = [
    "rl",
    "RL_VERSION",
    "make_rect",
    "make_vec2",
    "make_color",
    "init_window",
    "load_image",
    "load_image_from_png",
    "is_texture_valid",
]
