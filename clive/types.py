"""Core data types for clive."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Rect:
    """Destination rectangle in viewport coordinates."""
    x: int
    y: int
    width: int
    height: int


@dataclass
class TextureInfo:
    """Information about a loaded texture."""
    tex: Any  # rl.Texture2D - using Any to avoid raylib import
    w: int
    h: int
    path: str = ""


@dataclass(frozen=True)
class Result:
    """Outcome of a browser operation."""
    ok: bool = True
    error: Optional[str] = None

    @classmethod
    def success(cls) -> Result:
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> Result:
        return cls(ok=False, error=error)


# ═══════════════════════════════════════════════════════════════════════════
# Raw input events
# ═══════════════════════════════════════════════════════════════════════════

class RawEvent:
    """Base class for events delivered by the event source."""


@dataclass(frozen=True)
class KeyDown(RawEvent):
    key: int


@dataclass(frozen=True)
class KeyUp(RawEvent):
    key: int


@dataclass(frozen=True)
class WindowClosed(RawEvent):
    """The window's close button was used."""


@dataclass(frozen=True)
class QuitRequested(RawEvent):
    """The application was asked to quit (signal, session end)."""


@dataclass(frozen=True)
class WindowResized(RawEvent):
    width: int
    height: int


@dataclass(frozen=True)
class WindowExposed(RawEvent):
    """The window became visible again and needs repainting."""
