"""Exception types raised by the browser and its collaborators."""

from __future__ import annotations


class CliveError(Exception):
    """Base class for all clive errors."""


class MoveError(CliveError):
    """A triage move could not be carried out."""


class LoadError(CliveError):
    """An image could not be decoded or uploaded as a texture."""


class RenderError(CliveError):
    """Drawing a loaded image to the canvas failed."""
