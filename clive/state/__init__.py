"""State management submodules for clive."""

from .images import BrowserState
from .input import ModifierState

__all__ = [
    'BrowserState',
    'ModifierState',
]
