"""Image list state - paths, current index, destination folder."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class BrowserState:
    """Immutable browser state.

    ``index`` always addresses a valid entry of ``images`` while the list is
    non-empty. Once the list is empty the index is left as it was and is not
    used.
    """
    images: Tuple[str, ...] = field(default_factory=tuple)
    index: int = 0
    dest_folder: str = ""

    @property
    def count(self) -> int:
        """Total number of images."""
        return len(self.images)

    @property
    def is_empty(self) -> bool:
        return not self.images

    @property
    def current_path(self) -> Optional[str]:
        """Get current image path or None."""
        if 0 <= self.index < len(self.images):
            return self.images[self.index]
        return None

    def with_index(self, index: int) -> BrowserState:
        return replace(self, index=index)

    def without_current(self) -> BrowserState:
        """Drop the current entry, keeping the index on a valid element."""
        images = self.images[:self.index] + self.images[self.index + 1:]
        index = self.index
        if images and index >= len(images):
            index -= 1
        return replace(self, images=images, index=index)
