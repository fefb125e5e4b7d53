"""Renderer - window, textures and drawing on top of raylib.

Raylib redraws every frame and only pumps input inside ``EndDrawing``, so
the renderer keeps a retained frame. ``clear``/``draw`` build a pending
scene, ``present`` makes it the displayed scene, and ``frame`` blits the
displayed scene once per loop iteration. Nothing changes on screen until the
next successful ``present``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple
import os

from PIL import Image

from .rl_compat import (
    rl, RL_VERSION,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    init_window, load_image, load_image_from_png,
    is_texture_valid,
)
from .config import (
    BG_COLOR, MAX_IMAGE_DIMENSION, TARGET_FPS,
    WINDOW_FALLBACK_W, WINDOW_FALLBACK_H, WINDOW_TITLE,
)
from .errors import LoadError, RenderError
from .image_utils import decode_to_png, needs_pillow
from .logging import log
from .types import Rect, TextureInfo


@dataclass
class RaylibRenderer:
    """
    Rendering collaborator backed by a raylib window.

    Usage:
        renderer = RaylibRenderer()
        renderer.open()
        ti = renderer.load(path)
        renderer.clear()
        renderer.draw(ti, rect)
        renderer.present()
        while ...:
            renderer.frame()
        renderer.close()
    """

    _pending: List[Tuple[TextureInfo, Rect]] = field(default_factory=list)
    _displayed: List[Tuple[TextureInfo, Rect]] = field(default_factory=list)
    _to_unload: List[TextureInfo] = field(default_factory=list)
    _open: bool = False

    # ═══════════════════════════════════════════════════════════════════════
    # Window
    # ═══════════════════════════════════════════════════════════════════════

    def open(self, title: str = WINDOW_TITLE) -> None:
        """Create the resizable window, maximized to the current monitor."""
        rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE)
        init_window(WINDOW_FALLBACK_W, WINDOW_FALLBACK_H, title)
        if not rl.IsWindowReady():
            raise RuntimeError("failed to create window")
        self._open = True
        rl.MaximizeWindow()
        # Escape is handled as a regular key by the input mapper
        rl.SetExitKey(0)
        rl.SetTargetFPS(TARGET_FPS)
        log(f"[INIT] Window {rl.GetScreenWidth()}x{rl.GetScreenHeight()} ({RL_VERSION})")

    def close(self) -> None:
        """Unload all textures and close the window."""
        if not self._open:
            return
        for ti, _ in self._pending + self._displayed:
            self._to_unload.append(ti)
        self._pending = []
        self._displayed = []
        self._process_deferred_unloads()
        log("[CLEANUP] Closing window")
        rl.CloseWindow()
        self._open = False

    def viewport_size(self) -> Tuple[int, int]:
        """Current drawable size in pixels."""
        return rl.GetScreenWidth(), rl.GetScreenHeight()

    # ═══════════════════════════════════════════════════════════════════════
    # Textures
    # ═══════════════════════════════════════════════════════════════════════

    def load(self, path: str) -> TextureInfo:
        """Decode ``path`` and upload it as a texture.

        A path that is already on screen (or in the pending scene) gives back
        the same texture without decoding again.

        Raises:
            LoadError: If the file cannot be decoded or uploaded.
        """
        for ti, _ in self._displayed + self._pending:
            if ti.path == path and is_texture_valid(ti.tex):
                return ti

        self._process_deferred_unloads()
        name = os.path.basename(path)
        try:
            if needs_pillow(path):
                img = load_image_from_png(decode_to_png(path))
            else:
                img = load_image(path)
                if img.width <= 0 or img.height <= 0:
                    # e.g. progressive JPEG, which raylib's decoder rejects
                    rl.UnloadImage(img)
                    log(f"[LOAD][FALLBACK] {name}: raylib could not decode, using Pillow")
                    img = load_image_from_png(decode_to_png(path))
                elif img.width > MAX_IMAGE_DIMENSION or img.height > MAX_IMAGE_DIMENSION:
                    log(f"[LOAD][RESIZE] {name}: {img.width}x{img.height} via Pillow")
                    rl.UnloadImage(img)
                    img = load_image_from_png(decode_to_png(path))
        except (OSError, Image.DecompressionBombError) as e:
            raise LoadError(f"{e}") from e

        w, h = img.width, img.height
        if w <= 0 or h <= 0:
            raise LoadError(f"cannot decode {name}")

        tex = rl.LoadTextureFromImage(img)
        rl.UnloadImage(img)
        if not is_texture_valid(tex):
            raise LoadError(f"texture upload failed for {name}")
        rl.SetTextureFilter(tex, rl.TEXTURE_FILTER_BILINEAR)

        ti = TextureInfo(tex=tex, w=w, h=h, path=path)
        # Dropped on the next load unless it makes it into a presented frame
        self._to_unload.append(ti)
        return ti

    def _process_deferred_unloads(self) -> None:
        keep = {id(ti) for ti, _ in self._pending + self._displayed}
        while self._to_unload:
            ti = self._to_unload.pop()
            if id(ti) in keep or not is_texture_valid(ti.tex):
                continue
            rl.UnloadTexture(ti.tex)

    # ═══════════════════════════════════════════════════════════════════════
    # Drawing
    # ═══════════════════════════════════════════════════════════════════════

    def clear(self) -> None:
        """Start a new, empty pending scene."""
        self._pending = []

    def draw(self, ti: TextureInfo, dest: Rect) -> None:
        """Add ``ti`` to the pending scene at ``dest``.

        Raises:
            RenderError: If the texture is no longer valid.
        """
        if not is_texture_valid(ti.tex):
            raise RenderError(f"invalid texture for {os.path.basename(ti.path)}")
        self._pending.append((ti, dest))

    def present(self) -> None:
        """Make the pending scene the displayed one. It shows on the next frame."""
        replaced = self._displayed
        self._displayed = self._pending
        self._pending = []
        self._to_unload.extend(ti for ti, _ in replaced)
        self._process_deferred_unloads()

    def frame(self) -> None:
        """Draw the displayed scene. Also pumps raylib's input events."""
        rl.BeginDrawing()
        rl.ClearBackground(RL_Color(*BG_COLOR))
        white = RL_Color(255, 255, 255, 255)
        for ti, dest in self._displayed:
            rl.DrawTexturePro(
                ti.tex,
                RL_Rect(0, 0, ti.w, ti.h),
                RL_Rect(dest.x, dest.y, dest.width, dest.height),
                RL_V2(0, 0), 0.0, white
            )
        rl.EndDrawing()
