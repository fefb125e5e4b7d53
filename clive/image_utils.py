"""Image utilities - listing and decoding helpers."""

from __future__ import annotations
import glob
import io
import os
from typing import List

from PIL import Image, ImageOps

from .config import IMG_EXTS, MAX_IMAGE_DIMENSION, RAYLIB_NATIVE_EXTS

# EXIF "Orientation"
ORIENTATION_TAG = 0x0112


def is_supported_image(filepath: str) -> bool:
    """Check if file has a supported image extension (case-insensitive)."""
    ext = os.path.splitext(filepath)[1].lower()
    return ext in IMG_EXTS


def find_images(pattern: str) -> List[str]:
    """List supported image files matching a glob pattern, sorted by path.

    If ``pattern`` names an existing directory, the directory's entries are
    listed instead.

    Args:
        pattern: Glob pattern or directory path.

    Returns:
        List of matching image paths.
    """
    if os.path.isdir(pattern):
        pattern = os.path.join(glob.escape(pattern), "*")

    result = []
    for path in sorted(glob.glob(pattern)):
        if is_supported_image(path) and not os.path.isdir(path):
            result.append(path)
    return result


def exif_orientation(filepath: str) -> int:
    """EXIF orientation of ``filepath``, 1 (upright) when absent or unreadable."""
    try:
        with Image.open(filepath) as img:
            return int(img.getexif().get(ORIENTATION_TAG, 1))
    except (OSError, ValueError):
        return 1


def needs_pillow(filepath: str) -> bool:
    """True when raylib cannot show ``filepath`` correctly by itself.

    That is every non-native format, plus native files carrying an EXIF
    rotation, which raylib ignores.
    """
    ext = os.path.splitext(filepath)[1].lower()
    if ext not in RAYLIB_NATIVE_EXTS:
        return True
    return ext in (".jpg", ".jpeg") and exif_orientation(filepath) != 1


def decode_to_png(filepath: str, max_dim: int = MAX_IMAGE_DIMENSION) -> bytes:
    """Decode any Pillow-readable image into PNG bytes raylib can upload.

    EXIF orientation is applied and images larger than ``max_dim`` on either
    side are downscaled, keeping the aspect ratio.

    Raises:
        OSError: If Pillow cannot open or decode the file.
    """
    with Image.open(filepath) as img:
        img = ImageOps.exif_transpose(img)
        if img.mode not in ("RGB", "RGBA"):
            img = img.convert("RGBA")
        if img.width > max_dim or img.height > max_dim:
            img.thumbnail((max_dim, max_dim), Image.LANCZOS)
        buf = io.BytesIO()
        img.save(buf, format="PNG", compress_level=1)
    return buf.getvalue()
