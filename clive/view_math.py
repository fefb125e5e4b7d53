"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations

from .types import Rect


def compute_fit_rect(src_w: int, src_h: int, dst_w: int, dst_h: int) -> Rect:
    """Place an image of ``src_w`` x ``src_h`` inside a ``dst_w`` x ``dst_h`` viewport.

    Images smaller than the viewport on both axes are shown at native size.
    Anything else is scaled to the viewport's full width (when its aspect
    ratio is wider than the viewport's) or full height (otherwise). The
    result is always centered and fully inside the viewport.

    Derived dimensions are truncated toward zero.

    Args:
        src_w: Image width in pixels.
        src_h: Image height in pixels.
        dst_w: Viewport width in pixels.
        dst_h: Viewport height in pixels.

    Returns:
        Destination rectangle in viewport coordinates.

    Raises:
        ValueError: If any dimension is not positive.
    """
    if min(src_w, src_h, dst_w, dst_h) <= 0:
        raise ValueError(
            f"dimensions must be positive: src={src_w}x{src_h} dst={dst_w}x{dst_h}")

    # both source dimensions smaller
    if src_w < dst_w and src_h < dst_h:
        return center_native(src_w, src_h, dst_w, dst_h)
    # source aspect ratio is wider
    if src_w / src_h > dst_w / dst_h:
        return fit_width(src_w, src_h, dst_w, dst_h)
    return fit_height(src_w, src_h, dst_w, dst_h)


def center_native(src_w: int, src_h: int, dst_w: int, dst_h: int) -> Rect:
    """Center the image at 1:1 scale."""
    x = int((dst_w - src_w) / 2)
    y = int((dst_h - src_h) / 2)
    return Rect(x, y, src_w, src_h)


def fit_width(src_w: int, src_h: int, dst_w: int, dst_h: int) -> Rect:
    """Scale to the full viewport width, centered vertically."""
    height = int(src_h / src_w * dst_w)
    y = int((dst_h - height) / 2)
    return Rect(0, y, dst_w, height)


def fit_height(src_w: int, src_h: int, dst_w: int, dst_h: int) -> Rect:
    """Scale to the full viewport height, centered horizontally."""
    width = int(src_w / src_h * dst_h)
    x = int((dst_w - width) / 2)
    return Rect(x, 0, width, dst_h)
