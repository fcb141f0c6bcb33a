"""Snap floating-point hollow rectangles onto covering pixel footprints."""

from __future__ import annotations

import math

from pixelhitbox.api.render import DrawTarget
from pixelhitbox.geometry import Color, PixelRect
from pixelhitbox.raster.spans import draw_span


def round_hollow_rect(x: float, y: float, width: float, height: float) -> PixelRect:
    """Return the smallest pixel-aligned rect covering the continuous request.

    The origin is floored onto the pixel that holds the top-left point, then
    the size is recomputed from the requested right/bottom edge and rounded
    up, so the footprint never under-covers and over-covers by less than one
    pixel per axis.
    """
    out_x = math.floor(x)
    out_y = math.floor(y)
    out_w = math.ceil(width + x - out_x)
    out_h = math.ceil(height + y - out_y)
    return PixelRect(out_x, out_y, out_w, out_h)


def draw_hollow_rect(target: DrawTarget, rect: PixelRect, color: Color) -> None:
    """Draw the 1-pixel border of ``rect`` with at most four spans."""
    if rect.is_empty:
        return
    draw_span(target, rect.y, rect.x, rect.right, color, interchange_xy=True)
    if rect.height > 1:
        draw_span(target, rect.bottom - 1, rect.x, rect.right, color, interchange_xy=True)
    if rect.height > 2:
        draw_span(target, rect.x, rect.y + 1, rect.bottom - 1, color)
        if rect.width > 1:
            draw_span(target, rect.right - 1, rect.y + 1, rect.bottom - 1, color)
