"""Discover a shape's outline through pixel-sized collision probes."""

from __future__ import annotations

import logging

from pixelhitbox.api.render import DrawTarget
from pixelhitbox.api.shapes import CollisionShape
from pixelhitbox.geometry import Color, PixelRect
from pixelhitbox.raster.spans import draw_pixel

logger = logging.getLogger(__name__)


def _first_hit(shape: CollisionShape, probes: list[PixelRect]) -> PixelRect | None:
    for probe in probes:
        if shape.collides(probe):
            return probe
    return None


def traced_pixels(shape: CollisionShape, bounds: PixelRect) -> list[PixelRect]:
    """Return the outline probes that hit ``shape``, in draw order.

    For every column of ``bounds`` the first colliding pixel from the top and
    from the bottom; then for every row the first colliding pixel from the
    left and from the right. The right-to-left row sweep stops before the
    leftmost column. ``bounds`` must already include the 1-pixel margin.
    """
    hits: list[PixelRect] = []
    if bounds.is_empty:
        return hits
    rows = range(bounds.y, bounds.bottom)
    columns = range(bounds.x, bounds.right)
    for x in columns:
        down = [PixelRect(x, y, 1, 1) for y in rows]
        for probes in (down, down[::-1]):
            hit = _first_hit(shape, probes)
            if hit is not None:
                hits.append(hit)
    for y in rows:
        across = [PixelRect(x, y, 1, 1) for x in columns]
        for probes in (across, across[:0:-1]):
            hit = _first_hit(shape, probes)
            if hit is not None:
                hits.append(hit)
    return hits


def trace_boundary(target: DrawTarget, shape: CollisionShape, bounds: PixelRect, color: Color) -> None:
    """Draw the silhouette of ``shape`` inside ``bounds`` one pixel at a time."""
    hits = traced_pixels(shape, bounds)
    logger.debug("boundary_traced bounds=%s hits=%d", bounds, len(hits))
    for hit in hits:
        draw_pixel(target, hit.x, hit.y, color)
