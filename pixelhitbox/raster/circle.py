"""Pixel-exact circle outlines for floating-point centres and radii.

Adapted from John Kennedy, "A Fast Bresenham Type Algorithm For Drawing
Circles". Instead of minimising error the walk selects exactly the pixels
whose unit square is crossed by the ideal circle, i.e. the pixels whose
nearest point lies strictly inside the circle and whose farthest point lies
strictly outside it.

Centres and radii are not integral, so the circle has no 8-fold pixel
symmetry. Each octant is walked independently from its own seed:
``flip_x``/``flip_y`` mirror the walk and ``interchange_xy`` swaps the axes.
With ``flip_x = flip_y = 1`` and no interchange the walk covers the arc from
angle 0 to pi/4 (screen coordinates, y down).
"""

from __future__ import annotations

import logging
import math

from pixelhitbox.api.render import DrawTarget
from pixelhitbox.geometry import Color, Point2D
from pixelhitbox.raster.spans import draw_span

logger = logging.getLogger(__name__)

OCTANTS: tuple[tuple[int, int, bool], ...] = (
    (1, 1, False),
    (1, -1, False),
    (-1, 1, False),
    (-1, -1, False),
    (1, 1, True),
    (1, -1, True),
    (-1, 1, True),
    (-1, -1, True),
)


def rasterize_circle(target: DrawTarget, center: Point2D, radius: float, color: Color) -> None:
    """Draw the ring of pixels crossed by the circle.

    Non-positive and non-finite radii draw nothing.
    """
    if not math.isfinite(radius) or radius <= 0.0:
        logger.debug("circle_skipped radius=%s", radius)
        return
    if not (math.isfinite(center.x) and math.isfinite(center.y)):
        logger.debug("circle_skipped center=%s", center)
        return
    for flip_x, flip_y, interchange_xy in OCTANTS:
        circle_octant(
            target,
            center,
            radius,
            color,
            flip_x=flip_x,
            flip_y=flip_y,
            interchange_xy=interchange_xy,
        )


def circle_octant(
    target: DrawTarget,
    center: Point2D,
    radius: float,
    color: Color,
    *,
    flip_x: int,
    flip_y: int,
    interchange_xy: bool,
) -> None:
    """Walk one octant and flush one span per pixel column.

    ``x`` and ``y`` are grid lines, not pixel indices. ``e`` is the signed
    squared distance of the grid corner ``(x, y)`` from the circle; ``yc`` and
    ``xc`` are its increments for the next step along each axis.
    """
    if interchange_xy:
        cx, cy = center.y, center.x
    else:
        cx, cy = center.x, center.y

    if flip_x > 0:
        x = math.ceil(cx + radius - 1)
        column_offset = 0
    else:
        x = math.floor(cx - radius + 1)
        column_offset = -1
    if flip_y > 0:
        y = math.floor(cy)
    else:
        y = math.ceil(cy)

    start_y = y
    e = (x - cx) * (x - cx) + (y - cy) * (y - cy) - radius * radius
    yc = flip_y * 2 * (y - cy) + 1
    xc = flip_x * -2 * (x - cx) + 1
    while flip_y * (y - cy) <= flip_x * (x - cx):
        e += yc
        y += flip_y
        yc += 2
        # Corner (x, y) is on or outside the circle: the column is finished.
        while e >= 0 and flip_y * (y - cy) <= flip_x * (x - cx):
            draw_span(target, x + column_offset, start_y, y, color, interchange_xy=interchange_xy)
            # The arc left through the column edge above the corner, so the
            # next column starts one row back. A corner hit steps diagonally.
            start_y = y if e == 0 else y - flip_y
            e += xc
            x -= flip_x
            xc += 2
    draw_span(target, x + column_offset, start_y, y, color, interchange_xy=interchange_xy)
