"""Single-span draw primitive; the only code that touches a draw target."""

from __future__ import annotations

from pixelhitbox.api.render import DrawTarget
from pixelhitbox.geometry import Color, PixelRect


def span_rect(x: int, y0: int, y1: int, *, interchange_xy: bool = False) -> PixelRect:
    """Return the footprint of a 1-pixel-wide run.

    The run covers column ``x``, rows ``[y0, y1)``. A reversed run
    (``y1 < y0``) covers ``[y1, y0)``, like a negative-height sprite quad.
    With ``interchange_xy`` the run is transposed: row ``x``, columns
    ``[y0, y1)``.
    """
    start = min(y0, y1)
    length = abs(y1 - y0)
    if interchange_xy:
        return PixelRect(start, x, length, 1)
    return PixelRect(x, start, 1, length)


def draw_span(
    target: DrawTarget,
    x: int,
    y0: int,
    y1: int,
    color: Color,
    *,
    interchange_xy: bool = False,
) -> None:
    """Emit one draw command for a vertical (or transposed) pixel run."""
    if y0 == y1:
        return
    target.draw_unit_rect(span_rect(x, y0, y1, interchange_xy=interchange_xy), color)


def draw_pixel(
    target: DrawTarget,
    x: int,
    y: int,
    color: Color,
    *,
    interchange_xy: bool = False,
) -> None:
    """Emit one 1x1 draw command."""
    if interchange_xy:
        x, y = y, x
    target.draw_unit_rect(PixelRect(x, y, 1, 1), color)
