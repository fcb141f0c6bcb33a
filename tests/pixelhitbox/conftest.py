from __future__ import annotations

import math
from dataclasses import dataclass, field

from pixelhitbox.geometry import Color, PixelRect, Point2D


def square_crosses_circle(px: int, py: int, cx: float, cy: float, radius: float) -> bool:
    """Independent check: does the open unit square at (px, py) meet the circle?"""
    near_x = min(max(cx, px), px + 1) - cx
    near_y = min(max(cy, py), py + 1) - cy
    far_x = max(abs(px - cx), abs(px + 1 - cx))
    far_y = max(abs(py - cy), abs(py + 1 - cy))
    r2 = radius * radius
    return near_x * near_x + near_y * near_y < r2 < far_x * far_x + far_y * far_y


def crossed_pixels(cx: float, cy: float, radius: float) -> set[tuple[int, int]]:
    reach = int(math.ceil(radius)) + 2
    x0 = int(math.floor(cx)) - reach
    y0 = int(math.floor(cy)) - reach
    return {
        (px, py)
        for px in range(x0, x0 + 2 * reach + 1)
        for py in range(y0, y0 + 2 * reach + 1)
        if square_crosses_circle(px, py, cx, cy, radius)
    }


def border_pixels(rect: PixelRect) -> set[tuple[int, int]]:
    return {
        (px, py)
        for px, py in rect.pixels()
        if px in (rect.x, rect.right - 1) or py in (rect.y, rect.bottom - 1)
    }


@dataclass
class FakeFallback:
    calls: list[tuple[str, tuple]] = field(default_factory=list)

    def hollow_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        self.calls.append(("hollow_rect", (x, y, width, height, color)))

    def circle(self, center: Point2D, radius: float, color: Color, resolution: int) -> None:
        self.calls.append(("circle", (center, radius, color, resolution)))

    def collider(self, shape: object, color: Color) -> None:
        self.calls.append(("collider", (shape, color)))


class CountingShape:
    """Wraps a shape and counts collision probes."""

    def __init__(self, inner: object | None = None) -> None:
        self.inner = inner
        self.probes: list[PixelRect] = []

    def collides(self, rect: PixelRect) -> bool:
        self.probes.append(rect)
        if self.inner is None:
            return False
        return self.inner.collides(rect)  # type: ignore[attr-defined]

    def outline_bounds(self) -> PixelRect:
        if self.inner is None:
            return PixelRect(0, 0, 0, 0)
        return self.inner.outline_bounds()  # type: ignore[attr-defined]
