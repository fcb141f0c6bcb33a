"""Axis-aligned collider variants that answer pixel collision probes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pixelhitbox.api.shapes import CollisionShape
from pixelhitbox.geometry import PixelRect, Point2D
from pixelhitbox.raster.rect_rounding import round_hollow_rect

OUTLINE_MARGIN = 1


@dataclass(frozen=True, slots=True)
class Hitbox:
    """Axis-aligned box collider with a floating-point absolute position."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, rect: PixelRect) -> bool:
        return (
            self.x + self.width > rect.x
            and self.y + self.height > rect.y
            and self.x < rect.right
            and self.y < rect.bottom
        )

    def outline_bounds(self) -> PixelRect:
        return round_hollow_rect(self.x, self.y, self.width, self.height).inflate(OUTLINE_MARGIN)


@dataclass(frozen=True, slots=True)
class CircleCollider:
    """Filled-disk collider."""

    center_x: float
    center_y: float
    radius: float

    @property
    def center(self) -> Point2D:
        return Point2D(self.center_x, self.center_y)

    def collides(self, rect: PixelRect) -> bool:
        """Return whether the disk reaches strictly into ``rect``.

        A rect holding the centre always collides; otherwise the closest point
        of the rect must be strictly nearer than the radius.
        """
        cx = self.center_x
        cy = self.center_y
        if rect.x <= cx < rect.right and rect.y <= cy < rect.bottom:
            return True
        nearest_x = min(max(cx, rect.x), rect.right)
        nearest_y = min(max(cy, rect.y), rect.bottom)
        dx = nearest_x - cx
        dy = nearest_y - cy
        return dx * dx + dy * dy < self.radius * self.radius

    def outline_bounds(self) -> PixelRect:
        diameter = 2 * self.radius
        return round_hollow_rect(
            self.center_x - self.radius,
            self.center_y - self.radius,
            diameter,
            diameter,
        ).inflate(OUTLINE_MARGIN)


class ColliderList:
    """Composite collider: collides when any member does."""

    def __init__(self, colliders: Sequence[CollisionShape]) -> None:
        self._colliders = tuple(colliders)

    def collides(self, rect: PixelRect) -> bool:
        return any(collider.collides(rect) for collider in self._colliders)

    def outline_bounds(self) -> PixelRect:
        bounds = [collider.outline_bounds() for collider in self._colliders]
        if not bounds:
            return PixelRect(0, 0, 0, 0)
        left = min(b.x for b in bounds)
        top = min(b.y for b in bounds)
        right = max(b.right for b in bounds)
        bottom = max(b.bottom for b in bounds)
        return PixelRect(left, top, right - left, bottom - top)
