"""Pixel-space and continuous-space geometry primitives."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

Color: TypeAlias = tuple[int, int, int, int]

RED: Color = (255, 0, 0, 255)
GREEN: Color = (0, 255, 0, 255)
BLUE: Color = (0, 0, 255, 255)
WHITE: Color = (255, 255, 255, 255)
TRANSPARENT: Color = (0, 0, 0, 0)


@dataclass(frozen=True, slots=True)
class Point2D:
    """Continuous-space coordinate."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class PixelRect:
    """Integer footprint in pixel space.

    Used both as a draw command and as a collision probe. The covered area is
    the half-open box ``[x, x + width) x [y, y + height)``.
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def overlaps(self, other: PixelRect) -> bool:
        """Return whether the interiors of both rectangles intersect."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def inflate(self, margin: int) -> PixelRect:
        """Grow the rectangle by ``margin`` pixels on every side."""
        return PixelRect(
            self.x - margin,
            self.y - margin,
            self.width + 2 * margin,
            self.height + 2 * margin,
        )

    def pixels(self) -> Iterator[tuple[int, int]]:
        """Iterate covered pixel coordinates in row-major order."""
        for py in range(self.y, self.bottom):
            for px in range(self.x, self.right):
                yield px, py


@dataclass(frozen=True, slots=True)
class CircleSpec:
    """Per-call circle outline request."""

    center: Point2D
    radius: float


@dataclass(frozen=True, slots=True)
class RectSpec:
    """Per-call hollow rectangle request."""

    x: float
    y: float
    width: float
    height: float
