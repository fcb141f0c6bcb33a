"""Collision-shape capability contract."""

from __future__ import annotations

from typing import Protocol

from pixelhitbox.geometry import PixelRect


class CollisionShape(Protocol):
    """Anything that can answer pixel-rectangle collision queries."""

    def collides(self, rect: PixelRect) -> bool:
        """Return whether ``rect`` overlaps the shape."""

    def outline_bounds(self) -> PixelRect:
        """Return integer bounds inflated by the 1-pixel tracing margin."""
