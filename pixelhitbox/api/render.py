"""Rendering contracts consumed by the outline core."""

from __future__ import annotations

from typing import Protocol

from pixelhitbox.api.shapes import CollisionShape
from pixelhitbox.geometry import Color, PixelRect, Point2D


class DrawTarget(Protocol):
    """Render target that accepts integer unit-aligned rectangles."""

    def draw_unit_rect(self, rect: PixelRect, color: Color) -> None:
        """Fill ``rect`` with ``color`` on the active render target."""


class FallbackRenderer(Protocol):
    """Host-engine default renderers used when pixel-exact outlines are off."""

    def hollow_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Draw the engine's approximate hollow rectangle."""

    def circle(self, center: Point2D, radius: float, color: Color, resolution: int) -> None:
        """Draw the engine's approximate circle outline."""

    def collider(self, shape: CollisionShape, color: Color) -> None:
        """Draw the engine's default debug rendering for a collider."""
