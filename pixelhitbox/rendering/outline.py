"""Render entry points and the config-driven strategy selection."""

from __future__ import annotations

import logging

from pixelhitbox.api.render import DrawTarget, FallbackRenderer
from pixelhitbox.api.shapes import CollisionShape
from pixelhitbox.geometry import CircleSpec, Color, PixelRect, Point2D, RectSpec
from pixelhitbox.raster.boundary import trace_boundary
from pixelhitbox.raster.circle import rasterize_circle
from pixelhitbox.raster.rect_rounding import draw_hollow_rect, round_hollow_rect
from pixelhitbox.runtime.config import OutlineConfig

logger = logging.getLogger(__name__)


def render_hollow_rect(
    target: DrawTarget, x: float, y: float, width: float, height: float, color: Color
) -> None:
    """Draw the border of the pixel footprint covering the float rectangle."""
    draw_hollow_rect(target, round_hollow_rect(x, y, width, height), color)


def render_circle_outline(target: DrawTarget, center: Point2D, radius: float, color: Color) -> None:
    """Draw the pixels crossed by the ideal circle."""
    rasterize_circle(target, center, radius, color)


def render_shape_outline(
    target: DrawTarget, shape: CollisionShape, bounding_box: PixelRect, color: Color
) -> None:
    """Draw the collision silhouette of ``shape`` discovered inside ``bounding_box``."""
    trace_boundary(target, shape, bounding_box, color)


def render_spec(target: DrawTarget, spec: RectSpec | CircleSpec, color: Color) -> None:
    """Dispatch one per-call outline request."""
    if isinstance(spec, CircleSpec):
        render_circle_outline(target, spec.center, spec.radius, color)
        return
    render_hollow_rect(target, spec.x, spec.y, spec.width, spec.height, color)


class OutlineRenderer:
    """Choose between the engine's default renderers and pixel-exact outlines.

    Every call receives the configuration snapshot for the current frame;
    the renderer keeps no mutable state between calls.
    """

    def __init__(self, target: DrawTarget, fallback: FallbackRenderer) -> None:
        self._target = target
        self._fallback = fallback

    @property
    def target(self) -> DrawTarget:
        return self._target

    def hollow_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: Color,
        *,
        config: OutlineConfig,
    ) -> None:
        if not config.enabled:
            self._fallback.hollow_rect(x, y, width, height, color)
            return
        render_hollow_rect(self._target, x, y, width, height, color)

    def circle(
        self,
        center: Point2D,
        radius: float,
        color: Color,
        *,
        config: OutlineConfig,
        resolution: int = 4,
    ) -> None:
        if not config.enabled:
            self._fallback.circle(center, radius, color, resolution)
            return
        render_circle_outline(self._target, center, radius, color)

    def collider(self, shape: CollisionShape, color: Color, *, config: OutlineConfig) -> None:
        """Trace the collider's outline in debug-hitbox mode, else defer."""
        if not config.traces_colliders:
            self._fallback.collider(shape, color)
            return
        bounds = shape.outline_bounds()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("collider_trace shape=%s bounds=%s", type(shape).__name__, bounds)
        render_shape_outline(self._target, shape, bounds, color)
