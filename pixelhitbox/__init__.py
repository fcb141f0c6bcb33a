"""Pixel-exact debug outlines for rectangular and circular collision volumes."""

from pixelhitbox.geometry import CircleSpec, Color, PixelRect, Point2D, RectSpec
from pixelhitbox.rendering import (
    OutlineRenderer,
    PixelCanvas,
    RecordingTarget,
    render_circle_outline,
    render_hollow_rect,
    render_shape_outline,
)
from pixelhitbox.runtime.config import OutlineConfig, load_outline_config
from pixelhitbox.shapes import CircleCollider, ColliderList, Hitbox

__all__ = [
    "CircleCollider",
    "CircleSpec",
    "ColliderList",
    "Color",
    "Hitbox",
    "OutlineConfig",
    "OutlineRenderer",
    "PixelCanvas",
    "PixelRect",
    "Point2D",
    "RecordingTarget",
    "RectSpec",
    "load_outline_config",
    "render_circle_outline",
    "render_hollow_rect",
    "render_shape_outline",
]
