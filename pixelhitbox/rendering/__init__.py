"""Outline render entry points and draw targets."""

from pixelhitbox.rendering.outline import (
    OutlineRenderer,
    render_circle_outline,
    render_hollow_rect,
    render_shape_outline,
    render_spec,
)
from pixelhitbox.rendering.targets import PixelCanvas, RecordingTarget

__all__ = [
    "OutlineRenderer",
    "PixelCanvas",
    "RecordingTarget",
    "render_circle_outline",
    "render_hollow_rect",
    "render_shape_outline",
    "render_spec",
]
