"""Integer rasterization and boundary tracing primitives."""

from pixelhitbox.raster.boundary import trace_boundary, traced_pixels
from pixelhitbox.raster.circle import circle_octant, rasterize_circle
from pixelhitbox.raster.rect_rounding import draw_hollow_rect, round_hollow_rect
from pixelhitbox.raster.spans import draw_pixel, draw_span, span_rect

__all__ = [
    "circle_octant",
    "draw_hollow_rect",
    "draw_pixel",
    "draw_span",
    "rasterize_circle",
    "round_hollow_rect",
    "span_rect",
    "trace_boundary",
    "traced_pixels",
]
