"""Concrete draw targets: a numpy framebuffer and a draw-call recorder."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from pixelhitbox.geometry import TRANSPARENT, Color, PixelRect


class PixelCanvas:
    """RGBA ``uint8`` framebuffer that clips unit-rect draws to its bounds."""

    def __init__(self, width: int, height: int, background: Color = TRANSPARENT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = background
        self.buffer = np.empty((height, width, 4), dtype=np.uint8)
        self.clear()

    def clear(self, color: Color | None = None) -> None:
        self.buffer[:, :] = np.asarray(self.background if color is None else color, dtype=np.uint8)

    def draw_unit_rect(self, rect: PixelRect, color: Color) -> None:
        x0 = max(0, rect.x)
        y0 = max(0, rect.y)
        x1 = min(self.width, rect.right)
        y1 = min(self.height, rect.bottom)
        if x1 <= x0 or y1 <= y0:
            return
        self.buffer[y0:y1, x0:x1] = np.asarray(color, dtype=np.uint8)

    def pixel(self, x: int, y: int) -> Color:
        r, g, b, a = (int(v) for v in self.buffer[y, x])
        return (r, g, b, a)

    def painted(self, color: Color) -> set[tuple[int, int]]:
        """Return coordinates of every pixel holding ``color``."""
        mask = np.all(self.buffer == np.asarray(color, dtype=np.uint8), axis=-1)
        ys, xs = np.nonzero(mask)
        return {(int(x), int(y)) for x, y in zip(xs, ys)}

    def to_ascii(self, *, ink: str = "#", blank: str = ".") -> str:
        """Render non-background pixels as ``ink`` characters, row by row."""
        background = np.asarray(self.background, dtype=np.uint8)
        mask = np.any(self.buffer != background, axis=-1)
        return "\n".join("".join(ink if cell else blank for cell in row) for row in mask)


@dataclass(slots=True)
class RecordingTarget:
    """Draw target that keeps every draw call in emission order."""

    calls: list[tuple[PixelRect, Color]] = field(default_factory=list)

    def draw_unit_rect(self, rect: PixelRect, color: Color) -> None:
        self.calls.append((rect, color))

    def pixels(self) -> set[tuple[int, int]]:
        """Return the union of all pixels covered by recorded draws."""
        covered: set[tuple[int, int]] = set()
        for rect, _ in self.calls:
            covered.update(rect.pixels())
        return covered

    def reset(self) -> None:
        self.calls.clear()
