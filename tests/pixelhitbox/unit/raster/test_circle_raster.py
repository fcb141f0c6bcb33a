from __future__ import annotations

import math

import pytest

from pixelhitbox.geometry import BLUE, PixelRect, Point2D
from pixelhitbox.raster.circle import OCTANTS, circle_octant, rasterize_circle
from pixelhitbox.rendering.targets import RecordingTarget
from tests.pixelhitbox.conftest import crossed_pixels

# Dyadic centres and radii keep every squared distance exact in floating point.
EXACTNESS_CASES = [
    (0.0, 0.0, 1.0),
    (0.0, 0.0, 2.5),
    (7.0, 7.0, 5.5),
    (10.25, 20.75, 7.375),
    (-3.75, 2.25, 5.125),
    (100.5, -40.25, 31.625),
    (0.25, 0.75, 1.125),
    (3.5, 3.5, 2.5),
    (0.5, 0.5, 0.375),
    (1.0, 1.25, 0.125),
    (-0.75, -0.75, 0.625),
    (12.0, 5.5, 9.875),
]


def _drawn(cx: float, cy: float, radius: float) -> set[tuple[int, int]]:
    target = RecordingTarget()
    rasterize_circle(target, Point2D(cx, cy), radius, BLUE)
    return target.pixels()


def test_unit_circle_at_origin_draws_four_pixels() -> None:
    assert _drawn(0.0, 0.0, 1.0) == {(0, 0), (-1, 0), (0, -1), (-1, -1)}


@pytest.mark.parametrize(("cx", "cy", "radius"), EXACTNESS_CASES)
def test_circle_draws_exactly_the_crossed_pixels(cx: float, cy: float, radius: float) -> None:
    assert _drawn(cx, cy, radius) == crossed_pixels(cx, cy, radius)


@pytest.mark.parametrize("radius", [0.375, 1.5, 4.25, 6.5, 11.125])
def test_circle_is_mirror_symmetric_for_integer_centres(radius: float) -> None:
    cx, cy = 3, -2
    drawn = _drawn(float(cx), float(cy), radius)
    assert drawn
    assert {(2 * cx - 1 - px, py) for px, py in drawn} == drawn
    assert {(px, 2 * cy - 1 - py) for px, py in drawn} == drawn


@pytest.mark.parametrize("radius", [0.0, -0.0, -1.0, -25.5, math.nan, math.inf])
def test_degenerate_radius_draws_nothing(radius: float) -> None:
    target = RecordingTarget()
    rasterize_circle(target, Point2D(4.5, 4.5), radius, BLUE)
    assert target.calls == []


def test_non_finite_centre_draws_nothing() -> None:
    target = RecordingTarget()
    rasterize_circle(target, Point2D(math.nan, 1.0), 3.0, BLUE)
    assert target.calls == []


def test_octant_starts_next_column_on_the_entry_row() -> None:
    target = RecordingTarget()
    circle_octant(target, Point2D(0.0, 0.0), 2.5, BLUE, flip_x=1, flip_y=1, interchange_xy=False)
    assert [rect for rect, _ in target.calls] == [PixelRect(2, 0, 1, 2), PixelRect(1, 1, 1, 1)]


def test_interchanged_octant_emits_horizontal_spans() -> None:
    target = RecordingTarget()
    circle_octant(target, Point2D(0.0, 0.0), 2.5, BLUE, flip_x=1, flip_y=1, interchange_xy=True)
    assert [rect for rect, _ in target.calls] == [PixelRect(0, 2, 2, 1), PixelRect(1, 1, 1, 1)]


def test_octants_cover_all_sign_and_axis_combinations() -> None:
    assert len(set(OCTANTS)) == 8


def test_every_drawn_span_is_one_pixel_thick() -> None:
    target = RecordingTarget()
    rasterize_circle(target, Point2D(10.25, 20.75), 7.375, BLUE)
    assert target.calls
    for rect, color in target.calls:
        assert color == BLUE
        assert min(rect.width, rect.height) == 1
        assert not rect.is_empty
