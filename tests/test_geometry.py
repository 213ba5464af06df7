"""Tests for point, line and clamping helpers."""

from __future__ import annotations

import math
from types import SimpleNamespace

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lerpkit.models import Point
from lerpkit.utils import (
    angle_between_two_points,
    clamp,
    distance_between_two_points,
    lines_intersection,
    lines_intersection_into,
    rotate_point,
    rotate_point_around,
    shift_point,
    triangle_face,
)

coords = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False, allow_infinity=False)
points = st.builds(Point, x=coords, y=coords)


def test_distance_between_two_points() -> None:
    assert distance_between_two_points(Point(0, 0), Point(3, 4)) == 5


@pytest.mark.parametrize(
    ("end", "expected"),
    (
        (Point(0, 1), 0.0),
        (Point(1, 0), math.pi / 2),
        (Point(0, -1), math.pi),
        (Point(-1, 0), -math.pi / 2),
    ),
)
def test_angle_is_measured_from_positive_y(end: Point, expected: float) -> None:
    assert angle_between_two_points(Point(0, 0), end) == pytest.approx(expected)


class TestLinesIntersection:
    def test_crossing_diagonals(self) -> None:
        hit = lines_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        assert hit == Point(1, 1)

    def test_parallel_lines(self) -> None:
        assert (
            lines_intersection(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1))
            is None
        )

    def test_coincident_lines(self) -> None:
        assert (
            lines_intersection(
                Point(0, 0), Point(2, 0), Point(1, 0), Point(3, 0), extrapolate=True
            )
            is None
        )

    def test_touching_endpoint_is_excluded(self) -> None:
        a, b = Point(0, 0), Point(2, 0)
        c, d = Point(2, 0), Point(2, 2)
        assert lines_intersection(a, b, c, d) is None
        assert lines_intersection(a, b, c, d, extrapolate=True) == Point(2, 0)

    def test_outside_segments_needs_extrapolate(self) -> None:
        a, b = Point(0, 0), Point(1, 1)
        c, d = Point(3, 0), Point(3, 5)
        assert lines_intersection(a, b, c, d) is None
        hit = lines_intersection(a, b, c, d, extrapolate=True)
        assert hit is not None
        assert hit.as_tuple() == pytest.approx((3, 3))

    def test_into_writes_target(self) -> None:
        target = Point()
        result = lines_intersection_into(
            Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0), target
        )
        assert result is None
        assert target == Point(1, 1)

    def test_into_leaves_nan_on_miss(self) -> None:
        target = SimpleNamespace(x=5.0, y=5.0)
        lines_intersection_into(
            Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1), target
        )
        assert math.isnan(target.x)
        assert math.isnan(target.y)


class TestTriangleFace:
    def test_winding_sign(self) -> None:
        assert triangle_face(Point(0, 0), Point(1, 0), Point(0, 1)) == -1
        assert triangle_face(Point(0, 0), Point(0, 1), Point(1, 0)) == 1

    def test_large_triangles_clamp(self) -> None:
        assert triangle_face(Point(0, 0), Point(0, 10), Point(10, 0)) == 1

    def test_small_triangles_are_not_normalised(self) -> None:
        face = triangle_face(Point(0, 0), Point(0.1, 0), Point(0, 0.1))
        assert face == pytest.approx(-0.01)

    def test_collinear_points(self) -> None:
        assert triangle_face(Point(0, 0), Point(1, 1), Point(2, 2)) == 0

    def test_nan_coordinate_propagates(self) -> None:
        assert math.isnan(triangle_face(Point(0, 0), Point(math.nan, 0), Point(0, 1)))
        assert math.isnan(triangle_face(Point(0, 0), Point(0, 1), Point(math.nan, 0)))

    def test_infinite_cross_product_clamps(self) -> None:
        assert triangle_face(Point(0, 0), Point(math.inf, 0), Point(0, 1)) == -1

    @given(p1=points, p2=points, p3=points)
    @settings(max_examples=200)
    def test_antisymmetric_and_bounded(self, p1: Point, p2: Point, p3: Point) -> None:
        face = triangle_face(p1, p2, p3)
        assert -1 <= face <= 1
        assert triangle_face(p1, p3, p2) == -face


class TestMutators:
    def test_shift_point_in_place(self) -> None:
        p = Point(1, 1)
        assert shift_point(p, Point(0.5, -1), 4) is None
        assert p == Point(3, -3)

    def test_rotate_point_around_origin(self) -> None:
        p = Point(1, 0)
        assert rotate_point_around(p, Point(0, 0), math.pi / 2) is None
        assert p.as_tuple() == pytest.approx((0, 1), abs=1e-12)

    def test_rotate_point_around_center(self) -> None:
        p = SimpleNamespace(x=2.0, y=1.0)
        rotate_point_around(p, Point(1, 1), math.pi / 2)
        assert (p.x, p.y) == pytest.approx((1, 2))

    def test_rotate_point_leaves_input_untouched(self) -> None:
        p = Point(2, 1)
        rotated = rotate_point(p, Point(1, 1), math.pi)
        assert p == Point(2, 1)
        assert rotated.as_tuple() == pytest.approx((0, 1))

    @given(p=points, center=points, angle=st.floats(min_value=-10, max_value=10))
    @settings(max_examples=100)
    def test_rotation_preserves_distance(
        self, p: Point, center: Point, angle: float
    ) -> None:
        before = distance_between_two_points(p, center)
        rotate_point_around(p, center, angle)
        assert distance_between_two_points(p, center) == pytest.approx(
            before, rel=1e-9, abs=1e-9
        )


class TestClamp:
    def test_clamps_to_upper_bound(self) -> None:
        assert clamp(0, 10, 15) == 10

    def test_zero_minimum_does_not_bound(self) -> None:
        assert clamp(0, 10, -5) == -5

    def test_missing_minimum_collapses_to_value(self) -> None:
        assert clamp(None, 10, 5) == 5
        assert clamp(math.nan, 10, -3) == -3

    def test_nonzero_minimum(self) -> None:
        assert clamp(2, 10, -5) == 2
        assert clamp(2, 10, 7) == 7

    def test_open_top(self) -> None:
        assert clamp(2, None, -5) == 2
        assert clamp(2, None, 50) == 50

    @given(
        lo=st.floats(min_value=0.5, max_value=100),
        span=st.floats(min_value=0, max_value=100),
        value=st.floats(min_value=-1e3, max_value=1e3),
    )
    def test_result_within_bounds(self, lo: float, span: float, value: float) -> None:
        hi = lo + span
        assert lo <= clamp(lo, hi, value) <= hi

    def test_nan_value_or_maximum_propagates(self) -> None:
        assert math.isnan(clamp(2, 10, math.nan))
        assert math.isnan(clamp(2, None, math.nan))
        assert math.isnan(clamp(2, math.nan, 5))

    def test_infinite_value(self) -> None:
        assert clamp(2, 10, math.inf) == 10
        assert clamp(2, None, -math.inf) == 2


def test_non_finite_points_do_not_raise() -> None:
    bad = Point(math.nan, 0)
    assert lines_intersection(bad, Point(2, 2), Point(0, 2), Point(2, 0)) is None
    hit = lines_intersection(
        bad, Point(2, 2), Point(0, 2), Point(2, 0), extrapolate=True
    )
    assert hit is not None
    assert math.isnan(hit.x)
    assert distance_between_two_points(Point(0, 0), Point(math.inf, 0)) == math.inf
