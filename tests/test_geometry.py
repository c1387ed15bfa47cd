"""
Unit tests for core geometry helpers.
"""

import math

import numpy as np
import pytest

from planar.core.geometry import (
    EPS,
    TWO_PI,
    as_points_array,
    centroid,
    contains,
    ensure_ccw,
    equals,
    normalise_angle,
    polygon_area,
    side,
    signed_area,
    sort_by_angle,
)
from planar.core.point import Point


class TestEquals:
    """Tests for equals() function."""

    def test_within_tolerance(self):
        """Values closer than epsilon compare equal."""
        assert equals(1.0, 1.0 + 1e-12)

    def test_boundary_is_inclusive(self):
        """A difference of exactly epsilon is still equal."""
        assert equals(0.0, 0.5, epsilon=0.5)

    def test_outside_tolerance(self):
        """Values further apart than epsilon differ."""
        assert not equals(1.0, 1.001)


class TestNormaliseAngle:
    """Tests for normalise_angle() function."""

    def test_zero(self):
        """Zero stays zero."""
        assert normalise_angle(0.0) == 0.0

    def test_full_turn_is_zero(self):
        """A full turn normalises to zero."""
        assert normalise_angle(TWO_PI) == 0.0

    def test_negative_angle(self):
        """Negative angles wrap into [0, 2*pi)."""
        assert abs(normalise_angle(-math.pi / 2) - 3 * math.pi / 2) < EPS

    def test_several_turns(self):
        """Multiple turns are removed."""
        assert abs(normalise_angle(5 * math.pi) - math.pi) < 1e-9

    def test_range(self):
        """Result is always within [0, 2*pi)."""
        for theta in np.linspace(-20, 20, 101):
            t = normalise_angle(theta)
            assert 0.0 <= t < TWO_PI


class TestSide:
    """Tests for side() function."""

    def test_opposite_signs(self):
        """Points either side of the x axis get opposite signs."""
        above = side(0, 0, 1, 0, 0.5, 1)
        below = side(0, 0, 1, 0, 0.5, -1)
        assert above * below < 0

    def test_on_line(self):
        """A point on the line has side value zero."""
        assert side(0, 0, 1, 1, 3, 3) == 0.0


class TestPolygonArea:
    """Tests for polygon_area() function."""

    def test_unit_square(self):
        """Unit square should have area 1."""
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert abs(polygon_area(square) - 1.0) < EPS

    def test_triangle(self):
        """Triangle with base 2 and height 2 should have area 2."""
        triangle = np.array([[0, 0], [2, 0], [1, 2]], dtype=float)
        assert abs(polygon_area(triangle) - 2.0) < EPS

    def test_orientation_independent(self):
        """Area is the same for CW and CCW ordering."""
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert abs(polygon_area(square) - polygon_area(square[::-1])) < EPS

    def test_degenerate(self):
        """Fewer than three vertices have zero area."""
        assert polygon_area(np.array([[0, 0], [1, 1]], dtype=float)) == 0.0

    def test_signed_area_sign(self):
        """Signed area is positive for CCW and negative for CW rings."""
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert signed_area(square) > 0
        assert signed_area(square[::-1]) < 0


class TestEnsureCCW:
    """Tests for ensure_ccw() function."""

    def test_already_ccw(self):
        """CCW polygon is returned unchanged."""
        ccw = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        np.testing.assert_array_equal(ensure_ccw(ccw), ccw)

    def test_cw_reversed(self):
        """CW polygon is reversed."""
        cw = np.array([[0, 0], [0, 1], [1, 1], [1, 0]], dtype=float)
        result = ensure_ccw(cw)
        assert signed_area(result) > 0


class TestContains:
    """Tests for the vectorised contains() function."""

    def test_point_inside_square(self):
        """Point clearly inside a square should be detected."""
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert contains(square, np.array([[0.5, 0.5]]))[0]

    def test_point_on_edge(self):
        """Point on edge should be considered inside."""
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert contains(square, np.array([[0.5, 0.0]]))[0]

    def test_multiple_points(self):
        """Test multiple points at once."""
        triangle = np.array([[0, 0], [2, 0], [1, 2]], dtype=float)
        points = np.array([
            [1.0, 0.5],   # Inside
            [1.0, 1.0],   # Inside
            [0.0, 2.0],   # Outside
            [3.0, 0.0],   # Outside
        ])
        np.testing.assert_array_equal(contains(triangle, points),
                                      np.array([True, True, False, False]))

    def test_degenerate_polygon(self):
        """Polygon with < 3 vertices contains nothing."""
        line = np.array([[0, 0], [1, 1]], dtype=float)
        assert not contains(line, np.array([[0.5, 0.5]]))[0]


class TestArrays:
    """Tests for as_points_array() and centroid()."""

    def test_wrong_shape_raises(self):
        """Arrays that are not (N, 2) are rejected."""
        with pytest.raises(ValueError):
            as_points_array(np.zeros((4, 3)))
        with pytest.raises(ValueError):
            as_points_array(np.zeros(4))

    def test_centroid(self):
        """Centroid of the unit square corners is its centre."""
        square = [[0, 0], [1, 0], [1, 1], [0, 1]]
        np.testing.assert_allclose(centroid(square), [0.5, 0.5])


class TestSortByAngle:
    """Tests for sort_by_angle() function."""

    def test_counter_clockwise_order(self):
        """Points are ordered by signed angle from the reference direction."""
        centre = Point(0, 0)
        reference = Point(1, 0)
        east = Point(2, 0)
        north = Point(0, 2)
        south = Point(0, -2)
        west = Point(-2, 0.001)
        ordered = sort_by_angle([west, north, east, south], centre, reference)
        assert ordered == [south, east, north, west]

    def test_ties_nearest_first(self):
        """Points at the same angle are ordered by distance."""
        centre = Point(0, 0)
        near = Point(1, 1)
        far = Point(3, 3)
        ordered = sort_by_angle([far, near], centre, Point(1, 0))
        assert ordered == [near, far]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
