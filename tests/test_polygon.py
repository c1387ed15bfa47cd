"""
Unit tests for PolygonWithoutInternalHoles.
"""

import math

import numpy as np
import pytest
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from planar.areas.convex import ConvexArea
from planar.areas.polygon import PolygonWithoutInternalHoles
from planar.areas.triangle import Triangle
from planar.core.aabb import AABB
from planar.core.errors import DegenerateGeometryError
from planar.core.point import Point
from planar.core.vector import Vector
from planar.lines.segment import LineSegment


NOTCH = [(0, 0), (4, 0), (4, 4), (2, 2), (0, 4)]
C_SHAPE = [(0, 0), (4, 0), (4, 1), (1, 1), (1, 3), (4, 3), (4, 4), (0, 4)]
# A notch whose own floor is notched again.
NESTED = [(0, 0), (6, 0), (6, 6), (5, 6), (5, 2), (3, 4), (1, 2), (1, 6), (0, 6)]


def _polygon(coords):
    return PolygonWithoutInternalHoles([Point(x, y) for x, y in coords])


class TestDecomposition:
    """Tests for the hull and external hole split."""

    def test_convex_ring_has_no_holes(self):
        """A convex ring is its own hull."""
        poly = _polygon([(0, 0), (2, 0), (2, 2), (0, 2)])
        assert poly.external_holes == []
        assert poly.area() == 4.0

    def test_notch(self):
        """One vertex off the hull makes one triangular hole."""
        poly = _polygon(NOTCH)
        assert len(poly.external_holes) == 1
        hole = poly.external_holes[0]
        assert hole.equals(_polygon([(4, 4), (2, 2), (0, 4)]))
        assert len(poly.points) == 5

    def test_c_shape(self):
        """A deep bay between two hull edges."""
        poly = _polygon(C_SHAPE)
        assert len(poly.external_holes) == 1
        assert poly.external_holes[0].area() == 6.0

    def test_nested(self):
        """Holes are decomposed recursively."""
        poly = _polygon(NESTED)
        assert len(poly.external_holes) == 1
        hole = poly.external_holes[0]
        assert len(hole.external_holes) == 1
        assert abs(hole.area() - 12.0) < 1e-9

    def test_start_off_hull(self):
        """The ring may start at a point inside the hull."""
        rotated = NOTCH[3:] + NOTCH[:3]
        assert abs(_polygon(rotated).area() - 12.0) < 1e-9

    def test_repeated_points(self):
        """Consecutive duplicates are ignored."""
        coords = [(0, 0), (4, 0), (4, 0), (4, 4), (2, 2), (2, 2), (0, 4)]
        poly = _polygon(coords)
        assert abs(poly.area() - 12.0) < 1e-9
        assert len(poly.external_holes) == 1

    def test_empty_raises(self):
        """An empty ring is rejected."""
        with pytest.raises(DegenerateGeometryError):
            PolygonWithoutInternalHoles([])

    def test_accessors_return_copies(self):
        """Hull and holes are handed out as copies."""
        poly = _polygon(NOTCH)
        hull = poly.convex_area()
        assert isinstance(hull, ConvexArea)
        assert hull is not poly.ch
        assert hull.equals(poly.ch)
        holes = poly.get_external_holes()
        assert holes[0] is not poly.external_holes[0]
        assert poly.add_external_hole(holes[0]) == 1


class TestArea:
    """Tests for area against shapely."""

    @pytest.mark.parametrize("coords", [NOTCH, C_SHAPE, NESTED])
    def test_matches_shapely(self, coords):
        """Hull area less holes equals the shoelace area."""
        assert abs(_polygon(coords).area() - ShapelyPolygon(coords).area) < 1e-9

    @pytest.mark.parametrize("coords", [NOTCH, C_SHAPE, NESTED])
    def test_orientation(self, coords):
        """Clockwise rings give the same area."""
        assert abs(_polygon(coords[::-1]).area() - _polygon(coords).area()) < 1e-9

    def test_star(self):
        """A five pointed star has five holes."""
        coords = []
        for i in range(10):
            r = 2.0 if i % 2 == 0 else 0.8
            theta = math.pi / 2 + i * math.pi / 5
            coords.append((r * math.cos(theta), r * math.sin(theta)))
        poly = _polygon(coords)
        assert len(poly.external_holes) == 5
        assert abs(poly.area() - ShapelyPolygon(coords).area) < 1e-9


class TestPointQueries:
    """Tests for point queries."""

    def test_notch(self):
        """Points in the notch are outside."""
        poly = _polygon(NOTCH)
        assert poly.contains_point(Point(2, 1))
        assert not poly.intersects_point(Point(2, 3))
        assert poly.intersects_point(Point(2, 2))
        assert not poly.contains_point(Point(2, 2))

    def test_chord_is_outside(self):
        """Points on the hull edge closing a hole are not in the polygon."""
        poly = _polygon(NOTCH)
        assert not poly.intersects_point(Point(2, 4))
        assert not poly.intersects_point(Point(1, 4))

    def test_nested(self):
        """The floor notch of a hole belongs to the polygon."""
        poly = _polygon(NESTED)
        assert poly.contains_point(Point(3, 3))
        assert not poly.intersects_point(Point(3, 5))
        assert poly.contains_point(Point(0.5, 3))
        assert poly.contains_point(Point(5.5, 5))

    def test_agrees_with_shapely(self):
        """Random points classified like shapely."""
        np.random.seed(42)
        poly = _polygon(NESTED)
        reference = ShapelyPolygon(NESTED)
        for x, y in np.random.uniform(-1, 7, (300, 2)):
            expected = reference.intersects(ShapelyPoint(x, y))
            assert poly.intersects_point(Point(x, y)) == expected


class TestAreaQueries:
    """Tests for segments and other shapes."""

    def test_contains_segment(self):
        """A segment across the notch is not contained."""
        poly = _polygon(NOTCH)
        assert poly.contains_segment(LineSegment(Point(1, 1), Point(3, 1)))
        assert not poly.contains_segment(LineSegment(Point(0.5, 3), Point(3.5, 3)))

    def test_intersects_segment(self):
        """Segments touching the ring."""
        poly = _polygon(NOTCH)
        assert poly.intersects_segment(LineSegment(Point(2, 3), Point(2, 1)))
        assert not poly.intersects_segment(LineSegment(Point(1.5, 3.5), Point(2.5, 3.5)))

    def test_contains_shapes(self):
        """Containment of triangles, hulls and boxes."""
        poly = _polygon(C_SHAPE)
        assert poly.contains_triangle(Triangle(Point(0.2, 0.2), Point(0.8, 0.2), Point(0.5, 3.5)))
        assert not poly.contains_triangle(Triangle(Point(0.5, 0.5), Point(3, 0.5), Point(0.5, 3.5)))
        assert poly.contains_aabb(AABB(0.2, 0.8, 0.2, 3.8))
        assert not poly.contains_aabb(AABB(0.2, 3.0, 0.2, 3.8))
        inner = _polygon([(0.2, 0.2), (0.8, 0.2), (0.8, 3.8), (0.2, 3.8)])
        assert poly.contains_polygon(inner)
        assert not inner.contains_polygon(poly)

    def test_intersects_shapes(self):
        """Shapes inside the bay do not intersect the polygon."""
        poly = _polygon(C_SHAPE)
        inside_bay = Triangle(Point(2, 1.5), Point(3, 1.5), Point(2.5, 2.5))
        assert not poly.intersects_triangle(inside_bay)
        assert poly.intersects_triangle(Triangle(Point(2, 0.5), Point(3, 0.5), Point(2.5, 2)))
        assert poly.intersects_convex(ConvexArea([Point(3, 3.5), Point(5, 3.5), Point(5, 5)]))


class TestTransform:
    """Tests for moving polygons."""

    def test_translate(self):
        """Hull and holes move with the ring."""
        poly = _polygon(NOTCH)
        poly.translate(Vector(10, 0))
        assert poly.points[0] == Point(10, 0)
        assert poly.contains_point(Point(12, 1))
        assert not poly.intersects_point(Point(12, 3))
        assert abs(poly.area() - 12.0) < 1e-9

    def test_rotate(self):
        """Rotation keeps area and holes."""
        poly = _polygon(C_SHAPE)
        rotated = poly.rotate(Point(2, 2), math.pi / 3)
        assert len(rotated.external_holes) == 1
        assert abs(rotated.area() - 10.0) < 1e-9
        back = rotated.rotate(Point(2, 2), -math.pi / 3)
        assert back.equals(poly, 1e-9)

    def test_copy(self):
        """Copies are equal with a new id."""
        poly = _polygon(NESTED)
        copy = poly.copy()
        assert copy.equals(poly)
        assert copy.id != poly.id


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
