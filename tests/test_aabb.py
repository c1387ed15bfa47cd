"""
Unit tests for axis-aligned bounding boxes.
"""

import pytest

from planar.core.aabb import AABB
from planar.core.errors import DegenerateGeometryError
from planar.core.point import Point
from planar.core.vector import Vector
from planar.lines.segment import LineSegment


def _box(x_min, x_max, y_min, y_max):
    return AABB(x_min, x_max, y_min, y_max)


class TestConstruction:
    """Tests for building boxes."""

    def test_from_points(self):
        """The box spans the extreme coordinates."""
        box = AABB.from_points([Point(1, 5), Point(-2, 3), Point(4, -1)])
        assert (box.x_min, box.x_max, box.y_min, box.y_max) == (-2.0, 4.0, -1.0, 5.0)

    def test_empty_raises(self):
        """A box needs at least one point."""
        with pytest.raises(DegenerateGeometryError):
            AABB.from_points([])

    def test_from_geometries(self):
        """Union of the boxes of several shapes."""
        box = AABB.from_geometries([LineSegment(Point(0, 0), Point(1, 1)), Point(5, -2)])
        assert box == _box(0, 5, -2, 1)


class TestCornersAndEdges:
    """Tests for derived corners and edges."""

    def test_corners(self):
        """Corners are named lower/upper left/right."""
        box = _box(0, 2, 0, 1)
        assert box.ll == Point(0, 0)
        assert box.ul == Point(0, 1)
        assert box.ur == Point(2, 1)
        assert box.lr == Point(2, 0)

    def test_edges_are_segments(self):
        """A box with area has segment edges."""
        box = _box(0, 2, 0, 1)
        assert isinstance(box.left, LineSegment)
        assert box.bottom.length() == 2.0

    def test_degenerate_edges(self):
        """Edges collapse to points when the box has no extent."""
        box = _box(1, 1, 0, 3)
        assert isinstance(box.top, Point)
        assert isinstance(box.bottom, Point)
        assert isinstance(box.left, LineSegment)

    def test_translate_invalidates(self):
        """Cached corners and edges follow the box after translation."""
        box = _box(0, 1, 0, 1)
        assert box.ur == Point(1, 1)
        assert box.top.q == Point(1, 1)
        box.translate(Vector(2, 3))
        assert box.ur == Point(3, 4)
        assert box.top.q == Point(3, 4)
        assert box.x_min == 2.0

    def test_translation_inverse(self):
        """Translating by v then -v restores the box."""
        box = _box(0, 1, 0, 1)
        box.translate(Vector(0.5, -7))
        box.translate(Vector(-0.5, 7))
        assert box == _box(0, 1, 0, 1)

    def test_centroid(self):
        """Centre of the box."""
        assert _box(0, 2, 0, 4).centroid == Point(1, 2)


class TestIntersection:
    """Tests for box overlap queries."""

    def test_disjoint(self):
        """Disjoint boxes neither intersect nor have an overlap."""
        a = _box(0, 1, 0, 1)
        b = _box(5, 6, 5, 6)
        assert not a.intersects_aabb(b)
        assert a.get_intersection(b) is None
        assert a.is_beyond(b)

    def test_padding(self):
        """Epsilon padding closes small gaps."""
        a = _box(0, 1, 0, 1)
        b = _box(1.05, 2, 0, 1)
        assert a.is_beyond(b)
        assert not a.is_beyond(b, epsilon=0.1)

    def test_overlap(self):
        """Overlapping boxes give their common box."""
        a = _box(0, 2, 0, 2)
        b = _box(1, 3, -1, 1)
        assert a.get_intersection(b) == _box(1, 2, 0, 1)

    def test_touching(self):
        """Boxes sharing an edge intersect."""
        a = _box(0, 1, 0, 1)
        b = _box(1, 2, 0, 1)
        assert a.intersects_aabb(b)
        assert a.get_intersection(b) == _box(1, 1, 0, 1)


class TestContainment:
    """Tests for containment."""

    def test_point_boundary_inclusive(self):
        """Points on the boundary are contained."""
        box = _box(0, 1, 0, 1)
        assert box.contains_point(Point(0.5, 0.5))
        assert box.contains_point(Point(1, 0.5))
        assert box.contains_point(Point(0, 0))
        assert not box.contains_point(Point(1.5, 0.5))

    def test_box_in_box(self):
        """A smaller box inside a larger one."""
        outer = _box(0, 10, 0, 10)
        assert outer.contains_aabb(_box(1, 2, 1, 2))
        assert outer.contains_aabb(outer)
        assert not _box(1, 2, 1, 2).contains_aabb(outer)

    def test_geometry(self):
        """All vertices of a segment inside the box."""
        box = _box(0, 10, 0, 10)
        assert box.contains_geometry(LineSegment(Point(1, 1), Point(9, 9)))
        assert not box.contains_geometry(LineSegment(Point(1, 1), Point(11, 9)))


class TestUnion:
    """Tests for union()."""

    def test_contains_both(self):
        """The union contains both inputs."""
        a = _box(0, 1, 0, 1)
        b = _box(3, 4, -2, 0.5)
        u = a.union(b)
        assert u.contains_aabb(a)
        assert u.contains_aabb(b)

    def test_commutative(self):
        """Union does not depend on argument order."""
        a = _box(0, 1, 0, 1)
        b = _box(3, 4, -2, 0.5)
        assert a.union(b) == b.union(a)

    def test_idempotent(self):
        """A box united with itself is unchanged."""
        a = _box(0, 1, 0, 1)
        assert a.union(a) == a

    def test_contained_union_is_a_copy(self):
        """Moving the union of a box with a box inside it leaves the box alone."""
        a = _box(0, 4, 0, 4)
        u = a.union(_box(1, 2, 1, 2))
        assert u == a
        u.translate(Vector(10, 10))
        assert a.x_min == 0.0
        assert a.contains_point(Point(2, 2))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
