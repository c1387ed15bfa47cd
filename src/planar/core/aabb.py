"""
Axis-aligned bounding boxes.

Boxes are the first test of every shape-to-shape query: two shapes whose
boxes are disjoint cannot intersect, so the exact predicates only run when
the boxes overlap.
"""

from functools import cached_property
from typing import Iterable, List, Optional

import numpy as np

from .environment import Environment
from .errors import DegenerateGeometryError
from .kinds import IntersectionKind
from .point import Point
from .vector import Vector


_CACHED = ("ll", "ul", "ur", "lr", "left", "right", "top", "bottom", "points")


class AABB:
    """
    Axis-aligned bounding box ``[x_min, x_max] x [y_min, y_max]``.

    The extents are stored relative to an offset so translation only
    updates the offset. Corner points and edges are computed lazily and
    dropped whenever the box moves.

    Parameters
    ----------
    x_min, x_max, y_min, y_max : float
        Extents of the box.
    env : Environment, optional
        Environment given to derived corner points.
    """

    kind = IntersectionKind.POLYGON

    def __init__(self, x_min: float, x_max: float, y_min: float, y_max: float,
                 env: Optional[Environment] = None):
        self.env = env
        self.offset = Vector.ZERO
        self._x_min = float(x_min)
        self._x_max = float(x_max)
        self._y_min = float(y_min)
        self._y_max = float(y_max)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "AABB":
        """
        Smallest box enclosing ``points``.

        Raises
        ------
        DegenerateGeometryError
            If ``points`` is empty.
        """
        points = list(points)
        if not points:
            raise DegenerateGeometryError("Cannot build a bounding box from no points")
        xs = [pt.x for pt in points]
        ys = [pt.y for pt in points]
        return cls(min(xs), max(xs), min(ys), max(ys), points[0].env)

    @classmethod
    def from_geometries(cls, geometries: Iterable) -> "AABB":
        """Smallest box enclosing the boxes of all ``geometries``."""
        boxes = [g.aabb for g in geometries]
        if not boxes:
            raise DegenerateGeometryError("Cannot build a bounding box from no geometries")
        result = boxes[0]
        for box in boxes[1:]:
            result = result.union(box)
        return result

    @property
    def x_min(self) -> float:
        return self._x_min + self.offset.dx

    @property
    def x_max(self) -> float:
        return self._x_max + self.offset.dx

    @property
    def y_min(self) -> float:
        return self._y_min + self.offset.dy

    @property
    def y_max(self) -> float:
        return self._y_max + self.offset.dy

    @property
    def aabb(self) -> "AABB":
        return self

    @cached_property
    def ll(self) -> Point:
        return Point(self.x_min, self.y_min, self.env)

    @cached_property
    def ul(self) -> Point:
        return Point(self.x_min, self.y_max, self.env)

    @cached_property
    def ur(self) -> Point:
        return Point(self.x_max, self.y_max, self.env)

    @cached_property
    def lr(self) -> Point:
        return Point(self.x_max, self.y_min, self.env)

    @cached_property
    def points(self) -> List[Point]:
        """Distinct corners, counter-clockwise from the lower left."""
        return Point.get_unique([self.ll, self.lr, self.ur, self.ul], 0.0)

    def _edge(self, a: Point, b: Point):
        from ..lines.segment import LineSegment
        if a == b:
            return a
        return LineSegment(a, b)

    @cached_property
    def left(self):
        """Left edge; a point when the box has no height."""
        return self._edge(self.ll, self.ul)

    @cached_property
    def right(self):
        return self._edge(self.lr, self.ur)

    @cached_property
    def top(self):
        """Top edge; a point when the box has no width."""
        return self._edge(self.ul, self.ur)

    @cached_property
    def bottom(self):
        return self._edge(self.ll, self.lr)

    def _invalidate(self) -> None:
        for name in _CACHED:
            self.__dict__.pop(name, None)

    def translate(self, v: Vector) -> None:
        """Move the box by ``v`` in place."""
        self.offset = self.offset.add(v)
        self._invalidate()

    def copy(self) -> "AABB":
        return AABB(self.x_min, self.x_max, self.y_min, self.y_max, self.env)

    @property
    def centroid(self) -> Point:
        return Point((self.x_min + self.x_max) / 2.0,
                     (self.y_min + self.y_max) / 2.0, self.env)

    def __eq__(self, other):
        if not isinstance(other, AABB):
            return NotImplemented
        return (self.x_min == other.x_min and self.x_max == other.x_max
                and self.y_min == other.y_min and self.y_max == other.y_max)

    __hash__ = None

    def __repr__(self):
        return (f"AABB(x_min={self.x_min!r}, x_max={self.x_max!r}, "
                f"y_min={self.y_min!r}, y_max={self.y_max!r})")

    def union(self, other: "AABB") -> "AABB":
        """Smallest box containing both boxes."""
        if self.contains_aabb(other):
            return self.copy()
        return AABB(min(self.x_min, other.x_min), max(self.x_max, other.x_max),
                    min(self.y_min, other.y_min), max(self.y_max, other.y_max),
                    self.env)

    def is_beyond(self, other: "AABB", epsilon: float = 0.0) -> bool:
        """
        Test whether ``other`` lies wholly to one side of this box.

        Parameters
        ----------
        other : AABB
            The box to test.
        epsilon : float
            Padding added around this box before testing.

        Returns
        -------
        bool
            True if the boxes are separated along the x or y axis.
        """
        return (self.x_max + epsilon < other.x_min
                or self.x_min - epsilon > other.x_max
                or self.y_max + epsilon < other.y_min
                or self.y_min - epsilon > other.y_max)

    def intersects_aabb(self, other: "AABB", epsilon: float = 0.0) -> bool:
        return not self.is_beyond(other, epsilon)

    def intersects_point(self, pt: Point, epsilon: float = 0.0) -> bool:
        return (self.x_min - epsilon <= pt.x <= self.x_max + epsilon
                and self.y_min - epsilon <= pt.y <= self.y_max + epsilon)

    def contains_point(self, pt: Point) -> bool:
        """Boundary inclusive point containment."""
        return self.intersects_point(pt)

    def contains_aabb(self, other: "AABB") -> bool:
        return (self.x_min <= other.x_min and other.x_max <= self.x_max
                and self.y_min <= other.y_min and other.y_max <= self.y_max)

    def contains_geometry(self, geometry) -> bool:
        """True if every vertex of ``geometry`` is inside the box."""
        return (self.contains_aabb(geometry.aabb)
                and all(self.contains_point(pt) for pt in geometry.points))

    def get_intersection(self, other: "AABB") -> Optional["AABB"]:
        """
        Overlap of two boxes.

        Returns
        -------
        AABB or None
            The overlapping box, or None when the boxes are disjoint.
        """
        if not self.intersects_aabb(other):
            return None
        return AABB(max(self.x_min, other.x_min), min(self.x_max, other.x_max),
                    max(self.y_min, other.y_min), min(self.y_max, other.y_max),
                    self.env)

    def to_array(self) -> np.ndarray:
        return np.array([[pt.x, pt.y] for pt in self.points], dtype=np.float64)
