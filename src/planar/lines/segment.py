"""
Line segments.

A segment wraps the ``Line`` through its endpoints and bounds it with the
two perpendicular lines through ``p`` and ``q``. A point is *aligned* with
the segment when it lies between those perpendiculars; collinear overlap,
nearest points and distances are all built on that predicate.
"""

from functools import cached_property
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from ..core.aabb import AABB
from ..core.errors import DegenerateGeometryError
from ..core.geometry import EPS, normalise_angle
from ..core.kinds import IntersectionKind
from ..core.point import Point
from ..core.vector import Vector
from .line import Line


class LineSegment:
    """
    The part of a line between two distinct endpoints.

    Parameters
    ----------
    p, q : Point
        The endpoints.

    Raises
    ------
    DegenerateGeometryError
        If the endpoints coincide.
    """

    kind = IntersectionKind.SEGMENT

    def __init__(self, p: Point, q: Point):
        if p == q:
            raise DegenerateGeometryError(f"Segment endpoints coincide at {p!r}")
        self.line = Line(p, q)

    @property
    def p(self) -> Point:
        return self.line.p

    @property
    def q(self) -> Point:
        return self.line.q

    @property
    def env(self):
        return self.line.env

    @property
    def points(self) -> List[Point]:
        return [self.p, self.q]

    @cached_property
    def pl(self) -> Line:
        """Perpendicular through ``p``."""
        return Line.from_point(self.p, self.line.v.rotate90())

    @cached_property
    def ql(self) -> Line:
        """Perpendicular through ``q``."""
        return Line.from_point(self.q, self.line.v.rotate90())

    @cached_property
    def aabb(self) -> AABB:
        return AABB.from_points(self.points)

    def _invalidate(self) -> None:
        for name in ("pl", "ql", "aabb"):
            self.__dict__.pop(name, None)

    def translate(self, v: Vector) -> None:
        """Move the segment by ``v`` in place."""
        self.line.translate(v)
        self._invalidate()

    def copy(self) -> "LineSegment":
        return LineSegment(self.p, self.q)

    def reverse(self) -> "LineSegment":
        return LineSegment(self.q, self.p)

    def rotate(self, pivot: Point, theta: float) -> "LineSegment":
        """Rotate clockwise about ``pivot``; a zero angle copies."""
        theta = normalise_angle(theta)
        if theta == 0.0:
            return self.copy()
        return self.rotate_n(pivot, theta)

    def rotate_n(self, pivot: Point, theta: float) -> "LineSegment":
        return LineSegment(self.p.rotate_n(pivot, theta), self.q.rotate_n(pivot, theta))

    def __repr__(self):
        return f"LineSegment({self.p!r}, {self.q!r})"

    def equals(self, segment: "LineSegment", epsilon: float = EPS) -> bool:
        """Same endpoints in the same order."""
        return self.p.equals(segment.p, epsilon) and self.q.equals(segment.q, epsilon)

    def equals_ignore_direction(self, segment: "LineSegment", epsilon: float = EPS) -> bool:
        return self.equals(segment, epsilon) or (
            self.p.equals(segment.q, epsilon) and self.q.equals(segment.p, epsilon))

    def length(self) -> float:
        return self.p.distance(self.q)

    def length_squared(self) -> float:
        return self.p.distance_squared(self.q)

    def midpoint(self) -> Point:
        return Point((self.p.x + self.q.x) / 2.0, (self.p.y + self.q.y) / 2.0, self.env)

    def other_point(self, pt: Point, epsilon: float = EPS) -> Optional[Point]:
        """The endpoint that is not ``pt``, or None if ``pt`` is neither."""
        if pt.equals(self.p, epsilon):
            return self.q.copy()
        if pt.equals(self.q, epsilon):
            return self.p.copy()
        return None

    def is_aligned(self, pt: Point, epsilon: float = EPS) -> bool:
        """
        Test whether ``pt`` is between the perpendiculars at the endpoints.

        The point must be on the same side of the perpendicular through
        ``p`` as ``q``, and on the same side of the perpendicular through
        ``q`` as ``p``.
        """
        if self.pl.is_on_same_side(pt, self.q, epsilon):
            return self.ql.is_on_same_side(pt, self.p, epsilon)
        return False

    def is_aligned_segment(self, segment: "LineSegment", epsilon: float = EPS) -> bool:
        return self.is_aligned(segment.p, epsilon) and self.is_aligned(segment.q, epsilon)

    def intersects_point(self, pt: Point, epsilon: float = EPS) -> bool:
        if pt.equals(self.p, epsilon) or pt.equals(self.q, epsilon):
            return True
        if not self.aabb.intersects_point(pt, epsilon):
            return False
        return self.line.intersects_point(pt, epsilon) and self.is_aligned(pt, epsilon)

    def intersects_line(self, line: Line, epsilon: float = EPS) -> bool:
        return self.intersection_line(line, epsilon) is not None

    def intersection_line(self, line: Line,
                          epsilon: float = EPS) -> Optional[Union[Point, "LineSegment"]]:
        """
        Intersection with an infinite line.

        Returns
        -------
        LineSegment, Point or None
            A copy of this segment if it lies on ``line``, the crossing
            point if it is within the segment, else None.
        """
        if self.line.is_parallel(line, epsilon):
            if line.intersects_point(self.p, epsilon) and line.intersects_point(self.q, epsilon):
                return self.copy()
            return None
        for pt in self.points:
            if line.intersects_point(pt, epsilon):
                return pt.copy()
        pt = self.line._crossing(line)
        if self.is_aligned(pt, epsilon):
            return pt
        return None

    def intersects_segment(self, segment: "LineSegment", epsilon: float = EPS) -> bool:
        return self.intersection_segment(segment, epsilon) is not None

    def intersection_segment(self, segment: "LineSegment",
                             epsilon: float = EPS) -> Optional[Union[Point, "LineSegment"]]:
        """
        Intersection with another segment.

        Parameters
        ----------
        segment : LineSegment
            The other segment.
        epsilon : float
            Tolerance.

        Returns
        -------
        LineSegment, Point or None
            The overlapping sub-segment when the segments are collinear
            and overlap, the touching or crossing point, or None.
        """
        if not self.aabb.intersects_aabb(segment.aabb, epsilon):
            return None
        if self.line.is_parallel(segment.line, epsilon):
            if not (self.line.intersects_point(segment.p, epsilon)
                    and self.line.intersects_point(segment.q, epsilon)):
                return None
            return self._overlap(segment, epsilon)
        for pt in self.points:
            if segment.intersects_point(pt, epsilon):
                return pt.copy()
        for pt in segment.points:
            if self.intersects_point(pt, epsilon):
                return pt.copy()
        pt = self.line._crossing(segment.line)
        if self.is_aligned(pt, epsilon) and segment.is_aligned(pt, epsilon):
            return pt
        return None

    def _overlap(self, segment: "LineSegment",
                 epsilon: float) -> Optional[Union[Point, "LineSegment"]]:
        # Collinear case: keep the endpoints of each segment that fall
        # within the other and span them.
        pts = [pt for pt in self.points if segment.is_aligned(pt, epsilon)]
        pts.extend(pt for pt in segment.points if self.is_aligned(pt, epsilon))
        return LineSegment.get_geometry(pts, epsilon)

    def intersects_aabb(self, box: AABB, epsilon: float = EPS) -> bool:
        """True if the segment touches or crosses the box."""
        if not self.aabb.intersects_aabb(box, epsilon):
            return False
        if box.intersects_point(self.p, epsilon) or box.intersects_point(self.q, epsilon):
            return True
        for edge in (box.left, box.right, box.top, box.bottom):
            if isinstance(edge, LineSegment):
                if self.intersects_segment(edge, epsilon):
                    return True
            elif self.intersects_point(edge, epsilon):
                return True
        return False

    def nearest_point(self, pt: Point) -> Point:
        """The point of the segment closest to ``pt``."""
        if self.is_aligned(pt, 0.0):
            return self.line.point_of_intersection(pt, 0.0)
        if pt.distance_squared(self.p) <= pt.distance_squared(self.q):
            return self.p.copy()
        return self.q.copy()

    def distance_squared_to_point(self, pt: Point) -> float:
        return pt.distance_squared(self.nearest_point(pt))

    def distance_to_point(self, pt: Point) -> float:
        """
        Distance from ``pt`` to the segment.

        The perpendicular distance to the line when ``pt`` is aligned with
        the segment, otherwise the distance to the nearer endpoint.
        """
        if self.is_aligned(pt, 0.0):
            return self.line.distance_to_point(pt)
        return min(pt.distance(self.p), pt.distance(self.q))

    def distance_to_line(self, line: Line, epsilon: float = EPS) -> float:
        if self.intersects_line(line, epsilon):
            return 0.0
        return min(line.distance_to_point(self.p), line.distance_to_point(self.q))

    def distance_to_segment(self, segment: "LineSegment", epsilon: float = EPS) -> float:
        """Zero if the segments intersect, else the closest approach."""
        if self.intersects_segment(segment, epsilon):
            return 0.0
        return min(self.distance_to_point(segment.p), self.distance_to_point(segment.q),
                   segment.distance_to_point(self.p), segment.distance_to_point(self.q))

    def line_of_intersection_line(self, line: Line,
                                  epsilon: float = EPS) -> Optional["LineSegment"]:
        """
        Shortest segment from this segment to ``line``.

        Returns None when they intersect.
        """
        if self.intersects_line(line, epsilon):
            return None
        nearest = min(self.points, key=line.distance_to_point)
        return LineSegment(nearest, line.point_of_intersection(nearest, 0.0))

    def line_of_intersection_segment(self, segment: "LineSegment",
                                     epsilon: float = EPS) -> Optional["LineSegment"]:
        """
        Shortest segment joining this segment to ``segment``.

        The result starts on this segment and ends on ``segment``, or is
        None when the segments intersect.
        """
        if self.intersects_segment(segment, epsilon):
            return None
        candidates = [(self.nearest_point(pt), pt) for pt in segment.points]
        candidates.extend((pt, segment.nearest_point(pt)) for pt in self.points)
        a, b = min(candidates, key=lambda c: c[0].distance_squared(c[1]))
        return LineSegment(a, b)

    def to_array(self) -> np.ndarray:
        return np.array([[self.p.x, self.p.y], [self.q.x, self.q.y]], dtype=np.float64)

    @staticmethod
    def from_points(points: Sequence[Point], epsilon: float = EPS) -> "LineSegment":
        """
        Smallest segment spanning a set of collinear points.

        Raises
        ------
        DegenerateGeometryError
            If fewer than two distinct points are given.
        """
        line = Line.line_through(list(points), epsilon)
        if line is None:
            raise DegenerateGeometryError("Need at least two distinct points to span a segment")
        return LineSegment(line.p, line.q)

    @staticmethod
    def get_geometry(points: Iterable[Point],
                     epsilon: float = EPS) -> Optional[Union[Point, "LineSegment"]]:
        """
        Collapse collinear points to a point or a spanning segment.

        Returns None for an empty input.
        """
        unique = Point.get_unique(points, epsilon)
        if not unique:
            return None
        if len(unique) == 1:
            return unique[0].copy()
        return LineSegment.from_points(unique, epsilon)

    @staticmethod
    def any_intersects_point(segments: Iterable["LineSegment"], pt: Point,
                             epsilon: float = EPS) -> bool:
        return any(s.intersects_point(pt, epsilon) for s in segments)

    @staticmethod
    def any_intersects_segment(segments: Iterable["LineSegment"], segment: "LineSegment",
                               epsilon: float = EPS) -> bool:
        return any(s.intersects_segment(segment, epsilon) for s in segments)
