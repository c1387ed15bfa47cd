"""
Rays: half-infinite lines.
"""

from functools import cached_property
from typing import Optional, Union

from ..core.geometry import EPS, normalise_angle
from ..core.kinds import IntersectionKind
from ..core.point import Point
from ..core.vector import Vector
from .line import Line
from .segment import LineSegment


class Ray:
    """
    The part of a line from a start point onwards in one direction.

    The valid half of the line is the side of the perpendicular through
    the start that contains ``q``.

    Parameters
    ----------
    start : Point
        Where the ray begins.
    through : Point
        Another point on the ray, distinct from ``start``.
    """

    kind = IntersectionKind.RAY

    def __init__(self, start: Point, through: Point):
        self.line = Line(start, through)

    @classmethod
    def from_point(cls, start: Point, v: Vector) -> "Ray":
        """Ray from ``start`` in direction ``v`` (which must be non-zero)."""
        line = Line.from_point(start, v)
        return cls(line.p, line.q)

    @property
    def start(self) -> Point:
        return self.line.p

    @property
    def env(self):
        return self.line.env

    @cached_property
    def pl(self) -> Line:
        """Perpendicular through the start."""
        return Line.from_point(self.start, self.line.v.rotate90())

    def translate(self, v: Vector) -> None:
        self.line.translate(v)
        self.__dict__.pop("pl", None)

    def copy(self) -> "Ray":
        return Ray(self.line.p, self.line.q)

    def rotate(self, pivot: Point, theta: float) -> "Ray":
        theta = normalise_angle(theta)
        if theta == 0.0:
            return self.copy()
        return self.rotate_n(pivot, theta)

    def rotate_n(self, pivot: Point, theta: float) -> "Ray":
        return Ray(self.line.p.rotate_n(pivot, theta), self.line.q.rotate_n(pivot, theta))

    def __repr__(self):
        return f"Ray({self.start!r}, {self.line.v!r})"

    def equals(self, ray: "Ray", epsilon: float = EPS) -> bool:
        """Same start and same direction."""
        if not self.start.equals(ray.start, epsilon):
            return False
        return (self.line.v.dot(ray.line.v) > 0.0
                and self.line.v.is_scalar_multiple(ray.line.v, epsilon))

    def is_aligned(self, pt: Point, epsilon: float = EPS) -> bool:
        """True if ``pt`` is on the forward side of the start perpendicular."""
        return self.pl.is_on_same_side(pt, self.line.q, epsilon)

    def intersects_point(self, pt: Point, epsilon: float = EPS) -> bool:
        return self.line.intersects_point(pt, epsilon) and self.is_aligned(pt, epsilon)

    def distance_to_point(self, pt: Point) -> float:
        if self.is_aligned(pt, 0.0):
            return self.line.distance_to_point(pt)
        return pt.distance(self.start)

    def intersects_line(self, line: Line, epsilon: float = EPS) -> bool:
        return self.intersection_line(line, epsilon) is not None

    def intersection_line(self, line: Line,
                          epsilon: float = EPS) -> Optional[Union[Point, "Ray"]]:
        """
        Intersection with an infinite line.

        Returns
        -------
        Ray, Point or None
            A copy of this ray if it lies on ``line``, the crossing point
            if it is ahead of the start, else None.
        """
        if self.line.is_parallel(line, epsilon):
            if self.line.equals(line, epsilon):
                return self.copy()
            return None
        if line.intersects_point(self.start, epsilon):
            return self.start.copy()
        pt = self.line._crossing(line)
        if self.is_aligned(pt, epsilon):
            return pt
        return None

    def intersects_ray(self, ray: "Ray", epsilon: float = EPS) -> bool:
        return self.intersection_ray(ray, epsilon) is not None

    def intersection_ray(self, ray: "Ray", epsilon: float = EPS
                         ) -> Optional[Union[Point, LineSegment, "Ray"]]:
        """
        Intersection of two rays.

        Collinear rays pointing the same way overlap in the one that starts
        further along. Collinear rays pointing opposite ways overlap between
        their starts when each start is ahead of the other, touch at a point
        when the starts coincide, and are disjoint otherwise.

        Returns
        -------
        Ray, LineSegment, Point or None
        """
        if self.line.is_parallel(ray.line, epsilon):
            if not self.line.intersects_point(ray.start, epsilon):
                return None
            if self.line.v.dot(ray.line.v) > 0.0:
                if self.is_aligned(ray.start, epsilon):
                    return ray.copy()
                return self.copy()
            if self.is_aligned(ray.start, epsilon) and ray.is_aligned(self.start, epsilon):
                if self.start.equals(ray.start, epsilon):
                    return self.start.copy()
                return LineSegment(self.start, ray.start)
            return None
        for pt in (self.start, ray.start):
            if self.intersects_point(pt, epsilon) and ray.intersects_point(pt, epsilon):
                return pt.copy()
        pt = self.line._crossing(ray.line)
        if self.is_aligned(pt, epsilon) and ray.is_aligned(pt, epsilon):
            return pt
        return None

    def intersects_segment(self, segment: LineSegment, epsilon: float = EPS) -> bool:
        return self.intersection_segment(segment, epsilon) is not None

    def intersection_segment(self, segment: LineSegment, epsilon: float = EPS
                             ) -> Optional[Union[Point, LineSegment]]:
        """
        Intersection with a segment.

        Returns
        -------
        LineSegment, Point or None
            The part of ``segment`` ahead of the start when collinear, the
            crossing point, or None.
        """
        if self.line.is_parallel(segment.line, epsilon):
            if not (self.line.intersects_point(segment.p, epsilon)
                    and self.line.intersects_point(segment.q, epsilon)):
                return None
            pts = [pt for pt in segment.points if self.is_aligned(pt, epsilon)]
            if segment.is_aligned(self.start, epsilon):
                pts.append(self.start)
            return LineSegment.get_geometry(pts, epsilon)
        for pt in segment.points:
            if self.intersects_point(pt, epsilon):
                return pt.copy()
        if segment.intersects_point(self.start, epsilon):
            return self.start.copy()
        pt = self.line._crossing(segment.line)
        if self.is_aligned(pt, epsilon) and segment.is_aligned(pt, epsilon):
            return pt
        return None
