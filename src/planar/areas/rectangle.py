"""
Rectangles made of two triangles sharing the ``r``-``p`` diagonal.
"""

import warnings
from functools import cached_property
from typing import List, Optional

from ..core.environment import Environment
from ..core.geometry import EPS, equals
from ..core.point import Point
from ..core.vector import Vector
from ..lines.line import Line
from ..lines.ray import Ray
from ..lines.segment import LineSegment
from .area import Area
from .convex import merge_fragments
from .triangle import Triangle


class Rectangle(Area):
    """
    A rectangle ``p, q, r, s`` stored as triangles ``pqr`` and ``rsp``.

    The rectangle property is checked on construction and a warning is
    issued when it fails; the shape is still built.

    Parameters
    ----------
    p, q, r, s : Point
        Corners in boundary order.
    env : Environment, optional
        Defaults to the environment of ``p``.
    """

    def __init__(self, p: Point, q: Point, r: Point, s: Point,
                 env: Optional[Environment] = None):
        super().__init__(self._resolve_env(env, (p, q, r, s)))
        self.pqr = Triangle(p, q, r, self.env)
        self.rsp = Triangle(r, s, p, self.env)
        if not Rectangle.is_rectangle(p, q, r, s, epsilon=self.env.epsilon):
            warnings.warn(f"Points {p!r}, {q!r}, {r!r}, {s!r} do not form a rectangle")

    @property
    def p(self) -> Point:
        return self.pqr.p

    @property
    def q(self) -> Point:
        return self.pqr.q

    @property
    def r(self) -> Point:
        return self.pqr.r

    @property
    def s(self) -> Point:
        return self.rsp.q

    def _vertices(self) -> List[Point]:
        return [self.p, self.q, self.r, self.s]

    @cached_property
    def triangles(self) -> List[Triangle]:
        return [self.pqr, self.rsp]

    def translate(self, v: Vector) -> None:
        super().translate(v)
        self.pqr.translate(v)
        self.rsp.translate(v)

    def copy(self) -> "Rectangle":
        return Rectangle(self.p, self.q, self.r, self.s, self.env)

    def rotate_n(self, pivot: Point, theta: float) -> "Rectangle":
        p, q, r, s = (pt.rotate_n(pivot, theta) for pt in self.points)
        return Rectangle(p, q, r, s, self.env)

    def equals(self, rectangle: "Rectangle", epsilon: float = EPS) -> bool:
        return self.same_points(rectangle, epsilon)

    def area(self) -> float:
        return self.pqr.area() + self.rsp.area()

    def intersects_point(self, pt: Point, epsilon: float = EPS) -> bool:
        if not self.aabb.intersects_point(pt, epsilon):
            return False
        return (self.pqr.intersects_point0(pt, epsilon)
                or self.rsp.intersects_point0(pt, epsilon))

    def contains_segment(self, segment: LineSegment, epsilon: float = EPS) -> bool:
        return all(self.contains_point(pt, epsilon) for pt in segment.points)

    def contains_triangle(self, triangle: Triangle, epsilon: float = EPS) -> bool:
        return all(self.contains_point(pt, epsilon) for pt in triangle.points)

    def intersects_line(self, line: Line, epsilon: float = EPS) -> bool:
        return self.pqr.intersects_line(line, epsilon) or self.rsp.intersects_line(line, epsilon)

    def intersects_triangle(self, triangle: Triangle, epsilon: float = EPS) -> bool:
        return self.intersects_area(triangle, epsilon)

    def intersection_line(self, line: Line, epsilon: float = EPS):
        """Chord cut by ``line``: a segment, a point or None."""
        return merge_fragments([t.intersection_line(line, epsilon) for t in self.triangles],
                               epsilon, self.env)

    def intersection_ray(self, ray: Ray, epsilon: float = EPS):
        return merge_fragments([t.intersection_ray(ray, epsilon) for t in self.triangles],
                               epsilon, self.env)

    def intersection_segment(self, segment: LineSegment, epsilon: float = EPS):
        return merge_fragments([t.intersection_segment(segment, epsilon) for t in self.triangles],
                               epsilon, self.env)

    def intersection_triangle(self, triangle: Triangle, epsilon: float = EPS):
        """
        Overlap with a triangle.

        Returns
        -------
        Triangle, ConvexArea, LineSegment, Point or None
        """
        if not self.aabb.intersects_aabb(triangle.aabb, epsilon):
            return None
        return merge_fragments([t.intersection_triangle(triangle, epsilon)
                                for t in self.triangles], epsilon, self.env)

    def distance_to_line(self, line: Line, epsilon: float = EPS) -> float:
        return min(t.distance_to_line(line, epsilon) for t in self.triangles)

    def distance_to_triangle(self, triangle: Triangle, epsilon: float = EPS) -> float:
        return min(t.distance_to_triangle(triangle, epsilon) for t in self.triangles)

    @staticmethod
    def is_rectangle(p: Point, q: Point, r: Point, s: Point, epsilon: float = EPS) -> bool:
        """
        Test whether ``p, q, r, s`` in order form a rectangle.

        Opposite sides must be parallel and the sides meeting at ``q``
        perpendicular.
        """
        if len(Point.get_unique([p, q, r, s], epsilon)) < 4:
            return False
        pq = Vector(q.x - p.x, q.y - p.y)
        qr = Vector(r.x - q.x, r.y - q.y)
        rs = Vector(s.x - r.x, s.y - r.y)
        sp = Vector(p.x - s.x, p.y - s.y)
        return (pq.is_scalar_multiple(rs, epsilon)
                and qr.is_scalar_multiple(sp, epsilon)
                and equals(pq.dot(qr), 0.0, epsilon))
