"""
Triangles.
"""

import math
from functools import cached_property
from typing import List, Optional, Union

from ..core.environment import Environment
from ..core.errors import DegenerateGeometryError
from ..core.geometry import EPS
from ..core.point import Point
from ..lines.line import Line
from ..lines.ray import Ray
from ..lines.segment import LineSegment
from .area import Area


class Triangle(Area):
    """
    A triangle with vertices ``p``, ``q`` and ``r``.

    Parameters
    ----------
    p, q, r : Point
        The vertices.
    env : Environment, optional
        Defaults to the environment of ``p``.
    epsilon : float, optional
        Tolerance for the distinct-vertex check; defaults to the
        environment's epsilon.

    Raises
    ------
    DegenerateGeometryError
        If two vertices are equal within ``epsilon``.
    """

    _cached = Area._cached + ("p", "q", "r", "pq", "qr", "rp")

    def __init__(self, p: Point, q: Point, r: Point, env: Optional[Environment] = None,
                 epsilon: Optional[float] = None):
        super().__init__(self._resolve_env(env, (p, q, r)))
        if epsilon is None:
            epsilon = self.env.epsilon
        if p.equals(q, epsilon) or q.equals(r, epsilon) or r.equals(p, epsilon):
            raise DegenerateGeometryError(
                f"Triangle vertices must be distinct, got {p!r}, {q!r}, {r!r}")
        self.epsilon = epsilon
        self.pv = p.vector()
        self.qv = q.vector()
        self.rv = r.vector()

    @cached_property
    def p(self) -> Point:
        return self._point(self.pv)

    @cached_property
    def q(self) -> Point:
        return self._point(self.qv)

    @cached_property
    def r(self) -> Point:
        return self._point(self.rv)

    def _vertices(self) -> List[Point]:
        return [self.p, self.q, self.r]

    @cached_property
    def pq(self) -> LineSegment:
        return LineSegment(self.p, self.q)

    @cached_property
    def qr(self) -> LineSegment:
        return LineSegment(self.q, self.r)

    @cached_property
    def rp(self) -> LineSegment:
        return LineSegment(self.r, self.p)

    @cached_property
    def edges(self) -> List[LineSegment]:
        return [self.pq, self.qr, self.rp]

    def copy(self) -> "Triangle":
        return Triangle(self.p, self.q, self.r, self.env, self.epsilon)

    def rotate_n(self, pivot: Point, theta: float) -> "Triangle":
        return Triangle(self.p.rotate_n(pivot, theta), self.q.rotate_n(pivot, theta),
                        self.r.rotate_n(pivot, theta), self.env, self.epsilon)

    def equals(self, triangle: "Triangle", epsilon: float = EPS) -> bool:
        """Same vertices in any order."""
        return self.same_points(triangle, epsilon)

    def area(self) -> float:
        u = self.pq.line.v
        w = self.rp.line.v.reverse()
        return abs(u.det(w)) / 2.0

    def perimeter(self) -> float:
        return self.pq.length() + self.qr.length() + self.rp.length()

    def angle_p(self) -> float:
        """Interior angle at ``p`` in radians."""
        return self.pq.line.v.angle(self.rp.line.v.reverse())

    def angle_q(self) -> float:
        return self.qr.line.v.angle(self.pq.line.v.reverse())

    def angle_r(self) -> float:
        return self.rp.line.v.angle(self.qr.line.v.reverse())

    def centroid(self) -> Point:
        return Point((self.p.x + self.q.x + self.r.x) / 3.0,
                     (self.p.y + self.q.y + self.r.y) / 3.0, self.env)

    def circumcenter(self) -> Point:
        """Centre of the circle through the three vertices."""
        ax, ay = self.p.x, self.p.y
        bx, by = self.q.x, self.q.y
        cx, cy = self.r.x, self.r.y
        d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
        a2 = ax * ax + ay * ay
        b2 = bx * bx + by * by
        c2 = cx * cx + cy * cy
        return Point((a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d,
                     (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d, self.env)

    def opposite(self, edge: LineSegment, epsilon: float = EPS) -> Optional[Point]:
        """
        The vertex not on ``edge``.

        Returns None if ``edge`` is not an edge of this triangle.
        """
        for side, vertex in ((self.pq, self.r), (self.qr, self.p), (self.rp, self.q)):
            if side.equals_ignore_direction(edge, epsilon):
                return vertex.copy()
        return None

    def intersects_point0(self, pt: Point, epsilon: float = EPS) -> bool:
        """
        Point test without the bounding box check.

        True when ``pt`` is on the inner side of each edge line, judged
        against the vertex opposite that edge.
        """
        return (self.pq.line.is_on_same_side(pt, self.r, epsilon)
                and self.qr.line.is_on_same_side(pt, self.p, epsilon)
                and self.rp.line.is_on_same_side(pt, self.q, epsilon))

    def intersects_point(self, pt: Point, epsilon: float = EPS) -> bool:
        """Boundary inclusive point test."""
        if not self.aabb.intersects_point(pt, epsilon):
            return False
        return self.intersects_point0(pt, epsilon)

    def contains_segment(self, segment: LineSegment, epsilon: float = EPS) -> bool:
        return self.contains_point(segment.p, epsilon) and self.contains_point(segment.q, epsilon)

    def contains_triangle(self, triangle: "Triangle", epsilon: float = EPS) -> bool:
        return all(self.contains_point(pt, epsilon) for pt in triangle.points)

    def intersects_line(self, line: Line, epsilon: float = EPS) -> bool:
        return any(edge.intersects_line(line, epsilon) for edge in self.edges)

    def intersects_triangle(self, triangle: "Triangle", epsilon: float = EPS) -> bool:
        return self.intersects_area(triangle, epsilon)

    def intersection_line(self, line: Line, epsilon: float = EPS
                          ) -> Optional[Union[Point, LineSegment]]:
        """
        Intersection with an infinite line.

        Returns
        -------
        LineSegment, Point or None
        """
        from .convex import merge_fragments
        return merge_fragments([edge.intersection_line(line, epsilon) for edge in self.edges],
                               epsilon, self.env)

    def intersection_ray(self, ray: Ray, epsilon: float = EPS
                         ) -> Optional[Union[Point, LineSegment]]:
        """Part of the ray inside the triangle, or None."""
        chord = self.intersection_line(ray.line, epsilon)
        if chord is None:
            return None
        if isinstance(chord, LineSegment):
            return ray.intersection_segment(chord, epsilon)
        return chord if ray.intersects_point(chord, epsilon) else None

    def intersection_segment(self, segment: LineSegment, epsilon: float = EPS
                             ) -> Optional[Union[Point, LineSegment]]:
        """
        Part of ``segment`` inside the triangle.

        Returns
        -------
        LineSegment, Point or None
        """
        from .convex import merge_fragments
        if not self.aabb.intersects_aabb(segment.aabb, epsilon):
            return None
        inside = [pt for pt in segment.points if self.intersects_point(pt, epsilon)]
        if len(inside) == 2:
            return segment.copy()
        fragments = [edge.intersection_segment(segment, epsilon) for edge in self.edges]
        return merge_fragments(fragments + inside, epsilon, self.env)

    def intersection_triangle(self, triangle: "Triangle", epsilon: float = EPS):
        """
        Overlap of two triangles.

        Parameters
        ----------
        triangle : Triangle
            The other triangle.
        epsilon : float
            Tolerance.

        Returns
        -------
        Triangle, ConvexArea, LineSegment, Point or None
            The overlap collapsed to its simplest form.
        """
        from .convex import merge_fragments
        if not self.aabb.intersects_aabb(triangle.aabb, epsilon):
            return None
        if all(self.intersects_point(pt, epsilon) for pt in triangle.points):
            return triangle.copy()
        if all(triangle.intersects_point(pt, epsilon) for pt in self.points):
            return self.copy()
        fragments = [pt for pt in triangle.points if self.intersects_point(pt, epsilon)]
        fragments.extend(pt for pt in self.points if triangle.intersects_point(pt, epsilon))
        for edge in self.edges:
            fragments.extend(edge.intersection_segment(other, epsilon) for other in triangle.edges)
        return merge_fragments(fragments, epsilon, self.env)

    def distance_to_line(self, line: Line, epsilon: float = EPS) -> float:
        if self.intersects_line(line, epsilon):
            return 0.0
        return min(line.distance_to_point(pt) for pt in self.points)

    def distance_to_triangle(self, triangle: "Triangle", epsilon: float = EPS) -> float:
        if self.intersects_triangle(triangle, epsilon):
            return 0.0
        return min(edge.distance_to_segment(other, epsilon)
                   for edge in self.edges for other in triangle.edges)

    def angles(self) -> List[float]:
        return [self.angle_p(), self.angle_q(), self.angle_r()]

    def is_right(self, epsilon: float = EPS) -> bool:
        """True if one interior angle is a right angle."""
        return any(abs(a - math.pi / 2.0) <= epsilon for a in self.angles())
