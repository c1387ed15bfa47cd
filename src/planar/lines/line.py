"""
Infinite lines.

A line is a point vector ``pv`` and a non-zero direction ``v``, both
relative to an offset. The derived points ``p = pv + offset`` and
``q = p + v`` are computed on first use and dropped when the line moves.
Every half-plane test in the kernel goes through ``Line.is_on_same_side``.
"""

from functools import cached_property
from typing import Optional, Sequence, Union

import numpy as np

from ..core.errors import DegenerateGeometryError
from ..core.geometry import EPS, equals, normalise_angle, side
from ..core.kinds import IntersectionKind
from ..core.point import Point
from ..core.vector import Vector


class Line:
    """
    An infinite line through two distinct points.

    Parameters
    ----------
    p : Point
        A point on the line.
    q : Point
        A second point on the line, distinct from ``p``.

    Raises
    ------
    DegenerateGeometryError
        If ``p`` and ``q`` are the same point.
    """

    kind = IntersectionKind.LINE

    def __init__(self, p: Point, q: Point):
        v = Vector(q.x - p.x, q.y - p.y)
        if v.is_zero():
            raise DegenerateGeometryError(f"Cannot define a line from coincident points {p!r}")
        self.env = p.env
        self.offset = Vector.ZERO
        self.pv = p.vector()
        self.v = v

    @classmethod
    def from_point(cls, p: Point, v: Vector) -> "Line":
        """
        Line through ``p`` with direction ``v``.

        Raises
        ------
        DegenerateGeometryError
            If ``v`` is the zero vector.
        """
        if v.is_zero():
            raise DegenerateGeometryError("Cannot define a line with a zero direction vector")
        return cls(p, Point(p.x + v.dx, p.y + v.dy, p.env))

    @cached_property
    def p(self) -> Point:
        return Point.from_vector(self.pv, self.offset, self.env)

    @cached_property
    def q(self) -> Point:
        return Point.from_vector(self.pv.add(self.v), self.offset, self.env)

    def _invalidate(self) -> None:
        self.__dict__.pop("p", None)
        self.__dict__.pop("q", None)

    def translate(self, v: Vector) -> None:
        """Move the line by ``v`` in place."""
        self.offset = self.offset.add(v)
        self._invalidate()

    def copy(self) -> "Line":
        return Line(self.p, self.q)

    def rotate(self, pivot: Point, theta: float) -> "Line":
        """Rotate clockwise about ``pivot``; a zero angle copies."""
        theta = normalise_angle(theta)
        if theta == 0.0:
            return self.copy()
        return self.rotate_n(pivot, theta)

    def rotate_n(self, pivot: Point, theta: float) -> "Line":
        return Line.from_point(self.p.rotate_n(pivot, theta), self.v.rotate_n(theta))

    def __repr__(self):
        return f"Line({self.p!r}, {self.q!r})"

    def equals(self, line: "Line", epsilon: float = EPS) -> bool:
        """True if both defining points of this line lie on ``line``."""
        return line.intersects_point(self.p, epsilon) and line.intersects_point(self.q, epsilon)

    def is_parallel(self, line: "Line", epsilon: float = EPS) -> bool:
        return self.v.is_scalar_multiple(line.v, epsilon)

    def is_vertical(self, epsilon: float = 0.0) -> bool:
        return equals(self.v.dx, 0.0, epsilon)

    def is_horizontal(self, epsilon: float = 0.0) -> bool:
        return equals(self.v.dy, 0.0, epsilon)

    def distance_to_point(self, pt: Point) -> float:
        """Perpendicular distance from ``pt`` to the line."""
        w = Vector(pt.x - self.p.x, pt.y - self.p.y)
        return abs(self.v.det(w)) / self.v.magnitude()

    def distance_to_line(self, line: "Line", epsilon: float = EPS) -> float:
        """Zero unless the lines are parallel, else the gap between them."""
        if self.is_parallel(line, epsilon):
            return self.distance_to_point(line.p)
        return 0.0

    def intersects_point(self, pt: Point, epsilon: float = EPS) -> bool:
        if pt.equals(self.p, epsilon) or pt.equals(self.q, epsilon):
            return True
        return self.distance_to_point(pt) <= epsilon

    def point_of_intersection(self, pt: Point, epsilon: float = EPS) -> Point:
        """
        Foot of the perpendicular from ``pt`` to the line.

        Returns a copy of ``pt`` when it is already on the line.
        """
        if self.intersects_point(pt, epsilon):
            return pt.copy()
        w = Vector(pt.x - self.p.x, pt.y - self.p.y)
        t = w.dot(self.v) / self.v.magnitude_squared()
        return Point(self.p.x + self.v.dx * t, self.p.y + self.v.dy * t, self.env)

    def is_on_same_side(self, a: Point, b: Point, epsilon: float = EPS) -> bool:
        """
        Half-plane test.

        True when ``a`` and ``b`` are both on the line, or when the product
        of their side values is at least ``-epsilon``. A single point on the
        line is therefore on the same side as any other point.

        Parameters
        ----------
        a, b : Point
            The points to compare.
        epsilon : float
            Tolerance.

        Returns
        -------
        bool
            True if neither point is strictly on the opposite side.
        """
        if self.intersects_point(a, epsilon) and self.intersects_point(b, epsilon):
            return True
        p = self.p
        q = self.q
        sa = side(p.x, p.y, q.x, q.y, a.x, a.y)
        sb = side(p.x, p.y, q.x, q.y, b.x, b.y)
        return sa * sb + epsilon >= 0.0

    def intersects_line(self, line: "Line", epsilon: float = EPS) -> bool:
        if self.is_parallel(line, epsilon):
            return self.equals(line, epsilon)
        return True

    def intersection_line(self, line: "Line",
                          epsilon: float = EPS) -> Optional[Union["Line", Point]]:
        """
        Intersection of two infinite lines.

        Returns
        -------
        Line, Point or None
            A copy of this line if the lines coincide, None if they are
            parallel and distinct, else the crossing point.
        """
        if self.is_parallel(line, epsilon):
            if self.equals(line, epsilon):
                return self.copy()
            return None
        return self._crossing(line)

    def _crossing(self, line: "Line") -> Point:
        # Cramer's rule on the two-point forms of the lines.
        x1, y1 = self.p.x, self.p.y
        x2, y2 = self.q.x, self.q.y
        x3, y3 = line.p.x, line.p.y
        x4, y4 = line.q.x, line.q.y
        den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        a = x1 * y2 - y1 * x2
        b = x3 * y4 - y3 * x4
        return Point((a * (x3 - x4) - (x1 - x2) * b) / den,
                     (a * (y3 - y4) - (y1 - y2) * b) / den, self.env)

    def to_array(self) -> np.ndarray:
        """2x2 array with rows ``p`` and ``q``."""
        return np.array([[self.p.x, self.p.y], [self.q.x, self.q.y]], dtype=np.float64)

    @staticmethod
    def line_through(points: Sequence[Point], epsilon: float = EPS) -> Optional["Line"]:
        """
        Line through the two points of ``points`` furthest apart.

        Returns None when all points are equal within ``epsilon``.
        """
        best = None
        best_d2 = -1.0
        for i, a in enumerate(points):
            for b in points[i + 1:]:
                d2 = a.distance_squared(b)
                if d2 > best_d2:
                    best = (a, b)
                    best_d2 = d2
        if best is None or best[0].equals(best[1], epsilon):
            return None
        return Line(*best)

    @staticmethod
    def is_collinear(points: Sequence[Point], epsilon: float = EPS) -> bool:
        """
        True if all points lie on one line.

        A collection of coincident points defines no line and is not
        collinear.
        """
        line = Line.line_through(points, epsilon)
        if line is None:
            return False
        return all(line.intersects_point(pt, epsilon) for pt in points)
