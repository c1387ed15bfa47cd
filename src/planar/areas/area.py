"""
Common base for two-dimensional shapes.
"""

from abc import ABC, abstractmethod
from functools import cached_property
from typing import List, Optional

import numpy as np

from ..core.aabb import AABB
from ..core.environment import Environment
from ..core.geometry import EPS, normalise_angle
from ..core.kinds import IntersectionKind
from ..core.point import Point, points_array
from ..core.vector import Vector
from ..lines.segment import LineSegment


class Area(ABC):
    """
    Base class of Triangle, Rectangle, ConvexArea and
    PolygonWithoutInternalHoles.

    Vertices are stored relative to ``offset``. Vertex lists, edge lists
    and the bounding box are computed on first use and cleared by
    ``translate``.

    Parameters
    ----------
    env : Environment, optional
        Source of the shape's ``id``. A new environment is created when
        none is given, so ids are only unique among shapes that share an
        environment. Pass one environment to every constructor, or build
        the points with it, to get distinct ids across shapes.
    """

    kind = IntersectionKind.POLYGON

    # Names of cached properties dropped when the shape moves.
    _cached = ("points", "edges", "aabb")

    def __init__(self, env: Optional[Environment] = None):
        self.env = env if env is not None else Environment()
        self.id = self.env.next_id()
        self.offset = Vector.ZERO

    @staticmethod
    def _resolve_env(env: Optional[Environment], points) -> Optional[Environment]:
        if env is not None:
            return env
        for pt in points:
            return pt.env
        return None

    def _point(self, rel: Vector) -> Point:
        return Point.from_vector(rel, self.offset, self.env)

    @abstractmethod
    def _vertices(self) -> List[Point]:
        """Vertices in boundary order."""

    @cached_property
    def points(self) -> List[Point]:
        return self._vertices()

    @cached_property
    def edges(self) -> List[LineSegment]:
        """Boundary edges, closing back to the first vertex."""
        return ring_edges(self.points)

    @cached_property
    def aabb(self) -> AABB:
        return AABB.from_points(self.points)

    def _invalidate(self) -> None:
        for name in self._cached:
            self.__dict__.pop(name, None)

    def translate(self, v: Vector) -> None:
        """Move the shape by ``v`` in place."""
        self.offset = self.offset.add(v)
        self._invalidate()

    def rotate(self, pivot: Point, theta: float) -> "Area":
        """
        Rotate clockwise about ``pivot`` by ``theta`` radians.

        Parameters
        ----------
        pivot : Point
            Centre of rotation.
        theta : float
            Angle in radians, normalised into [0, 2*pi) first.

        Returns
        -------
        Area
            A new shape; a copy when the angle normalises to zero.
        """
        theta = normalise_angle(theta)
        if theta == 0.0:
            return self.copy()
        return self.rotate_n(pivot, theta)

    @abstractmethod
    def rotate_n(self, pivot: Point, theta: float) -> "Area":
        """Rotate clockwise about ``pivot`` by a normalised angle."""

    @abstractmethod
    def copy(self) -> "Area":
        pass

    @abstractmethod
    def area(self) -> float:
        pass

    @abstractmethod
    def intersects_point(self, pt: Point, epsilon: float = EPS) -> bool:
        pass

    def perimeter(self) -> float:
        return sum(edge.length() for edge in self.edges)

    def on_boundary(self, pt: Point, epsilon: float = EPS) -> bool:
        """True if ``pt`` is on one of the edges."""
        return LineSegment.any_intersects_point(self.edges, pt, epsilon)

    def contains_point(self, pt: Point, epsilon: float = EPS) -> bool:
        """Interior containment: the point intersects but is not on an edge."""
        return self.intersects_point(pt, epsilon) and not self.on_boundary(pt, epsilon)

    def intersects_segment(self, segment: LineSegment, epsilon: float = EPS) -> bool:
        if not self.aabb.intersects_aabb(segment.aabb, epsilon):
            return False
        if self.intersects_point(segment.p, epsilon) or self.intersects_point(segment.q, epsilon):
            return True
        return LineSegment.any_intersects_segment(self.edges, segment, epsilon)

    def intersects_area(self, other: "Area", epsilon: float = EPS) -> bool:
        """
        True if two shapes touch or overlap.

        Either a vertex of one lies in the other or two edges cross.
        """
        if not self.aabb.intersects_aabb(other.aabb, epsilon):
            return False
        if any(self.intersects_point(pt, epsilon) for pt in other.points):
            return True
        if any(other.intersects_point(pt, epsilon) for pt in self.points):
            return True
        return any(LineSegment.any_intersects_segment(self.edges, edge, epsilon)
                   for edge in other.edges)

    def intersects_aabb(self, box: AABB, epsilon: float = EPS) -> bool:
        if not self.aabb.intersects_aabb(box, epsilon):
            return False
        if any(box.intersects_point(pt, epsilon) for pt in self.points):
            return True
        if any(self.intersects_point(pt, epsilon) for pt in box.points):
            return True
        return any(edge.intersects_aabb(box, epsilon) for edge in self.edges)

    def distance_to_point(self, pt: Point, epsilon: float = EPS) -> float:
        if self.intersects_point(pt, epsilon):
            return 0.0
        return min(edge.distance_to_point(pt) for edge in self.edges)

    def distance_to_segment(self, segment: LineSegment, epsilon: float = EPS) -> float:
        if self.intersects_segment(segment, epsilon):
            return 0.0
        return min(edge.distance_to_segment(segment, epsilon) for edge in self.edges)

    def same_points(self, other: "Area", epsilon: float = EPS) -> bool:
        """True if both shapes have the same vertex set within ``epsilon``."""
        return (all(pt.equals_any(other.points, epsilon) for pt in self.points)
                and all(pt.equals_any(self.points, epsilon) for pt in other.points))

    def to_array(self) -> np.ndarray:
        """Vertices as an array of shape (N, 2)."""
        return points_array(self.points)

    def __repr__(self):
        pts = ", ".join(repr(pt) for pt in self.points)
        return f"{type(self).__name__}(id={self.id}, [{pts}])"


def ring_edges(points: List[Point]) -> List[LineSegment]:
    """
    Segments joining consecutive points of a closed ring.

    Repeated consecutive points are skipped and a two point ring gives a
    single segment.
    """
    n = len(points)
    if n < 2:
        return []
    if n == 2:
        return [LineSegment(points[0], points[1])] if points[0] != points[1] else []
    edges = []
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        if a != b:
            edges.append(LineSegment(a, b))
    return edges
