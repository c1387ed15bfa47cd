"""
Points in the plane.

A point is stored as a relative vector plus an offset. The absolute
position is ``rel + offset``; translating a point only moves its offset.
"""

import math
from functools import total_ordering
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .environment import Environment
from .geometry import EPS, centroid, equals, normalise_angle
from .kinds import IntersectionKind
from .vector import Vector


@total_ordering
class Point:
    """
    A position in the plane.

    Points order by ``(y, x)`` ascending, which is the order the convex
    hull construction sorts its input in.

    Parameters
    ----------
    x, y : float
        Absolute coordinates.
    env : Environment, optional
        Environment shared with geometries built from this point.
    """

    kind = IntersectionKind.POINT

    def __init__(self, x: float, y: float, env: Optional[Environment] = None):
        self.env = env
        self.offset = Vector.ZERO
        self.rel = Vector(float(x), float(y))

    @classmethod
    def from_vector(cls, rel: Vector, offset: Vector = Vector.ZERO,
                    env: Optional[Environment] = None) -> "Point":
        """Create a point at ``rel + offset`` keeping the decomposition."""
        pt = cls(0.0, 0.0, env)
        pt.rel = rel
        pt.offset = offset
        return pt

    @classmethod
    def centroid(cls, points: Sequence["Point"],
                 env: Optional[Environment] = None) -> "Point":
        """Mean position of ``points``."""
        c = centroid(points_array(points))
        return cls(c[0], c[1], env)

    @property
    def x(self) -> float:
        return self.rel.dx + self.offset.dx

    @property
    def y(self) -> float:
        return self.rel.dy + self.offset.dy

    @property
    def points(self) -> List["Point"]:
        return [self]

    @property
    def aabb(self):
        from .aabb import AABB
        return AABB.from_points([self])

    def vector(self) -> Vector:
        """Position vector from the origin."""
        return Vector(self.x, self.y)

    def copy(self) -> "Point":
        return Point.from_vector(self.rel, self.offset, self.env)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __lt__(self, other: "Point"):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    __hash__ = None

    def __repr__(self):
        return f"Point({self.x!r}, {self.y!r})"

    def equals(self, pt: "Point", epsilon: float = EPS) -> bool:
        """Compare absolute coordinates component-wise within ``epsilon``."""
        return equals(self.x, pt.x, epsilon) and equals(self.y, pt.y, epsilon)

    def equals_all(self, points: Iterable["Point"], epsilon: float = EPS) -> bool:
        return all(self.equals(pt, epsilon) for pt in points)

    def equals_any(self, points: Iterable["Point"], epsilon: float = EPS) -> bool:
        return any(self.equals(pt, epsilon) for pt in points)

    def is_origin(self, epsilon: float = 0.0) -> bool:
        return equals(self.x, 0.0, epsilon) and equals(self.y, 0.0, epsilon)

    def set_offset(self, offset: Vector) -> None:
        """Replace the offset, adjusting ``rel`` so the point stays put."""
        self.rel = self.rel.add(self.offset).subtract(offset)
        self.offset = offset

    def set_rel(self, rel: Vector) -> None:
        """Replace ``rel``, adjusting the offset so the point stays put."""
        self.offset = self.offset.add(self.rel).subtract(rel)
        self.rel = rel

    def translate(self, v: Vector) -> None:
        """Move the point by ``v`` in place."""
        self.offset = self.offset.add(v)

    def distance_squared(self, pt: "Point") -> float:
        dx = self.x - pt.x
        dy = self.y - pt.y
        return dx * dx + dy * dy

    def distance(self, pt: "Point") -> float:
        return math.hypot(self.x - pt.x, self.y - pt.y)

    def rotate(self, pivot: "Point", theta: float) -> "Point":
        """
        Rotate clockwise about ``pivot`` by ``theta`` radians.

        The angle is normalised into [0, 2*pi) and a zero angle returns a
        copy without touching the coordinates.
        """
        theta = normalise_angle(theta)
        if theta == 0.0:
            return self.copy()
        return self.rotate_n(pivot, theta)

    def rotate_n(self, pivot: "Point", theta: float) -> "Point":
        """Rotate clockwise about ``pivot`` by a normalised angle."""
        tv = pivot.vector()
        rv = self.vector().subtract(tv).rotate_n(theta)
        return Point.from_vector(rv, tv, self.env)

    def is_between(self, a: "Point", b: "Point", epsilon: float = EPS) -> bool:
        """
        Test whether this point lies in the strip between ``a`` and ``b``.

        The strip is bounded by the two lines perpendicular to ``a -> b``
        through ``a`` and ``b``. This does not test collinearity.
        """
        from ..lines.line import Line
        if self.equals(a, epsilon) or self.equals(b, epsilon):
            return True
        if a.equals(b, epsilon):
            return False
        v90 = Vector(b.x - a.x, b.y - a.y).rotate90()
        if Line.from_point(a, v90).is_on_same_side(self, b, epsilon):
            return Line.from_point(b, v90).is_on_same_side(self, a, epsilon)
        return False

    def location(self) -> int:
        """
        Quadrant code of the position.

        Returns
        -------
        int
            0 at the origin, 1 for ``x >= 0, y >= 0``, 2 for
            ``x >= 0, y < 0``, 3 for ``x < 0, y >= 0`` and 4 for
            ``x < 0, y < 0``.
        """
        return self.vector().direction()

    def distance_to_point(self, pt: "Point") -> float:
        return self.distance(pt)

    def intersects_point(self, pt: "Point", epsilon: float = EPS) -> bool:
        return self.equals(pt, epsilon)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @staticmethod
    def get_unique(points: Iterable["Point"], epsilon: float = EPS) -> List["Point"]:
        """
        Remove points equal within ``epsilon`` to an earlier one.

        Parameters
        ----------
        points : iterable of Point
            Points in order.
        epsilon : float
            Tolerance for equality.

        Returns
        -------
        list of Point
            The first occurrence of each distinct point, in input order.
        """
        unique = []
        for pt in points:
            if not pt.equals_any(unique, epsilon):
                unique.append(pt)
        return unique


def points_array(points: Sequence[Point]) -> np.ndarray:
    """Stack point coordinates into an array of shape (N, 2)."""
    return np.array([[pt.x, pt.y] for pt in points], dtype=np.float64).reshape(-1, 2)
