"""
Polygons without internal holes.

A polygon is given by a ring of boundary points. It is stored as its
convex hull plus a list of external holes: each stretch of the ring that
leaves the hull boundary and later returns to it cuts a concavity out of
the hull. A hole is itself a ``PolygonWithoutInternalHoles`` built from
that stretch and the two hull points bracketing it, so concavities within
concavities are handled by recursion.
"""

import logging
from typing import Iterable, List, Optional

from ..core.environment import Environment
from ..core.errors import DegenerateGeometryError
from ..core.geometry import EPS
from ..core.point import Point
from ..core.vector import Vector
from ..lines.segment import LineSegment
from .area import Area
from .convex import ConvexArea


logger = logging.getLogger(__name__)


class PolygonWithoutInternalHoles(Area):
    """
    A simple polygon as a convex hull minus external holes.

    Parameters
    ----------
    points : iterable of Point
        The boundary ring, clockwise or counter-clockwise, without a
        repeated closing point.
    ch : ConvexArea, optional
        The convex hull of ``points`` if already known.
    epsilon : float
        Tolerance for duplicate points and hull boundary tests.
    env : Environment, optional
        Defaults to the environment of the first point.

    Raises
    ------
    DegenerateGeometryError
        If ``points`` is empty.
    """

    def __init__(self, points: Iterable[Point], ch: Optional[ConvexArea] = None,
                 epsilon: float = EPS, env: Optional[Environment] = None):
        points = list(points)
        if not points:
            raise DegenerateGeometryError("Cannot build a polygon from no points")
        super().__init__(self._resolve_env(env, points))
        self.epsilon = epsilon
        self.ch = ch if ch is not None else ConvexArea(points, epsilon, self.env)
        self.external_holes: List["PolygonWithoutInternalHoles"] = []
        self._rels: List[Vector] = []
        self._decompose(points, epsilon)

    def _decompose(self, points: List[Point], epsilon: float) -> None:
        n = len(points)
        on_hull = [None] * n

        def hull_point(i):
            if on_hull[i] is None:
                on_hull[i] = self.ch.on_boundary(points[i], epsilon)
            return on_hull[i]

        start = next(i for i in range(n) if hull_point(i))
        prev = points[start]
        prev_on = True
        in_hole = False
        run = []
        ring = []
        # Walk once round the ring from the first hull point back to it.
        for k in range(1, n + 1):
            pt = points[(start + k) % n]
            if pt.equals(prev, epsilon):
                pt_on = prev_on
            else:
                pt_on = hull_point((start + k) % n)
                if in_hole:
                    if pt_on:
                        run.extend((prev, pt))
                        self.add_external_hole(PolygonWithoutInternalHoles(
                            run, epsilon=epsilon, env=self.env))
                        run = []
                        in_hole = False
                    else:
                        run.append(prev)
                elif prev_on and not pt_on:
                    run = [prev]
                    in_hole = True
                ring.append(prev)
            prev = pt
            prev_on = pt_on
        if not ring:
            ring.append(points[start])
        self._rels = [pt.vector() for pt in ring]
        logger.debug("Polygon ring of %d points from index %d has %d external holes",
                     len(ring), start, len(self.external_holes))

    def _vertices(self) -> List[Point]:
        return [self._point(rel) for rel in self._rels]

    def add_external_hole(self, hole: "PolygonWithoutInternalHoles") -> int:
        """Append a hole and return its index."""
        self.external_holes.append(hole)
        return len(self.external_holes) - 1

    def convex_area(self) -> ConvexArea:
        """A copy of the convex hull."""
        return self.ch.copy()

    def get_external_holes(self) -> List["PolygonWithoutInternalHoles"]:
        """Copies of the external holes."""
        return [hole.copy() for hole in self.external_holes]

    def translate(self, v: Vector) -> None:
        super().translate(v)
        self.ch.translate(v)
        for hole in self.external_holes:
            hole.translate(v)

    def copy(self) -> "PolygonWithoutInternalHoles":
        return PolygonWithoutInternalHoles(self.points, epsilon=self.epsilon, env=self.env)

    def rotate_n(self, pivot: Point, theta: float) -> "PolygonWithoutInternalHoles":
        return PolygonWithoutInternalHoles([pt.rotate_n(pivot, theta) for pt in self.points],
                                           epsilon=self.epsilon, env=self.env)

    def equals(self, other: "PolygonWithoutInternalHoles", epsilon: float = EPS) -> bool:
        return self.same_points(other, epsilon)

    def area(self) -> float:
        """Hull area less the area of each external hole."""
        return self.ch.area() - sum(hole.area() for hole in self.external_holes)

    def on_boundary(self, pt: Point, epsilon: float = EPS) -> bool:
        if len(self.points) == 1:
            return pt.equals(self.points[0], epsilon)
        return super().on_boundary(pt, epsilon)

    def intersects_point(self, pt: Point, epsilon: float = EPS) -> bool:
        """
        Boundary inclusive point test.

        A point intersects when it is on the ring, or inside the hull and
        not inside (or on the boundary of) any external hole.
        """
        if not self.aabb.intersects_point(pt, epsilon):
            return False
        if self.on_boundary(pt, epsilon):
            return True
        if not self.ch.intersects_point(pt, epsilon):
            return False
        return not any(hole.intersects_point(pt, epsilon) for hole in self.external_holes)

    def contains_segment(self, segment: LineSegment, epsilon: float = EPS) -> bool:
        """True if the segment is inside without touching the boundary."""
        if not all(self.contains_point(pt, epsilon) for pt in segment.points):
            return False
        return not LineSegment.any_intersects_segment(self.edges, segment, epsilon)

    def contains_area(self, other, epsilon: float = EPS) -> bool:
        """True if every edge of ``other`` is contained."""
        if not self.aabb.contains_aabb(other.aabb):
            return False
        edges = other.edges
        if not edges:
            return all(self.contains_point(pt, epsilon) for pt in other.points)
        return all(self.contains_segment(edge, epsilon) for edge in edges)

    contains_triangle = contains_area
    contains_rectangle = contains_area
    contains_convex = contains_area
    contains_polygon = contains_area

    def contains_aabb(self, box, epsilon: float = EPS) -> bool:
        return self.contains_area(ConvexArea(box.points, epsilon, self.env), epsilon)

    intersects_triangle = Area.intersects_area
    intersects_convex = Area.intersects_area
    intersects_polygon = Area.intersects_area
