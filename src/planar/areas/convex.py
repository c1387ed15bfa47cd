"""
Convex hulls.

``ConvexArea`` builds the convex hull of a point set with the monotone
chain algorithm and keeps it in counter-clockwise order, starting from the
lowest point (smallest ``y``, then smallest ``x``). Containment and
intersection run over the triangle fan from the first hull vertex.

``get_geometry`` and ``merge_fragments`` collapse the raw output of the
intersection routines (loose points and segments) into the simplest shape
that covers them.
"""

import logging
from functools import cached_property
from typing import Iterable, List, Optional

import numpy as np

from ..core.environment import Environment
from ..core.errors import DegenerateGeometryError
from ..core.geometry import EPS, contains, polygon_area
from ..core.point import Point
from ..lines.line import Line
from ..lines.segment import LineSegment
from .area import Area
from .triangle import Triangle


logger = logging.getLogger(__name__)


def _turn(o: Point, a: Point, b: Point) -> float:
    """Cross product of ``o -> a`` and ``o -> b``; positive for a left turn."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _is_left_turn(o: Point, a: Point, b: Point, epsilon: float) -> bool:
    """
    True if ``o -> a -> b`` turns left by more than ``epsilon``.

    The cross product is compared against ``epsilon`` times the two edge
    lengths, so ``epsilon`` bounds the sine of the turn angle.
    """
    return _turn(o, a, b) > epsilon * o.distance(a) * o.distance(b)


def convex_hull(points: Iterable[Point], epsilon: float = EPS) -> List[Point]:
    """
    Convex hull by Andrew's monotone chain.

    Parameters
    ----------
    points : iterable of Point
        Input points, in any order.
    epsilon : float
        Tolerance used to merge near-duplicate input points, and the
        largest sine of a turn angle treated as no turn.

    Returns
    -------
    list of Point
        Hull vertices counter-clockwise with no repeated closing vertex.
        Points on a hull edge but not at a corner are dropped. Fewer than
        three vertices are returned for coincident or collinear input.
    """
    points = list(points)
    pts = sorted(Point.get_unique(points, epsilon))
    if len(pts) < 3:
        hull = pts
    else:
        hull = []
        for pt in pts:
            while len(hull) >= 2 and not _is_left_turn(hull[-2], hull[-1], pt, epsilon):
                hull.pop()
            hull.append(pt)
        t = len(hull) + 1
        for pt in reversed(pts[:-1]):
            while len(hull) >= t and not _is_left_turn(hull[-2], hull[-1], pt, epsilon):
                hull.pop()
            hull.append(pt)
        hull.pop()
        hull = Point.get_unique(hull, epsilon)
    logger.debug("Convex hull of %d points (%d unique) has %d vertices",
                 len(points), len(pts), len(hull))
    return hull


class ConvexArea(Area):
    """
    The convex hull of a set of points.

    Parameters
    ----------
    points : iterable of Point
        Points to enclose; need not be in convex position.
    epsilon : float
        Tolerance for merging near-duplicate points.
    env : Environment, optional
        Defaults to the environment of the first point.

    Raises
    ------
    DegenerateGeometryError
        If ``points`` is empty.
    """

    _cached = Area._cached + ("triangles",)

    def __init__(self, points: Iterable[Point], epsilon: float = EPS,
                 env: Optional[Environment] = None):
        points = list(points)
        if not points:
            raise DegenerateGeometryError("Cannot build a convex hull from no points")
        super().__init__(self._resolve_env(env, points))
        self.epsilon = epsilon
        self._rels = [pt.vector() for pt in convex_hull(points, epsilon)]

    @classmethod
    def from_array(cls, arr, epsilon: float = EPS,
                   env: Optional[Environment] = None) -> "ConvexArea":
        """Hull of the rows of an array of shape (N, 2)."""
        from ..interop.arrays import points_from_array
        return cls(points_from_array(arr, env), epsilon, env)

    def _vertices(self) -> List[Point]:
        return [self._point(rel) for rel in self._rels]

    @cached_property
    def triangles(self) -> List[Triangle]:
        """Fan ``(p0, p_i, p_i+1)`` covering the hull."""
        pts = self.points
        return [Triangle(pts[0], pts[i], pts[i + 1], self.env, self.epsilon)
                for i in range(1, len(pts) - 1)]

    def copy(self) -> "ConvexArea":
        return ConvexArea(self.points, self.epsilon, self.env)

    def rotate_n(self, pivot: Point, theta: float) -> "ConvexArea":
        return ConvexArea([pt.rotate_n(pivot, theta) for pt in self.points],
                          self.epsilon, self.env)

    def equals(self, other: "ConvexArea", epsilon: float = EPS) -> bool:
        return self.same_points(other, epsilon)

    def area(self) -> float:
        return polygon_area(self.to_array())

    def on_boundary(self, pt: Point, epsilon: float = EPS) -> bool:
        if len(self.points) == 1:
            return pt.equals(self.points[0], epsilon)
        return super().on_boundary(pt, epsilon)

    def intersects_point(self, pt: Point, epsilon: float = EPS) -> bool:
        """Boundary inclusive point test."""
        if not self.aabb.intersects_point(pt, epsilon):
            return False
        if len(self.points) < 3:
            return self.on_boundary(pt, epsilon)
        return any(t.intersects_point0(pt, epsilon) for t in self.triangles)

    def intersects_points(self, arr: np.ndarray, epsilon: float = EPS) -> np.ndarray:
        """
        Vectorised boundary inclusive test for many points.

        Parameters
        ----------
        arr : np.ndarray
            Points of shape (K, 2).
        epsilon : float
            Tolerance on the edge cross products.

        Returns
        -------
        np.ndarray
            Boolean array of shape (K,).
        """
        return contains(self.to_array(), arr, epsilon)

    def contains_segment(self, segment: LineSegment, epsilon: float = EPS) -> bool:
        return all(self.contains_point(pt, epsilon) for pt in segment.points)

    def contains_area(self, other: Area, epsilon: float = EPS) -> bool:
        """True if every vertex of ``other`` is inside this hull."""
        return all(self.contains_point(pt, epsilon) for pt in other.points)

    contains_triangle = contains_area
    contains_rectangle = contains_area
    contains_convex = contains_area

    intersects_triangle = Area.intersects_area
    intersects_rectangle = Area.intersects_area
    intersects_convex = Area.intersects_area

    def _pieces(self):
        if len(self.points) >= 3:
            return self.triangles
        if len(self.points) == 2:
            return self.edges
        return self.points

    def intersection_line(self, line: Line, epsilon: float = EPS):
        """
        Intersection with an infinite line.

        Returns
        -------
        LineSegment, Point or None
        """
        if len(self.points) == 1:
            pt = self.points[0]
            return pt.copy() if line.intersects_point(pt, epsilon) else None
        return merge_fragments([piece.intersection_line(line, epsilon)
                                for piece in self._pieces()], epsilon, self.env)

    def intersection_segment(self, segment: LineSegment, epsilon: float = EPS):
        """
        Part of ``segment`` inside the hull.

        Returns
        -------
        LineSegment, Point or None
        """
        if not self.aabb.intersects_aabb(segment.aabb, epsilon):
            return None
        if len(self.points) == 1:
            pt = self.points[0]
            return pt.copy() if segment.intersects_point(pt, epsilon) else None
        return merge_fragments([piece.intersection_segment(segment, epsilon)
                                for piece in self._pieces()], epsilon, self.env)

    def intersection_triangle(self, triangle: Triangle, epsilon: float = EPS):
        """
        Overlap with a triangle.

        Returns
        -------
        Triangle, ConvexArea, LineSegment, Point or None
        """
        if not self.aabb.intersects_aabb(triangle.aabb, epsilon):
            return None
        if len(self.points) < 3:
            fragments = [triangle.intersection_segment(e, epsilon) for e in self.edges]
            fragments.extend(pt for pt in self.points if triangle.intersects_point(pt, epsilon))
            return merge_fragments(fragments, epsilon, self.env)
        return merge_fragments([t.intersection_triangle(triangle, epsilon)
                                for t in self.triangles], epsilon, self.env)

    def intersection_convex(self, other: "ConvexArea", epsilon: float = EPS):
        """
        Overlap of two hulls.

        Returns
        -------
        Triangle, ConvexArea, LineSegment, Point or None
        """
        if not self.aabb.intersects_aabb(other.aabb, epsilon):
            return None
        if len(other.points) >= 3:
            return merge_fragments([self.intersection_triangle(t, epsilon)
                                    for t in other.triangles], epsilon, self.env)
        if len(other.points) == 2:
            return self.intersection_segment(other.edges[0], epsilon)
        pt = other.points[0]
        return pt.copy() if self.intersects_point(pt, epsilon) else None

    def simplify(self, epsilon: float = EPS) -> Area:
        """
        Downgrade to a Triangle or Rectangle where possible.

        Returns
        -------
        Area
            A Triangle for a three vertex hull, a Rectangle for a four
            vertex hull with right-angled corners, otherwise this hull.
        """
        from .rectangle import Rectangle
        pts = self.points
        if len(pts) == 3:
            return Triangle(pts[0], pts[1], pts[2], self.env, self.epsilon)
        if len(pts) == 4 and Rectangle.is_rectangle(*pts, epsilon=epsilon):
            return Rectangle(pts[0], pts[1], pts[2], pts[3], self.env)
        return self


def get_geometry(points: Iterable[Point], epsilon: float = EPS,
                 env: Optional[Environment] = None):
    """
    Collapse points to the smallest geometry covering them.

    Parameters
    ----------
    points : iterable of Point
        Points, possibly with near duplicates.
    epsilon : float
        Tolerance for duplicates and collinearity.
    env : Environment, optional
        Environment for any area created.

    Returns
    -------
    Point, LineSegment, Triangle, ConvexArea or None
        None for no points, a point for one distinct point, a segment for
        collinear points, a triangle for three points (or a hull with
        three corners) and otherwise the convex hull.
    """
    unique = Point.get_unique(points, epsilon)
    if not unique:
        return None
    if len(unique) == 1:
        return unique[0].copy()
    if len(unique) == 2:
        return LineSegment(unique[0], unique[1])
    if Line.is_collinear(unique, epsilon):
        return LineSegment.from_points(unique, epsilon)
    if len(unique) == 3:
        return Triangle(unique[0], unique[1], unique[2], env, epsilon)
    hull = ConvexArea(unique, epsilon, env)
    if len(hull.points) == 3:
        return Triangle(*hull.points, env, epsilon)
    return hull


def merge_fragments(fragments: Iterable, epsilon: float = EPS,
                    env: Optional[Environment] = None):
    """
    Combine pieces of a convex intersection into one geometry.

    Parameters
    ----------
    fragments : iterable
        Points, segments, areas or None, all lying in one convex region.
    epsilon : float
        Tolerance passed to ``get_geometry``.
    env : Environment, optional
        Environment for any area created.

    Returns
    -------
    Point, LineSegment, Triangle, ConvexArea or None
        The hull of every vertex of every fragment.
    """
    pts = []
    for fragment in fragments:
        if fragment is not None:
            pts.extend(fragment.points)
    return get_geometry(pts, epsilon, env)
