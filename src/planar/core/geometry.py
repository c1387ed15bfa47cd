"""
Scalar and array helpers shared by every geometry type.

Contains utility functions for:
- Tolerance-aware comparison
- Angle normalisation
- The half-plane (same side) predicate
- Polygon area, orientation and centroid on numpy arrays
- Vectorised point-in-convex-polygon testing
- Angular ordering of points about a centre
"""

import math
from typing import List, Sequence

import numpy as np


# Numerical tolerance for floating point comparisons
EPS = 1e-10

TWO_PI = 2.0 * math.pi


def equals(a: float, b: float, epsilon: float = EPS) -> bool:
    """Return True if ``a`` and ``b`` differ by no more than ``epsilon``."""
    return abs(a - b) <= epsilon


def normalise_angle(theta: float) -> float:
    """
    Map an angle in radians into the interval [0, 2*pi).

    Parameters
    ----------
    theta : float
        Angle in radians, any sign or magnitude.

    Returns
    -------
    float
        Equivalent angle in [0, 2*pi).
    """
    theta = math.fmod(theta, TWO_PI)
    if theta < 0.0:
        theta += TWO_PI
    if theta >= TWO_PI:
        theta = 0.0
    return theta


def side(x1: float, y1: float, x2: float, y2: float,
         px: float, py: float) -> float:
    """
    Signed side value of ``(px, py)`` relative to the line through
    ``(x1, y1)`` and ``(x2, y2)``.

    The sign says which half-plane the point is in and the value is zero on
    the line. Two points are on the same side when the product of their
    side values is non-negative.
    """
    return (y1 - y2) * (px - x1) + (x2 - x1) * (py - y1)


def as_points_array(points) -> np.ndarray:
    """
    Convert input to a float array of shape (N, 2).

    Raises
    ------
    ValueError
        If the input does not have shape (N, 2).
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {points.shape}")
    return points


def signed_area(poly: np.ndarray) -> float:
    """
    Signed shoelace area; positive for counter-clockwise rings.
    """
    if len(poly) < 3:
        return 0.0
    x = poly[:, 0]
    y = poly[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def polygon_area(poly: np.ndarray) -> float:
    """
    Compute the area of a polygon using the shoelace formula.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).

    Returns
    -------
    float
        Area of the polygon, zero for fewer than three vertices.
    """
    return abs(signed_area(poly))


def ensure_ccw(poly: np.ndarray) -> np.ndarray:
    """
    Ensure polygon vertices are in counter-clockwise order.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).

    Returns
    -------
    np.ndarray
        Polygon vertices in CCW order.
    """
    if signed_area(poly) < 0:
        return poly[::-1].copy()
    return poly


def centroid(poly: np.ndarray) -> np.ndarray:
    """Mean of the vertices, shape (2,)."""
    return np.mean(as_points_array(poly), axis=0)


def contains(poly: np.ndarray, points: np.ndarray,
             epsilon: float = EPS) -> np.ndarray:
    """
    Test if points are inside or on a convex polygon.

    Uses the cross-product / half-plane test: a point is inside iff it is
    on the left of, or on, every edge of the counter-clockwise ring.

    Parameters
    ----------
    poly : np.ndarray, shape (M, 2)
        Convex polygon vertices in CCW order
    points : np.ndarray, shape (K, 2)
        Points to test
    epsilon : float
        Tolerance applied to the cross products.

    Returns
    -------
    np.ndarray, shape (K,), dtype=bool
        True if point is inside or on the polygon boundary
    """
    points = np.atleast_2d(np.asarray(points, dtype=np.float64))
    n_vertices = len(poly)
    n_points = len(points)

    if n_vertices < 3:
        return np.zeros(n_points, dtype=bool)

    inside = np.ones(n_points, dtype=bool)
    for i in range(n_vertices):
        v1 = poly[i]
        v2 = poly[(i + 1) % n_vertices]
        edge = v2 - v1
        to_points = points - v1
        cross = edge[0] * to_points[:, 1] - edge[1] * to_points[:, 0]
        inside &= (cross >= -epsilon)

    return inside


def sort_by_angle(points: Sequence, centre, reference) -> List:
    """
    Order points by their angle about a centre.

    Angles are signed angles from the direction ``centre -> reference``,
    in (-pi, pi]. Points at the same angle are ordered nearest first.

    Parameters
    ----------
    points : sequence of Point
        Points to order.
    centre : Point
        A point near the middle of ``points``.
    reference : Point
        Point fixing the zero direction.

    Returns
    -------
    list of Point
        A new, sorted list.
    """
    rx = reference.x - centre.x
    ry = reference.y - centre.y

    def key(pt):
        ax = pt.x - centre.x
        ay = pt.y - centre.y
        angle = math.atan2(rx * ay - ry * ax, rx * ax + ry * ay)
        return angle, ax * ax + ay * ay

    return sorted(points, key=key)
