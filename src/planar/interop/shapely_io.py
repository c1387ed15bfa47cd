"""
Conversion between kernel geometries and Shapely geometries.

Shapely is used for interchange only; every predicate in the kernel is
computed natively.
"""

from typing import Optional

import numpy as np
from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.geometry import Point as ShapelyPoint

from ..areas.convex import get_geometry
from ..areas.polygon import PolygonWithoutInternalHoles
from ..core.environment import Environment
from ..core.geometry import EPS, ensure_ccw
from ..core.kinds import IntersectionKind
from ..lines.line import Line
from ..lines.segment import LineSegment
from .arrays import points_from_array


def to_shapely(geometry):
    """
    Convert a finite kernel geometry to Shapely.

    Parameters
    ----------
    geometry : Point, LineSegment, AABB or Area
        The geometry to convert.

    Returns
    -------
    shapely.geometry.Point, LineString or Polygon

    Raises
    ------
    ValueError
        If the geometry is unbounded (a line or ray).
    """
    kind = geometry.kind
    if kind is IntersectionKind.POINT:
        return ShapelyPoint(geometry.x, geometry.y)
    if kind is IntersectionKind.SEGMENT:
        return LineString(geometry.to_array())
    if kind is IntersectionKind.POLYGON:
        coords = geometry.to_array()
        if len(coords) == 1:
            return ShapelyPoint(coords[0])
        if len(coords) == 2:
            return LineString(coords)
        return Polygon(ensure_ccw(coords))
    raise ValueError(f"Cannot convert unbounded geometry of kind {kind.value} to Shapely")


def shapely_to_numpy(geom) -> np.ndarray:
    """
    Vertices of a Shapely geometry as an array of shape (M, 2).

    Polygons give their exterior ring without the closing duplicate vertex
    that Shapely adds; a MultiPolygon gives its largest part.
    """
    if isinstance(geom, MultiPolygon):
        geom = max(geom.geoms, key=lambda g: g.area)
    if isinstance(geom, Polygon):
        coords = np.array(geom.exterior.coords)
        if len(coords) > 1 and np.allclose(coords[0], coords[-1]):
            coords = coords[:-1]
        return coords
    return np.array(geom.coords).reshape(-1, 2)


def from_shapely(geom, epsilon: float = EPS, env: Optional[Environment] = None):
    """
    Convert a Shapely geometry to the kernel.

    Parameters
    ----------
    geom : shapely Point, LineString, Polygon or MultiPolygon
        The geometry to convert.
    epsilon : float
        Tolerance for duplicate and collinear points.
    env : Environment, optional
        Environment given to the new geometry.

    Returns
    -------
    Point, LineSegment or PolygonWithoutInternalHoles
        Points and two point lines map directly, straight lines with more
        points to the segment spanning them, and polygons to a polygon built from
        their exterior ring.
    """
    points = points_from_array(shapely_to_numpy(geom), env)
    if isinstance(geom, (Polygon, MultiPolygon)):
        return PolygonWithoutInternalHoles(points, epsilon=epsilon, env=env)
    if isinstance(geom, LineString) and len(points) > 2:
        if not Line.is_collinear(points, epsilon):
            raise ValueError("Only straight LineStrings can be converted to a segment")
        return LineSegment.from_points(points, epsilon)
    return get_geometry(points, epsilon, env)
