"""
Planar - a 2D Euclidean geometry kernel.

This package provides value-like geometric primitives that:
- Support intersection, containment and distance queries
- Take an explicit tolerance (epsilon) in every comparison
- Can be translated in place and rotated into new copies

Main Types
----------
Vector, Point : Free vectors and positions
Line, LineSegment, Ray : Unbounded, bounded and half-bounded lines
AABB : Axis-aligned bounding box
Triangle, Rectangle, ConvexArea : Convex shapes
PolygonWithoutInternalHoles : Simple polygon as a hull minus concavities

Example
-------
>>> from planar import Point, LineSegment, Triangle

>>> t = Triangle(Point(0, 0), Point(4, 0), Point(0, 3))
>>> t.area()
6.0
>>> LineSegment(Point(0, 0), Point(2, 2)).intersection_segment(
...     LineSegment(Point(0, 2), Point(2, 0)))
Point(1.0, 1.0)
"""

from .core import (
    EPS,
    AABB,
    DegenerateGeometryError,
    Environment,
    IntersectionKind,
    Point,
    Vector,
    classify,
)
from .lines import Line, LineSegment, Ray
from .areas import (
    Area,
    ConvexArea,
    PolygonWithoutInternalHoles,
    Rectangle,
    Triangle,
    get_geometry,
)
from .interop import from_shapely, to_shapely

__all__ = [
    # Core
    'EPS',
    'Environment',
    'DegenerateGeometryError',
    'IntersectionKind',
    'classify',
    'Vector',
    'Point',
    'AABB',
    # Lines
    'Line',
    'LineSegment',
    'Ray',
    # Areas
    'Area',
    'Triangle',
    'Rectangle',
    'ConvexArea',
    'PolygonWithoutInternalHoles',
    'get_geometry',
    # Interop
    'to_shapely',
    'from_shapely',
]
