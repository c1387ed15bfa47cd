"""
Triangles, rectangles, convex hulls and polygons.
"""

from .area import Area
from .triangle import Triangle
from .convex import ConvexArea, convex_hull, get_geometry, merge_fragments
from .rectangle import Rectangle
from .polygon import PolygonWithoutInternalHoles

__all__ = [
    'Area',
    'Triangle',
    'ConvexArea',
    'convex_hull',
    'get_geometry',
    'merge_fragments',
    'Rectangle',
    'PolygonWithoutInternalHoles',
]
