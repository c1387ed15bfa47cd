"""
Core value types and numeric helpers.
"""

from .geometry import (
    EPS,
    equals,
    normalise_angle,
    polygon_area,
    ensure_ccw,
    centroid,
    contains,
    sort_by_angle,
)
from .errors import DegenerateGeometryError
from .environment import Environment
from .kinds import IntersectionKind, classify
from .vector import Vector
from .point import Point
from .aabb import AABB

__all__ = [
    'EPS',
    'equals',
    'normalise_angle',
    'polygon_area',
    'ensure_ccw',
    'centroid',
    'contains',
    'sort_by_angle',
    'DegenerateGeometryError',
    'Environment',
    'IntersectionKind',
    'classify',
    'Vector',
    'Point',
    'AABB',
]
