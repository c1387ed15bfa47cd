"""
Conversions to and from numpy arrays and Shapely geometries.
"""

from .arrays import points_from_array, points_to_array
from .shapely_io import to_shapely, from_shapely, shapely_to_numpy

__all__ = [
    'points_from_array',
    'points_to_array',
    'to_shapely',
    'from_shapely',
    'shapely_to_numpy',
]
