"""
Lines, segments and rays.
"""

from .line import Line
from .segment import LineSegment
from .ray import Ray

__all__ = [
    'Line',
    'LineSegment',
    'Ray',
]
