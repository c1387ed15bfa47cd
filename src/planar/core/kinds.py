"""
Tags for the shape of an intersection result.

Intersection queries return ``None`` or one of the kernel's geometry
objects. Every geometry class declares a ``kind`` so callers can branch on
the tag instead of on the concrete type.
"""

from enum import Enum


class IntersectionKind(Enum):
    NONE = "none"
    POINT = "point"
    SEGMENT = "segment"
    RAY = "ray"
    LINE = "line"
    POLYGON = "polygon"


def classify(result) -> IntersectionKind:
    """
    Return the tag of an intersection result.

    Parameters
    ----------
    result : geometry or None
        Value returned by one of the ``intersection_*`` methods.

    Returns
    -------
    IntersectionKind
        ``NONE`` for ``None``, otherwise the ``kind`` of the geometry.
    """
    if result is None:
        return IntersectionKind.NONE
    return result.kind
