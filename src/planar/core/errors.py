"""
Exceptions raised by the geometry kernel.
"""


class DegenerateGeometryError(ValueError):
    """
    Raised when a geometry cannot be constructed from the given input.

    Examples are a line with a zero direction vector, a segment whose
    endpoints coincide, a triangle with repeated vertices, or an empty point
    collection passed where at least one point is required.
    """
