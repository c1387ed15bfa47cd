"""
Conversion between numpy arrays and points.
"""

from typing import List, Optional, Sequence

import numpy as np

from ..core.environment import Environment
from ..core.geometry import as_points_array
from ..core.point import Point, points_array


def points_from_array(arr, env: Optional[Environment] = None) -> List[Point]:
    """
    Build points from the rows of an array.

    Parameters
    ----------
    arr : array_like
        Coordinates of shape (N, 2).
    env : Environment, optional
        Environment given to every point.

    Returns
    -------
    list of Point

    Raises
    ------
    ValueError
        If ``arr`` does not have shape (N, 2).
    """
    arr = as_points_array(arr)
    return [Point(x, y, env) for x, y in arr]


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Coordinates of ``points`` as an array of shape (N, 2)."""
    return points_array(points)
