"""
Shared settings for a family of geometries.

An ``Environment`` carries the default tolerance used when validating new
shapes and hands out identifiers for areas. It is owned by the caller and
passed to constructors explicitly; nothing in the kernel keeps a global one.
Identifiers are unique within one environment only: shapes created without
an environment, from points that carry none, each get a fresh one.
"""

import itertools
from dataclasses import dataclass, field
from typing import Iterator

from .geometry import EPS


@dataclass
class Environment:
    """
    Tolerance and id allocation shared by related geometries.

    Attributes
    ----------
    epsilon : float
        Tolerance used by constructors that must validate their input
        (for example rejecting a triangle with coincident vertices).
    """
    epsilon: float = EPS
    _ids: Iterator[int] = field(
        default_factory=itertools.count, init=False, repr=False, compare=False
    )

    def next_id(self) -> int:
        """Return the next unused identifier."""
        return next(self._ids)
