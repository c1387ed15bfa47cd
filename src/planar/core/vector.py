"""
Free vectors in the plane.
"""

import math
from dataclasses import dataclass

import numpy as np

from .geometry import EPS, equals, normalise_angle


@dataclass(frozen=True)
class Vector:
    """
    An immutable 2D vector.

    Attributes
    ----------
    dx : float
        Component along the x axis.
    dy : float
        Component along the y axis.
    """
    dx: float
    dy: float

    def __add__(self, v: "Vector") -> "Vector":
        return self.add(v)

    def __sub__(self, v: "Vector") -> "Vector":
        return self.subtract(v)

    def __neg__(self) -> "Vector":
        return self.reverse()

    def __mul__(self, s: float) -> "Vector":
        return self.multiply(s)

    __rmul__ = __mul__

    def add(self, v: "Vector") -> "Vector":
        return Vector(self.dx + v.dx, self.dy + v.dy)

    def subtract(self, v: "Vector") -> "Vector":
        return Vector(self.dx - v.dx, self.dy - v.dy)

    def multiply(self, s: float) -> "Vector":
        return Vector(self.dx * s, self.dy * s)

    def divide(self, s: float) -> "Vector":
        return Vector(self.dx / s, self.dy / s)

    def reverse(self) -> "Vector":
        return Vector(-self.dx, -self.dy)

    def dot(self, v: "Vector") -> float:
        """Dot product."""
        return self.dx * v.dx + self.dy * v.dy

    def det(self, v: "Vector") -> float:
        """
        2D determinant ``dx * v.dy - dy * v.dx``.

        Positive when ``v`` is counter-clockwise from this vector; its
        magnitude is twice the area of the triangle the two vectors span.
        """
        return self.dx * v.dy - self.dy * v.dx

    def magnitude_squared(self) -> float:
        return self.dx * self.dx + self.dy * self.dy

    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    def unit_vector(self) -> "Vector":
        """
        Vector of length 1 in the same direction.

        Raises
        ------
        ZeroDivisionError
            If this is the zero vector.
        """
        m = self.magnitude()
        return Vector(self.dx / m, self.dy / m)

    def is_zero(self, epsilon: float = 0.0) -> bool:
        return equals(self.dx, 0.0, epsilon) and equals(self.dy, 0.0, epsilon)

    def equals(self, v: "Vector", epsilon: float = EPS) -> bool:
        """Component-wise comparison within ``epsilon``."""
        return equals(self.dx, v.dx, epsilon) and equals(self.dy, v.dy, epsilon)

    def is_reverse(self, v: "Vector", epsilon: float = EPS) -> bool:
        return self.equals(v.reverse(), epsilon)

    def is_scalar_multiple(self, v: "Vector", epsilon: float = 0.0) -> bool:
        """
        Test whether this vector is a scalar multiple of ``v``.

        The zero vector is only a multiple of another zero vector, while
        every vector is a multiple of zero (with the scalar zero). With
        ``epsilon == 0`` the test is exact.

        Parameters
        ----------
        v : Vector
            The vector to compare against.
        epsilon : float
            Tolerance for component comparisons.

        Returns
        -------
        bool
            True if ``self == k * v`` or ``v == k * self`` for some scalar.
        """
        if self.equals(v, epsilon):
            return True
        if self.is_zero(epsilon):
            return v.is_zero(epsilon)
        if v.is_zero(epsilon):
            return True
        if epsilon == 0.0:
            return self.det(v) == 0.0
        # Scale by the dominant component.
        if abs(self.dx) >= abs(self.dy):
            k = v.dx / self.dx
            return equals(v.dy, self.dy * k, epsilon)
        k = v.dy / self.dy
        return equals(v.dx, self.dx * k, epsilon)

    def is_orthogonal(self, v: "Vector", epsilon: float = EPS) -> bool:
        """
        Test whether the vectors are at right angles.

        Scalar multiples are never reported as orthogonal, which matters
        when one of them is (nearly) zero.
        """
        if self.is_scalar_multiple(v, epsilon):
            return False
        return equals(self.dot(v), 0.0, epsilon)

    def angle(self, v: "Vector") -> float:
        """Unsigned angle to ``v`` in [0, pi]."""
        c = self.dot(v) / (self.magnitude() * v.magnitude())
        return math.acos(max(-1.0, min(1.0, c)))

    def angle2(self, v: "Vector") -> float:
        """Signed angle to ``v`` in (-pi, pi], counter-clockwise positive."""
        return math.atan2(self.det(v), self.dot(v))

    def rotate90(self) -> "Vector":
        """Rotate a quarter turn counter-clockwise."""
        return Vector(-self.dy, self.dx)

    def rotate(self, theta: float) -> "Vector":
        """
        Rotate clockwise by ``theta`` radians.

        The angle is normalised into [0, 2*pi) first; a zero angle returns
        an unchanged copy.
        """
        theta = normalise_angle(theta)
        if theta == 0.0:
            return Vector(self.dx, self.dy)
        return self.rotate_n(theta)

    def rotate_n(self, theta: float) -> "Vector":
        """Rotate clockwise by an already normalised angle."""
        cos = math.cos(theta)
        sin = math.sin(theta)
        return Vector(self.dx * cos + self.dy * sin,
                      self.dy * cos - self.dx * sin)

    def direction(self) -> int:
        """
        Quadrant code of the direction.

        Returns
        -------
        int
            0 for the zero vector, 1 for ``dx >= 0, dy >= 0``, 2 for
            ``dx >= 0, dy < 0``, 3 for ``dx < 0, dy >= 0`` and 4 for
            ``dx < 0, dy < 0``.
        """
        if self.dx >= 0.0:
            if self.dy >= 0.0:
                return 0 if self.is_zero() else 1
            return 2
        return 3 if self.dy >= 0.0 else 4

    def to_array(self) -> np.ndarray:
        return np.array([self.dx, self.dy], dtype=np.float64)


Vector.ZERO = Vector(0.0, 0.0)
Vector.I = Vector(1.0, 0.0)
Vector.J = Vector(0.0, 1.0)
