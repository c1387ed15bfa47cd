"""
Unit tests for the Vector type.
"""

import math

import pytest

from planar.core.geometry import EPS
from planar.core.vector import Vector


class TestArithmetic:
    """Tests for vector arithmetic."""

    def test_add_subtract(self):
        """Addition and subtraction work component-wise."""
        a = Vector(1, 2)
        b = Vector(3, -1)
        assert a + b == Vector(4, 1)
        assert a - b == Vector(-2, 3)

    def test_scale_and_reverse(self):
        """Scaling and reversing."""
        v = Vector(1.5, -2)
        assert v * 2 == Vector(3, -4)
        assert 2 * v == Vector(3, -4)
        assert -v == Vector(-1.5, 2)
        assert v.divide(0.5) == Vector(3, -4)

    def test_dot_and_det(self):
        """Dot product and determinant of the unit axes."""
        assert Vector.I.dot(Vector.J) == 0.0
        assert Vector.I.det(Vector.J) == 1.0
        assert Vector.J.det(Vector.I) == -1.0

    def test_magnitude(self):
        """3-4-5 triangle."""
        v = Vector(3, 4)
        assert v.magnitude() == 5.0
        assert v.magnitude_squared() == 25.0
        assert abs(v.unit_vector().magnitude() - 1.0) < EPS

    def test_immutable(self):
        """Vectors cannot be modified."""
        v = Vector(1, 2)
        with pytest.raises(AttributeError):
            v.dx = 3


class TestScalarMultiple:
    """Tests for is_scalar_multiple()."""

    def test_parallel(self):
        """A scaled vector is a multiple."""
        assert Vector(1, 2).is_scalar_multiple(Vector(-2, -4))

    def test_not_parallel(self):
        """Vectors in different directions are not multiples."""
        assert not Vector(1, 2).is_scalar_multiple(Vector(2, 1))

    def test_zero_is_only_multiple_of_zero(self):
        """The zero vector is a multiple only of another zero vector."""
        assert Vector.ZERO.is_scalar_multiple(Vector.ZERO)
        assert not Vector.ZERO.is_scalar_multiple(Vector(1, 1))

    def test_non_zero_is_multiple_of_zero(self):
        """Any vector relates to zero via the scalar zero."""
        assert Vector(1, 1).is_scalar_multiple(Vector.ZERO)

    def test_axis_aligned(self):
        """Axis aligned vectors with zero components."""
        assert Vector(0, 3).is_scalar_multiple(Vector(0, -1))
        assert Vector(3, 0).is_scalar_multiple(Vector(-1, 0))
        assert not Vector(0, 3).is_scalar_multiple(Vector(1, 0))

    def test_tolerant(self):
        """A small perturbation is absorbed by epsilon."""
        v = Vector(1, 2)
        w = Vector(2, 4 + 1e-12)
        assert not v.is_scalar_multiple(w)
        assert v.is_scalar_multiple(w, epsilon=1e-9)


class TestOrthogonal:
    """Tests for is_orthogonal()."""

    def test_axes(self):
        """Unit axes are orthogonal."""
        assert Vector.I.is_orthogonal(Vector.J)

    def test_multiple_not_orthogonal(self):
        """Scalar multiples are never orthogonal."""
        assert not Vector(1, 1).is_orthogonal(Vector(2, 2))
        assert not Vector(1, 1).is_orthogonal(Vector.ZERO)

    def test_rotate90_orthogonal(self):
        """A quarter turn gives an orthogonal vector."""
        v = Vector(3, -7)
        assert v.is_orthogonal(v.rotate90())


class TestAngles:
    """Tests for angle() and angle2()."""

    def test_unsigned(self):
        """angle() is symmetric and in [0, pi]."""
        assert abs(Vector.I.angle(Vector.J) - math.pi / 2) < EPS
        assert abs(Vector.J.angle(Vector.I) - math.pi / 2) < EPS

    def test_signed(self):
        """angle2() is counter-clockwise positive."""
        assert abs(Vector.I.angle2(Vector.J) - math.pi / 2) < EPS
        assert abs(Vector.J.angle2(Vector.I) + math.pi / 2) < EPS

    def test_opposite(self):
        """Opposite vectors are pi apart."""
        assert abs(Vector.I.angle2(-Vector.I) - math.pi) < EPS


class TestRotate:
    """Tests for rotate() and rotate_n()."""

    def test_clockwise(self):
        """A positive quarter turn is clockwise."""
        v = Vector.I.rotate(math.pi / 2)
        assert v.equals(Vector(0, -1))

    def test_zero_angle_copy(self):
        """A zero (or full turn) angle returns an unchanged copy."""
        v = Vector(0.1, 0.2)
        assert v.rotate(0.0) == v
        assert v.rotate(2 * math.pi) == v

    def test_round_trip(self):
        """Rotating by theta then -theta restores the vector."""
        v = Vector(2.5, -1.25)
        assert v.rotate(1.1).rotate(-1.1).equals(v, 1e-9)

    def test_preserves_length(self):
        """Rotation preserves magnitude."""
        v = Vector(2.5, -1.25)
        assert abs(v.rotate(0.7).magnitude() - v.magnitude()) < 1e-9


class TestDirection:
    """Tests for direction()."""

    def test_quadrants(self):
        """Quadrant codes follow the sign of the components."""
        assert Vector.ZERO.direction() == 0
        assert Vector(1, 1).direction() == 1
        assert Vector(0, 1).direction() == 1
        assert Vector(1, -1).direction() == 2
        assert Vector(-1, 0).direction() == 3
        assert Vector(-1, -1).direction() == 4


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
