import math

import pytest

from raygeom import Dimension3, Normal3, OutOfBoundsError, Vector3, cross, dot


def test_arithmetic():
    a = Normal3(1, 2, 3)
    b = Normal3(0, 1, 0)
    assert a + b == Normal3(1, 3, 3)
    assert a - b == Normal3(1, 1, 3)
    assert -a == Normal3(-1, -2, -3)
    assert a * 2 == Normal3(2, 4, 6)
    assert a / 2 == Normal3(0.5, 1.0, 1.5)
    assert Normal3.zero().is_zero()


def test_normal_does_not_mix_with_vector():
    with pytest.raises(TypeError):
        Normal3(0, 0, 1) + Vector3(1, 0, 0)
    with pytest.raises(TypeError):
        Normal3(0, 0, 1) - Vector3(1, 0, 0)
    with pytest.raises(TypeError):
        Normal3(0, 0, 1).cross(Normal3(1, 0, 0))
    assert Normal3(0, 0, 1) != Vector3(0, 0, 1)


def test_conversions():
    v = Vector3(1, 2, 3)
    n = Normal3.from_vector(v)
    assert n == Normal3(1, 2, 3)
    assert n.to_vector() == v
    with pytest.raises(TypeError):
        Normal3.from_vector(n)


def test_dot_and_cross():
    n = Normal3(1, 0, 0)
    assert dot(n, Normal3(2, 5, 5)) == 2
    assert dot(n, Vector3(-3, 1, 1)) == -3
    c = cross(n, Vector3(0, 1, 0))
    assert isinstance(c, Vector3)
    assert c == Vector3(0, 0, 1)


def test_magnitude_and_normalize():
    n = Normal3(0.0, 3.0, 4.0)
    assert n.magnitude() == 5.0
    u = n.normalize()
    assert isinstance(u, Normal3)
    assert math.isclose(u.magnitude(), 1.0)


def test_abs_and_indexing():
    n = Normal3(-1, 2, -3)
    assert abs(n) == Normal3(1, 2, 3)
    assert n[Dimension3.Z] == -3
    with pytest.raises(OutOfBoundsError):
        n[3]
