import math

import pytest

from raygeom import (
    Dimension2,
    Dimension3,
    OutOfBoundsError,
    Point2,
    Point3,
    Vector2,
    Vector3,
    component_wise_max,
    component_wise_min,
    distance,
    distance_squared,
    lerp,
    permute,
)


def test_point_minus_point_is_vector():
    d = Point3(1, 2, 3) - Point3(1, 2, 3)
    assert isinstance(d, Vector3)
    assert d == Vector3.zero()
    assert Point2(5, 1) - Point2(2, 3) == Vector2(3, -2)


def test_point_and_vector():
    p = Point3(1, 2, 3)
    v = Vector3(1, 0, -1)
    assert p + v == Point3(2, 2, 2)
    assert p - v == Point3(0, 2, 4)
    assert isinstance(p + v, Point3)
    assert Point2(0, 0) + Vector2(1, 1) == Point2(1, 1)


def test_point_plus_point_is_rejected():
    with pytest.raises(TypeError):
        Point3(1, 2, 3) + Point3(1, 2, 3)
    with pytest.raises(TypeError):
        Point2(1, 2) + Point2(1, 2)
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) + Point3(1, 2, 3)
    with pytest.raises(TypeError):
        Point3(1, 2, 3) + Vector2(1, 2)


def test_point_scaling():
    p = Point3(2, 4, 6)
    assert p * 0.5 == Point3(1.0, 2.0, 3.0)
    assert 2 * p == Point3(4, 8, 12)
    assert p / 2 == Point3(1.0, 2.0, 3.0)


def test_conversions():
    assert Point3.from_value(1.5) == Point3(1.5, 1.5, 1.5)
    assert Point3.from_vector(Vector3(1, 2, 3)) == Point3(1, 2, 3)
    assert Point3(1, 2, 3).to_vector() == Vector3(1, 2, 3)
    assert Point2.from_vector(Vector2(4, 5)) == Point2(4, 5)
    assert Point2.from_point3(Point3(7, 8, 9)) == Point2(7, 8)
    assert Point3.origin() == Point3(0, 0, 0)
    assert Point2.zero() == Point2(0, 0)
    assert Point3(1, 2, 3) != Vector3(1, 2, 3)
    with pytest.raises(TypeError):
        Point3.from_vector(Vector2(1, 2))


def test_indexing():
    p = Point3(4, 5, 6)
    assert p[1] == 5
    assert p[Dimension3.Z] == 6
    assert Point2(1, 2)[Dimension2.X] == 1
    with pytest.raises(OutOfBoundsError):
        p[3]
    with pytest.raises(OutOfBoundsError):
        Point2(1, 2)[Dimension3.Z]


def test_component_wise():
    a = Point3(1.0, 5.0, -2.0)
    b = Point3(3.0, 0.0, -2.5)
    assert component_wise_min(a, b) == Point3(1.0, 0.0, -2.5)
    assert component_wise_max(a, b) == Point3(3.0, 5.0, -2.0)
    assert a.min_component() == -2.0
    assert a.max_component() == 5.0
    assert a.max_dimension() == Dimension3.Y
    assert abs(b) == Point3(3.0, 0.0, 2.5)
    assert Point3(0.5, 1.5, -0.5).floor() == Point3(0.0, 1.0, -1.0)
    assert Point3(0.5, 1.5, -0.5).ceil() == Point3(1.0, 2.0, -0.0)


def test_permute():
    p = Point3(1, 2, 3)
    assert permute(p, Dimension3.Y, Dimension3.Z, Dimension3.X) == Point3(2, 3, 1)


def test_distance():
    assert distance(Point3(0, 0, 0), Point3(3, 4, 0)) == 5.0
    assert distance_squared(Point2(1, 1), Point2(4, 5)) == 25
    assert math.isclose(Point3(1.0, 1.0, 1.0).distance(Point3(2.0, 2.0, 2.0)), math.sqrt(3.0))
    with pytest.raises(TypeError):
        Point3(0, 0, 0).distance(Vector3(0, 0, 0))


def test_lerp():
    a = Point3(0.0, 1.0, 2.0)
    b = Point3(2.0, 5.0, -2.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    assert lerp(a, b, 0.25) == Point3(0.5, 2.0, 1.0)
    assert lerp(a, b, -1.0) == Point3(-2.0, -3.0, 6.0)
    assert isinstance(lerp(a, b, 0.5), Point3)
    assert Point2(0.0, 0.0).lerp(Point2(4.0, 8.0), 0.5) == Point2(2.0, 4.0)


def test_point2_from_vector3_drops_z():
    assert Point2.from_vector3(Vector3(1, 2, 3)) == Point2(1, 2)
    with pytest.raises(TypeError):
        Point2.from_vector3(Vector2(1, 2))
