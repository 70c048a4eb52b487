"""Free vectors in two and three dimensions."""

from __future__ import annotations

from dataclasses import dataclass

from .common import (
    ComponentWise,
    Dimension2,
    Dimension3,
    InnerProductSpace,
    LinearInterpolate,
    MetricSpace,
    VectorSpace,
)


@dataclass(frozen=True)
class Vector2(ComponentWise, VectorSpace, InnerProductSpace, MetricSpace, LinearInterpolate):
    x: float
    y: float

    _axes = ("x", "y")
    _dimension = Dimension2

    @staticmethod
    def unit_x() -> "Vector2":
        return Vector2(1, 0)

    @staticmethod
    def unit_y() -> "Vector2":
        return Vector2(0, 1)


@dataclass(frozen=True)
class Vector3(ComponentWise, VectorSpace, InnerProductSpace, MetricSpace, LinearInterpolate):
    x: float
    y: float
    z: float

    _axes = ("x", "y", "z")
    _dimension = Dimension3

    @staticmethod
    def unit_x() -> "Vector3":
        return Vector3(1, 0, 0)

    @staticmethod
    def unit_y() -> "Vector3":
        return Vector3(0, 1, 0)

    @staticmethod
    def unit_z() -> "Vector3":
        return Vector3(0, 0, 1)

    def cross(self, other) -> "Vector3":
        """Cross product with a ``Vector3`` or a ``Normal3``."""
        if not isinstance(other, InnerProductSpace) or len(other) != 3:
            raise TypeError(f"no cross product between Vector3 and {type(other).__name__}")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def vec2(x: float, y: float) -> Vector2:
    return Vector2(x, y)


def vec3(x: float, y: float, z: float) -> Vector3:
    return Vector3(x, y, z)


def coordinate_system(v1: Vector3) -> tuple[Vector3, Vector3]:
    """Complete ``v1`` to a right-handed orthonormal basis ``(v1, v2, v3)``.

    ``v1`` is expected to be unit length and is not normalized here. The
    second vector drops the smaller of the x/y components, which keeps it
    away from zero length for any nonzero ``v1``.
    """
    if abs(v1.x) > abs(v1.y):
        v2 = Vector3(-v1.z, 0, v1.x).normalize()
    else:
        v2 = Vector3(0, v1.z, -v1.y).normalize()
    return v2, v1.cross(v2)
