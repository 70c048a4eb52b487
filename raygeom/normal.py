"""Surface normals.

``Normal3`` has the same layout as ``Vector3`` but is a separate type:
normals transform by the inverse transpose, so they must not be mixed
with positional vectors by accident. ``Normal3 + Vector3`` is a
``TypeError``; convert explicitly with ``from_vector``/``to_vector``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .common import Components, Dimension3, InnerProductSpace, VectorSpace
from .vector import Vector3


@dataclass(frozen=True)
class Normal3(Components, VectorSpace, InnerProductSpace):
    x: float
    y: float
    z: float

    _axes = ("x", "y", "z")
    _dimension = Dimension3

    @staticmethod
    def from_vector(v: Vector3) -> "Normal3":
        if type(v) is not Vector3:
            raise TypeError("Normal3.from_vector expects Vector3")
        return Normal3(v.x, v.y, v.z)

    def to_vector(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def cross(self, other: Vector3) -> Vector3:
        if type(other) is not Vector3:
            raise TypeError(f"no cross product between Normal3 and {type(other).__name__}")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def __abs__(self) -> "Normal3":
        return Normal3(abs(self.x), abs(self.y), abs(self.z))

    abs = __abs__
