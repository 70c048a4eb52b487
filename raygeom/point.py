"""Affine positions in two and three dimensions.

Points and vectors only meet through ``point - point -> vector`` and
``point +/- vector -> point``. Adding two points is a ``TypeError``.
Scaling a point by a number is allowed so points can be blended.
"""

from __future__ import annotations

from dataclasses import dataclass

from .common import (
    ComponentWise,
    Dimension2,
    Dimension3,
    LinearInterpolate,
    MetricSpace,
    Scalable,
)
from .vector import Vector2, Vector3


class _AffinePoint(ComponentWise, Scalable, MetricSpace, LinearInterpolate):
    _vector: type = Vector3

    @classmethod
    def origin(cls):
        return cls(*(0 for _ in cls._axes))

    zero = origin

    @classmethod
    def from_value(cls, value):
        return cls(*(value for _ in cls._axes))

    @classmethod
    def from_vector(cls, v):
        if type(v) is not cls._vector:
            raise TypeError(f"{cls.__name__}.from_vector expects {cls._vector.__name__}")
        return cls(*v)

    def to_vector(self):
        return self._vector(*self)

    def __add__(self, other):
        if type(other) is not self._vector:
            return NotImplemented
        return self._from_components(a + b for a, b in zip(self, other))

    def __sub__(self, other):
        if type(other) is type(self):
            return self._vector(*(a - b for a, b in zip(self, other)))
        if type(other) is self._vector:
            return self._from_components(a - b for a, b in zip(self, other))
        return NotImplemented


@dataclass(frozen=True)
class Point2(_AffinePoint):
    x: float
    y: float

    _axes = ("x", "y")
    _dimension = Dimension2
    _vector = Vector2

    @staticmethod
    def from_point3(p: "Point3") -> "Point2":
        return Point2(p.x, p.y)

    @staticmethod
    def from_vector3(v: Vector3) -> "Point2":
        if type(v) is not Vector3:
            raise TypeError("Point2.from_vector3 expects Vector3")
        return Point2(v.x, v.y)


@dataclass(frozen=True)
class Point3(_AffinePoint):
    x: float
    y: float
    z: float

    _axes = ("x", "y", "z")
    _dimension = Dimension3
    _vector = Vector3
