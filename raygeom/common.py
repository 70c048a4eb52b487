"""Capabilities shared by the vector, point and normal types.

Each geometric type is a small frozen dataclass that mixes in the
capabilities it supports. The mixins only rely on ``_axes`` (the field
names in order) and ``_dimension`` (the axis tag enum) being set on the
concrete class, so one algorithm body serves every dimension.
"""

from __future__ import annotations

import numbers
from enum import Enum

import numpy as np

from . import scalar
from .scalar import partial_max, partial_min


class OutOfBoundsError(IndexError):
    """A component, axis or matrix index outside the valid range.

    This is a caller defect; the library never catches it.
    """


class Dimension2(Enum):
    X = 0
    Y = 1


class Dimension3(Enum):
    X = 0
    Y = 1
    Z = 2


class Components:
    """Positional and axis-tag access to the components of a tuple type."""

    _axes: tuple = ()
    _dimension: type = Enum
    __array_ufunc__ = None

    @classmethod
    def _from_components(cls, values):
        return cls(*values)

    def __iter__(self):
        return (getattr(self, axis) for axis in self._axes)

    def __len__(self) -> int:
        return len(self._axes)

    def __getitem__(self, index):
        if isinstance(index, self._dimension):
            return getattr(self, self._axes[index.value])
        if (
            isinstance(index, numbers.Integral)
            and not isinstance(index, bool)
            and 0 <= index < len(self._axes)
        ):
            return getattr(self, self._axes[index])
        raise OutOfBoundsError(f"index {index!r} out of bounds for {type(self).__name__}")


class ComponentWise(Components):
    """Folds and per-component operations."""

    def min_component(self):
        values = tuple(self)
        result = values[-1]
        for value in reversed(values[:-1]):
            result = partial_min(value, result)
        return result

    def max_component(self):
        values = tuple(self)
        result = values[-1]
        for value in reversed(values[:-1]):
            result = partial_max(value, result)
        return result

    def max_dimension(self):
        """Return the axis of the strictly greatest component.

        Axes are tested in order; when no axis beats all the others the
        last axis is returned, so ``(1, 1, 0)`` gives ``Z``.
        """
        values = tuple(self)
        for i, value in enumerate(values[:-1]):
            if all(value > other for j, other in enumerate(values) if j != i):
                return self._dimension(i)
        return self._dimension(len(values) - 1)

    def min(self, other):
        _require_same_type(self, other, "min")
        return self._from_components(partial_min(a, b) for a, b in zip(self, other))

    def max(self, other):
        _require_same_type(self, other, "max")
        return self._from_components(partial_max(a, b) for a, b in zip(self, other))

    def abs(self):
        return self._from_components(abs(v) for v in self)

    __abs__ = abs

    def floor(self):
        return self._from_components(scalar.floor(v) for v in self)

    def ceil(self):
        return self._from_components(scalar.ceil(v) for v in self)

    def permute(self, *axes):
        """Return a copy whose i-th component is ``self[axes[i]]``.

        Axes may repeat.
        """
        if len(axes) != len(self):
            raise ValueError(f"{type(self).__name__}.permute expects {len(self)} axes, got {len(axes)}")
        return self._from_components(self[axis] for axis in axes)


class Scalable:
    """Multiplication and division by a scalar."""

    def __mul__(self, value):
        if not scalar.is_base_num(value):
            return NotImplemented
        return self._from_components(v * value for v in self)

    __rmul__ = __mul__

    def __truediv__(self, value):
        if not scalar.is_base_num(value):
            return NotImplemented
        return self._from_components(v / value for v in self)


class VectorSpace(Scalable):
    """Addition, subtraction and negation within one nominal type."""

    @classmethod
    def zero(cls):
        return cls(*(0 for _ in cls._axes))

    @classmethod
    def from_value(cls, value):
        return cls(*(value for _ in cls._axes))

    def is_zero(self) -> bool:
        return all(v == 0 for v in self)

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._from_components(a + b for a, b in zip(self, other))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._from_components(a - b for a, b in zip(self, other))

    def __neg__(self):
        return self._from_components(-v for v in self)


class InnerProductSpace:
    """Dot product and the float operations derived from it."""

    def dot(self, other):
        if not isinstance(other, InnerProductSpace) or len(other) != len(self):
            raise TypeError(
                f"no inner product between {type(self).__name__} and {type(other).__name__}"
            )
        return sum(a * b for a, b in zip(self, other))

    def magnitude_squared(self):
        return self.dot(self)

    def magnitude(self):
        return scalar.sqrt(self.magnitude_squared())

    def normalize(self):
        """Return ``self`` scaled to unit length.

        A zero-length input yields nan components; callers check the
        magnitude first when that matters.
        """
        with np.errstate(invalid="ignore", over="ignore"):
            return self * scalar.recip(self.magnitude())


class MetricSpace:
    def distance_squared(self, other):
        _require_same_type(self, other, "distance")
        return (self - other).magnitude_squared()

    def distance(self, other):
        return scalar.sqrt(self.distance_squared(other))


class LinearInterpolate:
    def lerp(self, other, t):
        """Blend towards ``other``; ``t`` outside [0, 1] extrapolates."""
        _require_same_type(self, other, "lerp")
        return self._from_components(a * (1 - t) + b * t for a, b in zip(self, other))


def _require_same_type(a, b, op: str) -> None:
    if type(a) is not type(b):
        raise TypeError(f"{op} needs two {type(a).__name__} values, got {type(b).__name__}")


def dot(v1, v2):
    return v1.dot(v2)


def abs_dot(v1, v2):
    return abs(v1.dot(v2))


def cross(v1, v2):
    return v1.cross(v2)


def min_component(v):
    return v.min_component()


def max_component(v):
    return v.max_component()


def max_dimension(v):
    return v.max_dimension()


def component_wise_min(v1, v2):
    return v1.min(v2)


def component_wise_max(v1, v2):
    return v1.max(v2)


def distance(v1, v2):
    return v1.distance(v2)


def distance_squared(v1, v2):
    return v1.distance_squared(v2)


def lerp(v1, v2, t):
    return v1.lerp(v2, t)


def permute(v, *axes):
    return v.permute(*axes)


def face_forward(n, v):
    """Flip ``n`` into the hemisphere of ``v``."""
    return -n if n.dot(v) < 0 else n
