"""Fixed-size square matrices (2x2, 3x3 and 4x4).

Entries are ``FloatScalar`` values stored row-major in a fixed-shape numpy
array. Each size has its own minor, determinant and inverse: the 2x2 case
uses the closed form, the larger sizes expand cofactors along the first
row using minors of the next smaller size.
"""

from __future__ import annotations

import logging
import numbers
from abc import ABC, abstractmethod
from typing import Iterable

import numpy as np

from . import settings
from .common import OutOfBoundsError
from .scalar import FloatScalar, is_base_num

log = logging.getLogger(f"{settings.LOGGER_NAME}.matrix")

# Rows (or columns) left after deleting index i, per matrix size
_KEEP_3 = ((1, 2), (0, 2), (0, 1))
_KEEP_4 = ((1, 2, 3), (0, 2, 3), (0, 1, 3), (0, 1, 2))


def _valid_index(index, size: int) -> bool:
    return isinstance(index, numbers.Integral) and not isinstance(index, bool) and 0 <= index < size


class MatrixRow:
    """Writable view of one matrix row; columns outside the row are rejected."""

    __slots__ = ("_m", "_row")

    def __init__(self, m: np.ndarray, row: int) -> None:
        self._m = m
        self._row = row

    def _column(self, j) -> int:
        if not _valid_index(j, self._m.shape[1]):
            raise OutOfBoundsError(f"column {j!r} out of bounds for row {self._row}")
        return j

    def __len__(self) -> int:
        return self._m.shape[1]

    def __iter__(self):
        return iter(self._m[self._row])

    def __getitem__(self, j):
        return self._m[self._row, self._column(j)]

    def __setitem__(self, j, value: float) -> None:
        self._m[self._row, self._column(j)] = value

    def __repr__(self) -> str:
        return f"MatrixRow({list(map(float, self))})"


class Matrix(ABC):
    """Dense square matrix of a fixed size."""

    size = 0
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, *entries: float) -> None:
        n = self.size
        if len(entries) != n * n:
            raise ValueError(f"{type(self).__name__} expects {n * n} values, got {len(entries)}")
        self.m = np.array(entries, dtype=FloatScalar).reshape(n, n)

    @classmethod
    def _wrap(cls, array: np.ndarray):
        obj = cls.__new__(cls)
        obj.m = np.asarray(array, dtype=FloatScalar)
        return obj

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]):
        m = np.array([list(row) for row in rows], dtype=FloatScalar)
        if m.shape != (cls.size, cls.size):
            raise ValueError(f"{cls.__name__} expects {cls.size}x{cls.size} values")
        return cls._wrap(m)

    @classmethod
    def identity(cls):
        return cls._wrap(np.eye(cls.size, dtype=FloatScalar))

    @classmethod
    def zero(cls):
        return cls._wrap(np.zeros((cls.size, cls.size), dtype=FloatScalar))

    def is_zero(self) -> bool:
        return not self.m.any()

    def copy(self):
        return self._wrap(self.m.copy())

    def to_numpy(self) -> np.ndarray:
        return self.m.copy()

    def transpose(self):
        return self._wrap(self.m.T.copy())

    def _check_index(self, i: int, j: int) -> None:
        if not (_valid_index(i, self.size) and _valid_index(j, self.size)):
            raise OutOfBoundsError(f"index '{i}, {j}' out of bounds for {type(self).__name__}")

    @abstractmethod
    def minor(self, i: int, j: int):
        """Return the matrix left after deleting row ``i`` and column ``j``."""

    @abstractmethod
    def cofactor(self, i: int, j: int) -> float:
        """Return ``(-1)**(i + j)`` times the determinant of ``minor(i, j)``."""

    @abstractmethod
    def determinant(self) -> float:
        ...

    @abstractmethod
    def inverse(self):
        """Return the inverse, or ``None`` when the determinant is exactly zero."""

    def _adjugate_over(self, det: float):
        n = self.size
        inv_det = FloatScalar(1) / det
        result = np.empty((n, n), dtype=FloatScalar)
        for i in range(n):
            for j in range(n):
                # transposed cofactor
                result[i, j] = self.cofactor(j, i) * inv_det
        return self._wrap(result)

    def _singular(self) -> None:
        log.debug("%s is singular; no inverse", type(self).__name__)
        return None

    def __getitem__(self, row: int) -> "MatrixRow":
        if not _valid_index(row, self.size):
            raise OutOfBoundsError(f"row {row!r} out of bounds for {type(self).__name__}")
        return MatrixRow(self.m, row)

    def __setitem__(self, row: int, values: Iterable[float]) -> None:
        if not _valid_index(row, self.size):
            raise OutOfBoundsError(f"row {row!r} out of bounds for {type(self).__name__}")
        values = list(values)
        if len(values) != self.size:
            raise ValueError(f"{type(self).__name__} rows hold {self.size} values, got {len(values)}")
        self.m[row, :] = values

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self.m + other.m)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self.m - other.m)

    def __matmul__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        n = self.size
        result = np.zeros((n, n), dtype=FloatScalar)
        for i in range(n):
            for j in range(n):
                result[i, j] = sum(self.m[i, k] * other.m[k, j] for k in range(n))
        return self._wrap(result)

    def __mul__(self, other):
        if type(other) is type(self):
            return self @ other
        if not is_base_num(other):
            return NotImplemented
        return self._wrap(self.m * FloatScalar(other))

    def __rmul__(self, other):
        if not is_base_num(other):
            return NotImplemented
        return self._wrap(self.m * FloatScalar(other))

    def __truediv__(self, other):
        if not is_base_num(other):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            return self._wrap(self.m / FloatScalar(other))

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{float(v):g}" for v in row) + "]" for row in self.m)
        return f"{type(self).__name__}({rows})"


class Matrix2x2(Matrix):
    size = 2

    def minor(self, i: int, j: int) -> float:
        self._check_index(i, j)
        return self.m[(i + 1) % 2, (j + 1) % 2]

    def cofactor(self, i: int, j: int) -> float:
        return (-1) ** (i + j) * self.minor(i, j)

    def determinant(self) -> float:
        m = self.m
        return m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]

    def inverse(self) -> Matrix2x2 | None:
        det = self.determinant()
        if det == 0:
            return self._singular()
        inv_det = FloatScalar(1) / det
        m = self.m
        return Matrix2x2(
            m[1, 1] * inv_det, -m[0, 1] * inv_det,
            -m[1, 0] * inv_det, m[0, 0] * inv_det,
        )


class Matrix3x3(Matrix):
    size = 3

    def minor(self, i: int, j: int) -> Matrix2x2:
        self._check_index(i, j)
        return Matrix2x2._wrap(self.m[np.ix_(_KEEP_3[i], _KEEP_3[j])])

    def cofactor(self, i: int, j: int) -> float:
        return (-1) ** (i + j) * self.minor(i, j).determinant()

    def determinant(self) -> float:
        m = self.m
        return m[0, 0] * self.cofactor(0, 0) + m[0, 1] * self.cofactor(0, 1) + m[0, 2] * self.cofactor(0, 2)

    def inverse(self) -> Matrix3x3 | None:
        det = self.determinant()
        if det == 0:
            return self._singular()
        return self._adjugate_over(det)


class Matrix4x4(Matrix):
    size = 4

    def minor(self, i: int, j: int) -> Matrix3x3:
        self._check_index(i, j)
        return Matrix3x3._wrap(self.m[np.ix_(_KEEP_4[i], _KEEP_4[j])])

    def cofactor(self, i: int, j: int) -> float:
        return (-1) ** (i + j) * self.minor(i, j).determinant()

    def determinant(self) -> float:
        m = self.m
        return (
            m[0, 0] * self.cofactor(0, 0)
            + m[0, 1] * self.cofactor(0, 1)
            + m[0, 2] * self.cofactor(0, 2)
            + m[0, 3] * self.cofactor(0, 3)
        )

    def inverse(self) -> Matrix4x4 | None:
        det = self.determinant()
        if det == 0:
            return self._singular()
        return self._adjugate_over(det)
