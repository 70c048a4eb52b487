"""Scalar capability layer.

Components of the geometric types may be any real number, Python or numpy.
Two capability levels are recognised:

* numeric (``is_base_num``): ordered, closed under ``+ - * /`` with zero and
  one identities, castable to the primitive numeric types;
* float (``is_base_float``): numeric plus square root, floor, ceiling,
  absolute value and sign.

The float helpers follow IEEE semantics through numpy, so ``sqrt(-1.0)`` is
``nan`` and ``recip(0.0)`` is ``inf`` instead of a Python exception.
"""

from __future__ import annotations

import logging
import numbers

import numpy as np

from . import settings

log = logging.getLogger(f"{settings.LOGGER_NAME}.scalar")


def _resolve_float_scalar(precision: str) -> type:
    dtype = np.dtype(precision)
    if dtype.kind != "f":
        raise ValueError(f"FLOAT_PRECISION must name a floating type, got {precision!r}")
    return dtype.type


FloatScalar = _resolve_float_scalar(settings.FLOAT_PRECISION)
IntScalar = int

log.debug("float scalar resolved to %s", np.dtype(FloatScalar).name)


def is_base_num(value) -> bool:
    """Return ``True`` if ``value`` can be used as a component."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_base_float(value) -> bool:
    """Return ``True`` if ``value`` also has the float capability."""
    return is_base_num(value) and not isinstance(value, numbers.Integral)


def partial_min(a, b):
    """Return ``a`` if ``a < b`` else ``b``.

    Ties and unordered pairs (NaN) resolve to ``b``.
    """
    return a if a < b else b


def partial_max(a, b):
    """Return ``a`` if ``a > b`` else ``b``.

    Ties and unordered pairs (NaN) resolve to ``b``.
    """
    return a if a > b else b


def to_float(value):
    return FloatScalar(value)


def sqrt(value):
    with np.errstate(invalid="ignore"):
        return np.sqrt(to_float(value))


def floor(value):
    return np.floor(to_float(value))


def ceil(value):
    return np.ceil(to_float(value))


def recip(value):
    """Return ``1 / value`` with inf/nan on a zero or nan divisor."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return FloatScalar(1) / to_float(value)


def signum(value):
    return np.sign(to_float(value))
