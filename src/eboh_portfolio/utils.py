"""Bounded clamping of scalars and arrays."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, TypeVar

import numpy as np

from .errors import InvalidArgument
from .log import get_logger

logger = get_logger(__name__)

RealT = TypeVar("RealT", int, float)


def _require_real(name: str, value: Any) -> None:
    if not isinstance(value, (numbers.Real, np.bool_)):
        raise InvalidArgument(
            f"{name} must be a real number, got {type(value).__name__}", argument=name
        )
    # NaN is the only value unequal to itself; no float conversion needed.
    if value != value:
        raise InvalidArgument(f"{name} must not be NaN", argument=name)


def _require_bounds(lower: Any, upper: Any) -> None:
    _require_real("lower", lower)
    _require_real("upper", upper)
    if lower > upper:
        raise InvalidArgument(
            f"lower bound {lower!r} is greater than upper bound {upper!r}",
            argument="lower",
        )


def _as_float_bound(value: Any) -> float:
    # Reals beyond float range lie outside every float, so they open that side.
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def clamp(value: RealT, lower: RealT, upper: RealT) -> RealT:
    """Return *value* limited to the inclusive range [lower, upper].

    Infinite bounds are allowed and leave that side of the range open.
    Python and numpy booleans count as the integers 0 and 1.

    Raises:
        InvalidArgument: if an input is not a real number, is NaN, or
            ``lower > upper``.
    """
    _require_bounds(lower, upper)
    _require_real("value", value)
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


def clamp_array(values: Any, lower: float, upper: float) -> np.ndarray:
    """Elementwise :func:`clamp` over anything convertible to a float array.

    A new array is returned; *values* is left untouched.
    """
    _require_bounds(lower, upper)
    lo, hi = _as_float_bound(lower), _as_float_bound(upper)
    if np.iscomplexobj(values):
        raise InvalidArgument("values must not be complex", argument="values")
    try:
        array = np.asarray(values, dtype=float)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidArgument(f"values are not numeric: {exc}", argument="values") from exc

    if np.isnan(array).any():
        raise InvalidArgument("values must not contain NaN", argument="values")

    clamped = np.clip(array, lo, hi)
    if logger.isEnabledFor(logging.DEBUG):
        n_out = int(np.count_nonzero((array < lo) | (array > hi)))
        logger.debug("Clamped %d of %d values to [%s, %s]", n_out, array.size, lower, upper)
    return clamped
