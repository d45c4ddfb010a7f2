"""Precision to tolerance resolution."""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable

from deep_close.errors import InvalidPrecisionError, InvalidToleranceError

ToleranceResolver = Callable[[int], float]

DEFAULT_PRECISION = 10


def calculate_tolerance(precision: int) -> float:
    """Return half a unit in the last of ``precision`` decimal places."""

    return 10.0**-precision / 2


def resolve_tolerance(
    precision: int,
    resolver: ToleranceResolver = calculate_tolerance,
) -> float:
    """Validate ``precision`` and return the tolerance produced by ``resolver``."""

    if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
        raise InvalidPrecisionError(
            f"Precision must be an integer, got {type(precision).__name__}"
        )
    if precision < 0:
        raise InvalidPrecisionError(f"Precision must be non-negative, got {precision}")

    tolerance = resolver(int(precision))
    if isinstance(tolerance, bool) or not isinstance(tolerance, numbers.Real):
        raise InvalidToleranceError(
            f"Tolerance resolver returned {type(tolerance).__name__}, expected a real number"
        )
    if math.isnan(tolerance) or tolerance < 0:
        raise InvalidToleranceError(
            f"Tolerance must be a non-negative number, got {tolerance!r} for precision {precision}"
        )
    return tolerance
