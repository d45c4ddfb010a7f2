"""Assertion helpers for tests comparing nested numeric outputs."""

from __future__ import annotations

from typing import Any

from deep_close.compare import recursive_check
from deep_close.discrepancy import Discrepancy
from deep_close.precision import DEFAULT_PRECISION, ToleranceResolver, calculate_tolerance


class DeepCloseAssertionError(AssertionError):
    """Raised when a received value is not deep-close to the expected value."""

    def __init__(self, discrepancy: Discrepancy, precision: int) -> None:
        super().__init__(f"{discrepancy.describe()} (precision={precision})")
        self.discrepancy = discrepancy
        self.precision = precision


def _assert_close(
    received: Any,
    expected: Any,
    precision: int,
    strict: bool,
    resolver: ToleranceResolver,
    max_depth: int | None,
) -> None:
    discrepancy = recursive_check(
        received,
        expected,
        precision,
        strict,
        resolver=resolver,
        max_depth=max_depth,
    )
    if discrepancy is not None:
        raise DeepCloseAssertionError(discrepancy, precision)


def assert_deep_close_to(
    received: Any,
    expected: Any,
    precision: int = DEFAULT_PRECISION,
    *,
    resolver: ToleranceResolver = calculate_tolerance,
    max_depth: int | None = None,
) -> None:
    """Assert ``received`` has the same shape as ``expected`` with close numbers."""

    _assert_close(received, expected, precision, True, resolver, max_depth)


def assert_match_close_to(
    received: Any,
    expected: Any,
    precision: int = DEFAULT_PRECISION,
    *,
    resolver: ToleranceResolver = calculate_tolerance,
    max_depth: int | None = None,
) -> None:
    """Like :func:`assert_deep_close_to`, but ``received`` mappings may have extra keys."""

    _assert_close(received, expected, precision, False, resolver, max_depth)
