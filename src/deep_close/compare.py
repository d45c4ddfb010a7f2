"""Recursive structural comparison with numeric tolerance."""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from fractions import Fraction
from typing import Any

import numpy as np

from deep_close.discrepancy import (
    REASON_KEYS,
    REASON_LENGTH,
    REASON_NUMERIC,
    REASON_UNSUPPORTED,
    Discrepancy,
    MismatchKind,
    PathStep,
    format_path,
    primitive_reason,
)
from deep_close.errors import InvalidMaxDepthError, MaxDepthExceededError
from deep_close.precision import ToleranceResolver, calculate_tolerance, resolve_tolerance
from deep_close.values import ValueKind, category_label, classify, is_sequence_like

LOGGER = logging.getLogger(__name__)

_Child = tuple[PathStep, Any, Any]


@dataclass(frozen=True)
class _Descend:
    """Both values are containers whose children still need comparing."""

    children: Iterator[_Child]


@dataclass
class _Frame:
    step: PathStep | None
    children: Iterator[_Child]


def recursive_check(
    received: Any,
    expected: Any,
    precision: int,
    strict: bool = True,
    *,
    resolver: ToleranceResolver = calculate_tolerance,
    max_depth: int | None = None,
) -> Discrepancy | None:
    """Compare ``received`` against ``expected``.

    Returns ``None`` when the values match, otherwise the first
    :class:`Discrepancy` found walking sequences in index order and keyed
    structures in sorted key order. With ``strict`` false, ``received``
    mappings may carry keys that ``expected`` does not have.

    Containers are walked with an explicit stack, so nesting depth is not
    limited by the interpreter recursion limit. ``max_depth`` bounds it
    instead and raises :class:`MaxDepthExceededError` when exceeded.
    """

    tolerance = resolve_tolerance(precision, resolver)
    _validate_max_depth(max_depth)

    outcome = _check_pair(received, expected, tolerance, strict)
    if not isinstance(outcome, _Descend):
        return _report(outcome)

    stack = [_Frame(step=None, children=outcome.children)]
    _enforce_depth(len(stack), max_depth)
    while stack:
        child = next(stack[-1].children, None)
        if child is None:
            stack.pop()
            continue

        step, received_child, expected_child = child
        outcome = _check_pair(received_child, expected_child, tolerance, strict)
        if outcome is None:
            continue
        if isinstance(outcome, _Descend):
            stack.append(_Frame(step=step, children=outcome.children))
            _enforce_depth(len(stack), max_depth)
            continue

        path = [frame.step for frame in stack if frame.step is not None]
        path.append(step)
        return _report(outcome.with_path(path))
    return None


def _validate_max_depth(max_depth: int | None) -> None:
    if max_depth is None:
        return
    if isinstance(max_depth, bool) or not isinstance(max_depth, numbers.Integral):
        raise InvalidMaxDepthError(
            f"max_depth must be an integer, got {type(max_depth).__name__}"
        )
    if max_depth < 1:
        raise InvalidMaxDepthError(f"max_depth must be at least 1, got {max_depth}")


def _enforce_depth(depth: int, max_depth: int | None) -> None:
    if max_depth is not None and depth > max_depth:
        raise MaxDepthExceededError(max_depth)


def _report(discrepancy: Discrepancy | None) -> Discrepancy | None:
    if discrepancy is not None and LOGGER.isEnabledFor(logging.DEBUG):
        path = format_path(discrepancy.path)
        LOGGER.debug(
            "compare_mismatch reason=%s path=%s",
            discrepancy.reason,
            path,
            extra={
                "reason": discrepancy.reason,
                "path": path,
                "mismatch_kind": str(discrepancy.kind),
            },
        )
    return discrepancy


def _check_pair(
    received: Any, expected: Any, tolerance: float, strict: bool
) -> Discrepancy | _Descend | None:
    """Compare one pair of values without descending into containers.

    The branch order matters: later branches assume the earlier categories
    have been ruled out.
    """

    received_kind = classify(received)
    expected_kind = classify(expected)

    if received_kind is ValueKind.NUMBER and expected_kind is ValueKind.NUMBER:
        return _check_numbers(received, expected, tolerance)

    if received_kind is expected_kind and received_kind in (
        ValueKind.STRING,
        ValueKind.BOOLEAN,
    ):
        if received == expected:
            return None
        return Discrepancy(
            reason=primitive_reason(category_label(expected)),
            expected=expected,
            received=received,
            kind=MismatchKind.PRIMITIVE,
        )

    if is_sequence_like(received_kind) and is_sequence_like(expected_kind):
        if len(received) != len(expected):
            return Discrepancy(
                reason=REASON_LENGTH,
                expected=len(expected),
                received=len(received),
                kind=MismatchKind.LENGTH,
            )
        return _Descend(
            (PathStep.at_index(index), received_item, expected_item)
            for index, (received_item, expected_item) in enumerate(zip(received, expected))
        )

    if received_kind is ValueKind.ABSENT and expected_kind is ValueKind.ABSENT:
        return None

    if received_kind is ValueKind.NULL and expected_kind is ValueKind.NULL:
        return None

    if received_kind is ValueKind.KEYED and expected_kind is ValueKind.KEYED:
        return _check_keys(received, expected, strict)

    return Discrepancy(
        reason=REASON_UNSUPPORTED,
        expected=category_label(expected),
        received=category_label(received),
        kind=MismatchKind.UNSUPPORTED_TYPE,
    )


def _is_nan(value: Any) -> bool:
    # Integers are always finite; math.isnan would overflow on huge ones.
    return not isinstance(value, numbers.Integral) and math.isnan(value)


def _is_inf(value: Any) -> bool:
    return not isinstance(value, numbers.Integral) and math.isinf(value)


def _as_python_number(value: Any) -> Any:
    # Fixed-width numpy arithmetic wraps around on overflow.
    if isinstance(value, np.generic):
        return value.item()
    return value


def _absolute_difference(received: Any, expected: Any) -> tuple[Any, Any]:
    """Return ``(exact, reported)`` absolute differences of finite ``received``.

    ``exact`` decides the verdict. ``reported`` is the value carried as
    ``diff``; it differs from ``exact`` only when an int beyond float range
    meets a float, where it is the nearest float (``inf`` past the range).
    """

    try:
        diff = abs(received - expected)
    except OverflowError:
        pass
    else:
        return diff, diff

    if _is_nan(expected):
        return math.nan, math.nan
    if _is_inf(expected):
        return math.inf, math.inf
    exact = abs(Fraction(received) - Fraction(expected))
    try:
        reported = float(exact)
    except OverflowError:
        reported = math.inf
    return exact, reported


def _check_numbers(received: Any, expected: Any, tolerance: float) -> Discrepancy | None:
    if _is_nan(received):
        if _is_nan(expected):
            return None
        return Discrepancy(
            reason=REASON_NUMERIC,
            expected=expected,
            received=received,
            kind=MismatchKind.NUMERIC,
        )

    if _is_inf(received):
        if received == expected:
            return None
        return Discrepancy(
            reason=REASON_NUMERIC,
            expected=expected,
            received=received,
            kind=MismatchKind.NUMERIC,
        )

    exact, diff = _absolute_difference(
        _as_python_number(received), _as_python_number(expected)
    )
    if exact <= tolerance:
        return None
    return Discrepancy(
        reason=REASON_NUMERIC,
        expected=expected,
        received=received,
        kind=MismatchKind.NUMERIC,
        diff=diff,
    )


def _key_order(key: Any) -> tuple[str, str]:
    text = str(key)
    return (text.casefold(), text)


def _check_keys(
    received: Mapping[Any, Any], expected: Mapping[Any, Any], strict: bool
) -> Discrepancy | _Descend:
    received_keys = sorted(received, key=_key_order)
    expected_keys = sorted(expected, key=_key_order)

    same_size = not strict or len(received_keys) == len(expected_keys)
    if not same_size or any(key not in received for key in expected_keys):
        return Discrepancy(
            reason=REASON_KEYS,
            expected=expected_keys,
            received=received_keys,
            kind=MismatchKind.KEY_SET,
        )
    return _Descend((PathStep.at_key(key), received[key], expected[key]) for key in expected_keys)
