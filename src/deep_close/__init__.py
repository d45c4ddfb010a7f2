"""Structural deep-close comparison for test assertions."""

from deep_close.assertions import (
    DeepCloseAssertionError,
    assert_deep_close_to,
    assert_match_close_to,
)
from deep_close.compare import recursive_check
from deep_close.discrepancy import Discrepancy, MismatchKind, PathStep, format_path
from deep_close.errors import (
    ComparisonError,
    InvalidMaxDepthError,
    InvalidPrecisionError,
    InvalidToleranceError,
    MaxDepthExceededError,
)
from deep_close.precision import DEFAULT_PRECISION, calculate_tolerance, resolve_tolerance
from deep_close.values import ABSENT, ValueKind, classify

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "DEFAULT_PRECISION",
    "ComparisonError",
    "DeepCloseAssertionError",
    "Discrepancy",
    "InvalidMaxDepthError",
    "InvalidPrecisionError",
    "InvalidToleranceError",
    "MaxDepthExceededError",
    "MismatchKind",
    "PathStep",
    "ValueKind",
    "__version__",
    "assert_deep_close_to",
    "assert_match_close_to",
    "calculate_tolerance",
    "classify",
    "format_path",
    "recursive_check",
    "resolve_tolerance",
]
