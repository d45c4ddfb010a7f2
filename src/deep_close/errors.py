"""Error types raised for invalid comparison settings.

Mismatches between values are never raised; they are returned as
:class:`deep_close.discrepancy.Discrepancy` records.
"""

from __future__ import annotations


class ComparisonError(ValueError):
    """Base error for invalid comparison settings."""


class InvalidPrecisionError(ComparisonError):
    """Raised when a precision is not a non-negative integer."""


class InvalidToleranceError(ComparisonError):
    """Raised when a tolerance resolver returns an unusable tolerance."""


class InvalidMaxDepthError(ComparisonError):
    """Raised when a depth limit is not a positive integer."""


class MaxDepthExceededError(ComparisonError):
    """Raised when compared structures nest deeper than the configured limit."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"Structure nesting exceeds max_depth={max_depth}")
        self.max_depth = max_depth
