"""Unit tests for the deep-close assertion helpers."""

from __future__ import annotations

import pytest

from deep_close import (
    DeepCloseAssertionError,
    InvalidPrecisionError,
    assert_deep_close_to,
    assert_match_close_to,
)


def test_assert_deep_close_to_accepts_close_nested_values() -> None:
    assert_deep_close_to(
        {"a": 1.0, "b": [2.0, {"c": 3.0000001}]},
        {"a": 1.0, "b": [2.0, {"c": 3.0}]},
        6,
    )


def test_assert_deep_close_to_raises_for_numeric_mismatch() -> None:
    with pytest.raises(DeepCloseAssertionError, match=r"value\.notional Expected") as excinfo:
        assert_deep_close_to({"notional": 125.0}, {"notional": 126.0}, 3)

    assert excinfo.value.discrepancy.diff == 1.0
    assert excinfo.value.precision == 3
    assert "precision=3" in str(excinfo.value)


def test_assert_deep_close_to_is_an_assertion_error() -> None:
    with pytest.raises(AssertionError):
        assert_deep_close_to([1.0], [1.0, 2.0])


def test_assert_deep_close_to_rejects_extra_keys() -> None:
    with pytest.raises(DeepCloseAssertionError, match="do not have similar keys"):
        assert_deep_close_to({"notional": 125.0, "cash": 50.0}, {"notional": 125.0})


def test_assert_match_close_to_allows_extra_received_keys() -> None:
    assert_match_close_to({"notional": 125.0, "cash": 50.0}, {"notional": 125.0})


def test_assert_match_close_to_still_requires_expected_keys() -> None:
    with pytest.raises(DeepCloseAssertionError, match="do not have similar keys"):
        assert_match_close_to({"notional": 125.0}, {"notional": 125.0, "cash": 50.0})


def test_assertion_helpers_propagate_invalid_settings() -> None:
    with pytest.raises(InvalidPrecisionError):
        assert_deep_close_to(1.0, 1.0, -2)
