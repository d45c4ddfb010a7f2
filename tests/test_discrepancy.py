"""Unit tests for discrepancy records and path rendering."""

from __future__ import annotations

import math

from deep_close.discrepancy import Discrepancy, MismatchKind, PathStep, format_path


def _numeric(**kwargs: object) -> Discrepancy:
    fields: dict[str, object] = {
        "reason": "Expected",
        "expected": 2.0,
        "received": 1.0,
        "kind": MismatchKind.NUMERIC,
    }
    fields.update(kwargs)
    return Discrepancy(**fields)  # type: ignore[arg-type]


def test_format_path_renders_indexes_and_keys() -> None:
    path = (
        PathStep.at_key("rows"),
        PathStep.at_index(3),
        PathStep.at_key("total value"),
        PathStep.at_key(7),
    )

    assert format_path(path) == "value.rows[3]['total value'][7]"
    assert format_path((), root="result") == "result"


def test_to_dict_omits_absent_optional_fields() -> None:
    discrepancy = Discrepancy(
        reason="The strings do not match",
        expected="a",
        received="b",
        kind=MismatchKind.PRIMITIVE,
    )

    assert discrepancy.to_dict() == {
        "reason": "The strings do not match",
        "expected": "a",
        "received": "b",
    }
    assert not discrepancy.is_nested


def test_to_dict_keeps_nan_diff() -> None:
    payload = _numeric(expected=math.nan, diff=math.nan).to_dict()

    assert math.isnan(payload["diff"])


def test_outermost_index_and_key_are_exposed() -> None:
    discrepancy = _numeric(diff=1.0).with_path(
        [
            PathStep.at_index(4),
            PathStep.at_key("outer"),
            PathStep.at_index(0),
            PathStep.at_key("inner"),
        ]
    )

    assert discrepancy.index == 4
    assert discrepancy.key == "outer"
    assert discrepancy.is_nested
    assert discrepancy.to_dict()["index"] == 4
    assert discrepancy.to_dict()["key"] == "outer"


def test_key_is_reported_even_when_falsy() -> None:
    discrepancy = _numeric().with_path([PathStep.at_key("")])

    assert discrepancy.to_dict()["key"] == ""


def test_with_path_returns_new_record() -> None:
    original = _numeric()
    annotated = original.with_path([PathStep.at_index(1)])

    assert original.path == ()
    assert annotated.path == (PathStep.at_index(1),)


def test_describe_includes_location_values_and_diff() -> None:
    discrepancy = _numeric(diff=1.0).with_path([PathStep.at_index(0), PathStep.at_key("a")])

    assert discrepancy.describe() == "value[0].a Expected: expected=2.0, received=1.0, diff=1.0"
    assert discrepancy.describe(root="result").startswith("result[0].a ")
