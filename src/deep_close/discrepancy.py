"""Discrepancy records returned by the comparator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any, Literal

REASON_NUMERIC = "Expected"
REASON_LENGTH = "The arrays length does not match"
REASON_KEYS = "The objects do not have similar keys"
REASON_UNSUPPORTED = "The current data type is not supported or they do not match"


def primitive_reason(label: str) -> str:
    """Return the reason used when two strings or two booleans differ."""

    return f"The {label}s do not match"


class MismatchKind(StrEnum):
    """Machine-readable mismatch categories."""

    NUMERIC = "numeric"
    PRIMITIVE = "primitive"
    LENGTH = "length"
    KEY_SET = "key_set"
    UNSUPPORTED_TYPE = "unsupported_type"


@dataclass(frozen=True, slots=True)
class PathStep:
    """One level of nesting between the compared roots and a mismatch."""

    kind: Literal["index", "key"]
    value: Any

    @classmethod
    def at_index(cls, index: int) -> PathStep:
        return cls("index", index)

    @classmethod
    def at_key(cls, key: Any) -> PathStep:
        return cls("key", key)


def format_path(path: Iterable[PathStep], root: str = "value") -> str:
    """Render ``path`` as an accessor expression such as ``value[0].name``."""

    parts = [root]
    for step in path:
        if step.kind == "index":
            parts.append(f"[{step.value}]")
        elif isinstance(step.value, str) and step.value.isidentifier():
            parts.append(f".{step.value}")
        else:
            parts.append(f"[{step.value!r}]")
    return "".join(parts)


@dataclass(frozen=True, slots=True)
class Discrepancy:
    """The first mismatch found between a received and an expected value.

    ``path`` is ordered from the compared roots down to the mismatching
    values. ``index`` and ``key`` expose the outermost index and key steps,
    the values a flat ``{reason, expected, received, diff, index, key}``
    record carries after every enclosing level has annotated it.
    """

    reason: str
    expected: Any
    received: Any
    kind: MismatchKind
    diff: Any = None
    path: tuple[PathStep, ...] = ()

    @property
    def index(self) -> int | None:
        return self._outermost("index")

    @property
    def key(self) -> Any:
        return self._outermost("key")

    @property
    def is_nested(self) -> bool:
        """Whether the mismatch sits below the compared roots."""
        return bool(self.path)

    def _outermost(self, kind: str) -> Any:
        for step in self.path:
            if step.kind == kind:
                return step.value
        return None

    def with_path(self, path: Iterable[PathStep]) -> Discrepancy:
        return replace(self, path=tuple(path))

    def to_dict(self) -> dict[str, Any]:
        """Return the flat record shape consumed by assertion reporters."""

        payload: dict[str, Any] = {
            "reason": self.reason,
            "expected": self.expected,
            "received": self.received,
        }
        if self.diff is not None:
            payload["diff"] = self.diff
        index = self.index
        if index is not None:
            payload["index"] = index
        if any(step.kind == "key" for step in self.path):
            payload["key"] = self.key
        return payload

    def describe(self, root: str = "value") -> str:
        message = (
            f"{format_path(self.path, root)} {self.reason}: "
            f"expected={self.expected!r}, received={self.received!r}"
        )
        if self.diff is not None:
            message += f", diff={self.diff!r}"
        return message
