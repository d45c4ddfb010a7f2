"""Value categories understood by the comparator."""

from __future__ import annotations

import array
import numbers
from collections.abc import Mapping, Sequence
from enum import Enum, StrEnum
from typing import Any

import numpy as np

_NUMERIC_TYPECODES = frozenset("bBhHiIlLqQfd")
_NUMERIC_DTYPE_KINDS = frozenset("iuf")


class Absent(Enum):
    """Marker for an explicitly missing value."""

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Absent.ABSENT


class ValueKind(StrEnum):
    """Categories a compared value can fall into."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    ABSENT = "absent"
    SEQUENCE = "sequence"
    NUMERIC_BUFFER = "numeric_buffer"
    KEYED = "keyed"
    UNSUPPORTED = "unsupported"


# Broad labels reported when two values cannot be compared.
_CATEGORY_LABELS: dict[ValueKind, str] = {
    ValueKind.NUMBER: "number",
    ValueKind.STRING: "string",
    ValueKind.BOOLEAN: "boolean",
    ValueKind.ABSENT: "undefined",
    ValueKind.NULL: "object",
    ValueKind.SEQUENCE: "object",
    ValueKind.NUMERIC_BUFFER: "object",
    ValueKind.KEYED: "object",
}


def _is_numeric_buffer(value: Any) -> bool:
    if isinstance(value, array.array):
        return value.typecode in _NUMERIC_TYPECODES
    if isinstance(value, np.ndarray):
        return value.ndim >= 1 and value.dtype.kind in _NUMERIC_DTYPE_KINDS
    return False


def classify(value: Any) -> ValueKind:
    """Return the category of ``value``.

    Booleans are checked before numbers because ``bool`` is an ``int``
    subclass. Strings and byte strings are never treated as sequences.
    """

    if value is ABSENT:
        return ValueKind.ABSENT
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Real):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if _is_numeric_buffer(value):
        return ValueKind.NUMERIC_BUFFER
    if isinstance(value, Mapping):
        return ValueKind.KEYED
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.SEQUENCE
    return ValueKind.UNSUPPORTED


def is_sequence_like(kind: ValueKind) -> bool:
    """Return whether ``kind`` is compared element by element."""

    return kind in (ValueKind.SEQUENCE, ValueKind.NUMERIC_BUFFER)


def category_label(value: Any) -> str:
    """Return the broad category label reported for ``value``."""

    kind = classify(value)
    return _CATEGORY_LABELS.get(kind, type(value).__name__)
