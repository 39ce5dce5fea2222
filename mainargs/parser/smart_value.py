# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Smart values: infer the most likely type of a raw command-line string.

`infer_value()` tries the patterns below in strict order; the first one that
matches wins, and anything else stays text:

1. integer: `^\\d+$`          ("42" -> 42)
2. float:   `^\\d*\\.\\d+$`     ("3.5" -> 3.5, ".5" -> 0.5)
3. boolean: `true` / `false`  (exact, lowercase)

Operator helpers (`add`, `subtract`, `multiply`, `divide`, `and_`, `or_`, `equals`,
`not_equals`, `shift_left`, `shift_right`) only combine values of the same inferred
kind and raise `ValueKindError` otherwise, or when the kind does not support the
operation (text cannot be multiplied, floats cannot be shifted). `not_` negates a
boolean.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from mainargs.exceptions import SmartValueDivisionError, ValueKindError

INTEGER_PATTERN = re.compile(r"\d+")
FLOAT_PATTERN = re.compile(r"\d*[.]\d+")
BOOLEAN_PATTERN = re.compile(r"true|false")


class ValueKind(Enum):
    """Inferred kind of a smart value."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    TEXT = "text"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SmartValue:
    """A raw string together with its inferred kind and typed value."""

    raw: str
    kind: ValueKind
    value: int | float | bool | str

    def _expect(self, kind: ValueKind) -> Any:
        if self.kind is not kind:
            raise ValueKindError(
                f"Smart value '{self.raw}' is {self.kind}, not {kind}"
            )
        return self.value

    def as_int(self) -> int:
        return self._expect(ValueKind.INT)

    def as_float(self) -> float:
        return self._expect(ValueKind.FLOAT)

    def as_bool(self) -> bool:
        return self._expect(ValueKind.BOOL)

    def as_text(self) -> str:
        return self._expect(ValueKind.TEXT)

    def __str__(self) -> str:
        return self.raw


def infer_value(raw: str | None) -> SmartValue:
    """Infer the kind of `raw`, trying integer, float, then boolean."""
    raw = raw or ""
    if INTEGER_PATTERN.fullmatch(raw):
        return SmartValue(raw, ValueKind.INT, int(raw))
    if FLOAT_PATTERN.fullmatch(raw):
        return SmartValue(raw, ValueKind.FLOAT, float(raw))
    if BOOLEAN_PATTERN.fullmatch(raw):
        return SmartValue(raw, ValueKind.BOOL, raw == "true")
    return SmartValue(raw, ValueKind.TEXT, raw)


def _same_kind(left: SmartValue, right: SmartValue, operation: str) -> ValueKind:
    if left.kind is not right.kind:
        raise ValueKindError(
            f"Cannot {operation} smart values of different kinds: "
            f"'{left.raw}' is {left.kind}, '{right.raw}' is {right.kind}"
        )
    return left.kind


_OPERATIONS: dict[str, dict[ValueKind, Callable[[Any, Any], Any]]] = {
    "add": {
        ValueKind.INT: lambda a, b: a + b,
        ValueKind.FLOAT: lambda a, b: a + b,
        ValueKind.BOOL: lambda a, b: a or b,
        ValueKind.TEXT: lambda a, b: a + b,
    },
    "subtract": {
        ValueKind.INT: lambda a, b: a - b,
        ValueKind.FLOAT: lambda a, b: a - b,
        ValueKind.BOOL: lambda a, b: False,
        ValueKind.TEXT: lambda a, b: a.replace(b, ""),
    },
    "multiply": {
        ValueKind.INT: lambda a, b: a * b,
        ValueKind.FLOAT: lambda a, b: a * b,
        ValueKind.BOOL: lambda a, b: a and b,
    },
    "divide": {
        ValueKind.INT: lambda a, b: a // b,
        ValueKind.FLOAT: lambda a, b: a / b,
        ValueKind.BOOL: lambda a, b: a and b,
    },
    "and": {
        ValueKind.INT: lambda a, b: a & b,
        ValueKind.BOOL: lambda a, b: a and b,
    },
    "or": {
        ValueKind.INT: lambda a, b: a | b,
        ValueKind.BOOL: lambda a, b: a or b,
    },
    "compare": {
        ValueKind.INT: lambda a, b: a == b,
        ValueKind.FLOAT: lambda a, b: a == b,
        ValueKind.BOOL: lambda a, b: a == b,
        ValueKind.TEXT: lambda a, b: a == b,
    },
    "shift left": {
        ValueKind.INT: lambda a, b: a << b,
    },
    "shift right": {
        ValueKind.INT: lambda a, b: a >> b,
    },
}


def _apply(operation: str, left: SmartValue, right: SmartValue) -> Any:
    kind = _same_kind(left, right, operation)
    function = _OPERATIONS[operation].get(kind)
    if function is None:
        raise ValueKindError(f"Cannot {operation} smart values of kind {kind}")
    try:
        return function(left.value, right.value)
    except ZeroDivisionError:
        raise SmartValueDivisionError(
            f"Cannot divide '{left.raw}' by zero", left.raw, right.raw
        ) from None


def add(left: SmartValue, right: SmartValue) -> int | float | bool | str:
    """Sum numbers, OR booleans, concatenate text."""
    return _apply("add", left, right)


def subtract(left: SmartValue, right: SmartValue) -> int | float | bool | str:
    """Subtract numbers; booleans give False; text removes occurrences of `right`."""
    return _apply("subtract", left, right)


def multiply(left: SmartValue, right: SmartValue) -> int | float | bool:
    """Multiply numbers, AND booleans. Text is not supported."""
    return _apply("multiply", left, right)


def divide(left: SmartValue, right: SmartValue) -> int | float | bool:
    """
    Floor-divide integers, divide floats, AND booleans. Text is not supported.

    Raises:
        SmartValueDivisionError: If `right` is a zero integer or float.
    """
    return _apply("divide", left, right)


def and_(left: SmartValue, right: SmartValue) -> int | bool:
    """Bitwise AND of integers, logical AND of booleans."""
    return _apply("and", left, right)


def or_(left: SmartValue, right: SmartValue) -> int | bool:
    """Bitwise OR of integers, logical OR of booleans."""
    return _apply("or", left, right)


def not_(value: SmartValue) -> bool:
    """Negate a boolean."""
    if value.kind is not ValueKind.BOOL:
        raise ValueKindError(
            f"Cannot negate smart value '{value.raw}' of kind {value.kind}"
        )
    return not value.value


def equals(left: SmartValue, right: SmartValue) -> bool:
    return _apply("compare", left, right)


def not_equals(left: SmartValue, right: SmartValue) -> bool:
    return not _apply("compare", left, right)


def shift_left(value: SmartValue, count: SmartValue) -> int:
    """Shift an integer left by an integer count."""
    return _apply("shift left", value, count)


def shift_right(value: SmartValue, count: SmartValue) -> int:
    """Shift an integer right by an integer count."""
    return _apply("shift right", value, count)
