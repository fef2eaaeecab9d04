"""Runtime values of the evaluator and their truthiness and debug form."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .interner import Symbol

_I128_MIN = -(1 << 127)
_I128_MAX = (1 << 127) - 1


class Undefined:
    """The single ``undefined`` value."""

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"


class Null:
    """The single ``null`` value."""

    _instance: Null | None = None

    def __new__(cls) -> Null:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "null"


UNDEFINED = Undefined()
NULL = Null()


@dataclass(frozen=True)
class BigInt:
    """A signed 128-bit big integer value."""

    value: int

    def __post_init__(self) -> None:
        if not _I128_MIN <= self.value <= _I128_MAX:
            raise OverflowError(f"bigint {self.value} does not fit in 128 bits")


@dataclass(eq=False)
class JsObject:
    """A mutable object with ordered properties and an optional prototype."""

    properties: dict[Symbol, Any] = field(default_factory=dict)
    prototype: JsObject | None = None


def is_truthy(value: Any) -> bool:
    """Apply the language's truthiness rules to a runtime value."""
    if value is UNDEFINED or value is NULL:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, BigInt):
        return value.value != 0
    if isinstance(value, str):
        return bool(value)
    return True


def _format_number(n: float) -> str:
    n = float(n)
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n == 0:
        return "-0" if math.copysign(1.0, n) < 0 else "0"
    if n.is_integer():
        return str(int(n))
    return format(Decimal(repr(n)), "f")


_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def _quote(text: str) -> str:
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch != " " and not ch.isprintable():
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def debug_repr(value: Any) -> str:
    """Render a value the way the evaluator prints results."""
    if value is UNDEFINED:
        return "undefined"
    if value is NULL:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(value)
    if isinstance(value, BigInt):
        return f"{value.value}n"
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, Symbol):
        return f"Symbol({value!r})"
    if isinstance(value, JsObject):
        return "[object Object]"
    if callable(value):
        return "[function]"
    raise TypeError(f"not a runtime value: {value!r}")