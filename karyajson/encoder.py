"""Turning Python values into JSON text."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from .errors import InvalidSerializeValueError, InvalidStructureError, InvalidTypeError

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _is_control(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or 0x7F <= code <= 0x9F


def _escape_char(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if _is_control(ch):
        return f"\\u{ord(ch):04x}"
    return ch


def escape_json_string(text: str) -> str:
    """Return ``text`` as a quoted, escaped JSON string literal."""
    return '"' + "".join(_escape_char(ch) for ch in text) + '"'


def _format_float(number: float) -> str:
    if number != number or number in (float("inf"), float("-inf")):
        return "null"
    digits = format(Decimal(repr(number)), "f")
    if "." in digits:
        digits = digits.rstrip("0").rstrip(".")
    return digits


def to_json(value: Any) -> str:
    """Render a value made of dicts, lists, str, int, float, bool and None as JSON.

    Floats are written in plain decimal notation with no trailing zeros;
    NaN and infinities become ``null``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        if not _INT_MIN <= value <= _INT_MAX:
            raise InvalidSerializeValueError(
                f"integer {value} does not fit in 64 signed bits"
            )
        return str(int(value))
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return escape_json_string(value)
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(to_json(item) for item in value) + "]"
    if isinstance(value, dict):
        parts = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidStructureError(
                    f"object keys must be strings, got {type(key).__name__}"
                )
            parts.append(f"{escape_json_string(key)}:{to_json(item)}")
        return "{" + ",".join(parts) + "}"
    raise InvalidTypeError(f"cannot encode value of type {type(value).__name__}")