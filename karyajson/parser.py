"""Turning JSON text into Python values."""

from __future__ import annotations

from typing import Any

from .errors import InvalidJsonError

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Characters carrying the Unicode White_Space property.
_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def _is_ascii_control(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or code == 0x7F


class JsonParser:
    """A recursive-descent parser for one JSON document.

    Objects become dicts, arrays lists, strings str, integers that fit in
    64 signed bits int, other numbers float, and ``null`` becomes None.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def parse(self) -> Any:
        """Parse the whole input as a single JSON value."""
        self._skip_whitespace()
        value = self.parse_value()
        self._skip_whitespace()
        if self._pos < len(self._text):
            raise InvalidJsonError("Unexpected trailing characters")
        return value

    def parse_value(self) -> Any:
        """Parse the next JSON value of any kind."""
        self._skip_whitespace()
        ch = self._peek()
        if ch is None:
            raise InvalidJsonError("Unexpected end of input")
        if ch == '"':
            return self.parse_string()
        if ch == "-" or ch in _DIGITS:
            return self.parse_number()
        if ch in ("t", "f"):
            return self.parse_boolean()
        if ch == "n":
            return self.parse_null()
        if ch == "[":
            return self.parse_array()
        if ch == "{":
            return self.parse_object()
        raise InvalidJsonError(f"Unexpected character: {ch}")

    def parse_string(self) -> str:
        """Parse a quoted string, resolving its escape sequences."""
        self._expect_char('"')
        pieces: list[str] = []
        while (ch := self._next()) is not None:
            if ch == '"':
                return "".join(pieces)
            if ch == "\\":
                escaped = self._next()
                if escaped is None:
                    break
                if escaped in _SIMPLE_ESCAPES:
                    pieces.append(_SIMPLE_ESCAPES[escaped])
                elif escaped == "u":
                    pieces.append(self._parse_unicode_escape())
                else:
                    raise InvalidJsonError(f"Invalid escape sequence: \\{escaped}")
            elif _is_ascii_control(ch):
                raise InvalidJsonError(
                    f"Unescaped control character (0x{ord(ch):02X}) in string"
                )
            else:
                pieces.append(ch)
        raise InvalidJsonError("Unterminated string")

    def parse_number(self) -> int | float:
        """Parse a number: int when it is integral and fits in 64 bits, else float."""
        start = self._pos
        if self._peek() == "-":
            self._pos += 1

        ch = self._peek()
        if ch == "0":
            self._pos += 1
        elif ch is not None and ch in _DIGITS:
            self._skip_digits()
        else:
            raise InvalidJsonError("Invalid number format")

        is_integral = True
        if self._peek() == ".":
            is_integral = False
            self._pos += 1
            if not self._skip_digits():
                raise InvalidJsonError("Expected digits after decimal point")

        if self._peek() in ("e", "E"):
            is_integral = False
            self._pos += 1
            if self._peek() in ("+", "-"):
                self._pos += 1
            if not self._skip_digits():
                raise InvalidJsonError("Expected digits in exponent")

        literal = self._text[start:self._pos]
        if is_integral:
            number = int(literal)
            if _INT_MIN <= number <= _INT_MAX:
                return number
        return float(literal)

    def parse_boolean(self) -> bool:
        """Parse ``true`` or ``false``."""
        ch = self._peek()
        if ch == "t":
            self._expect_literal("true")
            return True
        if ch == "f":
            self._expect_literal("false")
            return False
        raise InvalidJsonError("Expected boolean value")

    def parse_null(self) -> None:
        """Parse ``null``."""
        self._expect_literal("null")
        return None

    def parse_array(self) -> list[Any]:
        """Parse a bracketed, comma-separated list of values."""
        self._expect_char("[")
        items: list[Any] = []
        self._skip_whitespace()
        if self._peek() == "]":
            self._pos += 1
            return items

        while True:
            self._skip_whitespace()
            items.append(self.parse_value())
            self._skip_whitespace()
            ch = self._next()
            if ch == ",":
                continue
            if ch == "]":
                return items
            if ch is None:
                raise InvalidJsonError("Unterminated array")
            raise InvalidJsonError(f"Expected ',' or ']', found '{ch}'")

    def parse_object(self) -> dict[str, Any]:
        """Parse a braced set of key-value pairs; duplicate keys are rejected."""
        self._expect_char("{")
        members: dict[str, Any] = {}
        self._skip_whitespace()
        if self._peek() == "}":
            self._pos += 1
            return members

        while True:
            self._skip_whitespace()
            key = self.parse_string()
            self._skip_whitespace()
            if key in members:
                raise InvalidJsonError(f"Duplicate key '{key}' in object")
            self._expect_char(":")
            self._skip_whitespace()
            members[key] = self.parse_value()
            self._skip_whitespace()
            ch = self._next()
            if ch == ",":
                continue
            if ch == "}":
                return members
            if ch is None:
                raise InvalidJsonError("Unterminated object")
            raise InvalidJsonError(f"Expected ',' or '}}', found '{ch}'")

    def _parse_four_hex_digits(self) -> int:
        code_point = 0
        for _ in range(4):
            ch = self._next()
            if ch is None:
                raise InvalidJsonError("Unexpected end of Unicode escape sequence")
            if ch not in _HEX_DIGITS:
                raise InvalidJsonError(f"Invalid Unicode escape sequence: {ch}")
            code_point = code_point * 16 + int(ch, 16)
        return code_point

    def _parse_unicode_escape(self) -> str:
        code_point = self._parse_four_hex_digits()
        if 0xD800 <= code_point <= 0xDBFF:
            if self._peek() == "\\":
                self._pos += 1
                if self._peek() == "u":
                    self._pos += 1
                    low = self._parse_four_hex_digits()
                    if 0xDC00 <= low <= 0xDFFF:
                        return chr(0x10000 + (((code_point - 0xD800) << 10) | (low - 0xDC00)))
                    raise InvalidJsonError(
                        f"Invalid low surrogate in Unicode surrogate pair: U+{low:04X}"
                    )
            raise InvalidJsonError(
                f"High surrogate U+{code_point:04X} not followed by low surrogate"
            )
        if 0xDC00 <= code_point <= 0xDFFF:
            raise InvalidJsonError(f"Unexpected low surrogate: U+{code_point:04X}")
        return chr(code_point)

    def _expect_char(self, expected: str) -> None:
        ch = self._next()
        if ch is None:
            raise InvalidJsonError(f"Expected '{expected}', found end of input")
        if ch != expected:
            raise InvalidJsonError(f"Expected '{expected}', found '{ch}'")

    def _expect_literal(self, literal: str) -> None:
        for expected in literal:
            self._expect_char(expected)

    def _skip_digits(self) -> bool:
        start = self._pos
        while (ch := self._peek()) is not None and ch in _DIGITS:
            self._pos += 1
        return self._pos > start

    def _peek(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def _next(self) -> str | None:
        ch = self._peek()
        if ch is not None:
            self._pos += 1
        return ch

    def _skip_whitespace(self) -> None:
        while (ch := self._peek()) is not None and ch in _WHITESPACE:
            self._pos += 1


def parse_json(text: str) -> Any:
    """Parse a complete JSON document into Python values."""
    return JsonParser(text).parse()