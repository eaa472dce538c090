# karyajson

A small JSON library that is strict about the input it accepts. It parses
JSON text into plain Python values and writes Python values back out as
compact JSON text.

## Installation

```
pip install karyajson
```

## Parsing

```python
from karyajson.parser import parse_json

value = parse_json('{"name": "Alice", "age": 30, "is_active": true}')
assert value == {"name": "Alice", "age": 30, "is_active": True}
```

Values map to Python types like this:

- objects become `dict`, arrays `list`, strings `str`, `true`/`false`
  become `bool` and `null` becomes `None`;
- a number with no `.` and no exponent becomes an `int` if it fits in 64
  signed bits, otherwise a `float`;
- any number with a `.` or an exponent becomes a `float`, so `1.23e4`
  parses to `12300.0`.

The parser rejects:

- duplicate keys in an object;
- unescaped control characters (U+0000 to U+001F and U+007F) in strings;
- escape sequences other than `\" \\ \/ \b \f \n \r \t \uXXXX`;
- `\u` surrogate escapes that are not a high surrogate followed directly
  by a low one;
- numbers with a leading `+`, a `.` without following digits, or an
  exponent without digits;
- anything but whitespace after the value.

Whitespace between tokens may be any Unicode whitespace character.

`JsonParser` holds the input text and a position in it. Its methods
`parse_value`, `parse_string`, `parse_number`, `parse_boolean`,
`parse_null`, `parse_array` and `parse_object` each read one kind of value
from that position, and `parse` reads a whole document:

```python
from karyajson.parser import JsonParser

assert JsonParser('"\\uD83D\\uDE00"').parse_string() == "😀"
assert JsonParser("[1, 2, 3]").parse_array() == [1, 2, 3]
assert JsonParser("-123.456e-10").parse_number() == -123.456e-10
```

## Serializing

```python
from karyajson.encoder import to_json, escape_json_string

assert to_json({"tags": ["a", "b"], "price": 99.99}) == '{"tags":["a","b"],"price":99.99}'
assert escape_json_string('Tab\tBackspace\b') == '"Tab\\tBackspace\\b"'
```

`to_json` accepts `dict`, `list`, `tuple`, `str`, `int`, `float`, `bool`
and `None`, and writes them with no spaces. In detail:

- `"`, `\`, backspace, form feed, newline, carriage return and tab get their
  short escapes; other control characters are written as `\u00xx`.
- Floats are written in plain decimal notation without trailing zeros
  (`12300.0` becomes `12300`, `1e-7` becomes `0.0000001`); NaN and the
  infinities are written as `null`.
- Dict entries keep their insertion order.

## Errors

Every error class derives from `ValueError` and keeps the text it was
raised with in its `message` attribute; `str()` of the error adds a fixed
prefix.

Parsing errors derive from `karyajson.errors.DeserializeError`. Malformed
input raises `InvalidJsonError`:

```python
from karyajson.errors import InvalidJsonError
from karyajson.parser import parse_json

try:
    parse_json('{"name": "John", "name": "Jane"}')
except InvalidJsonError as exc:
    print(exc)  # Invalid JSON: Duplicate key 'name' in object
```

Serializing errors derive from `karyajson.errors.SerializeError`:

- `InvalidTypeError` for a value of a type `to_json` does not handle;
- `InvalidSerializeValueError` for an `int` outside 64 signed bits;
- `InvalidStructureError` for a dict key that is not a `str`.

`MissingFieldError` (with a `field` property), `TypeMismatchError` and
`InvalidDeserializeValueError` are further subclasses of
`DeserializeError` for code that builds on this library; the parser itself
does not raise them.

## What it does not do

There is no command-line tool, no streaming or incremental parsing, no
pretty-printing, and no mapping of JSON onto classes or dataclasses: input
is parsed from a whole `str` into plain values, and output is one compact
`str`.

## Running the tests

```
pip install -e ".[test]"
pytest
```