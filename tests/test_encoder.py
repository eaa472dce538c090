import json
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from karyajson.encoder import escape_json_string, to_json
from karyajson.errors import (
    InvalidSerializeValueError,
    InvalidStructureError,
    InvalidTypeError,
    SerializeError,
)

SMALL_JSON = '{"name":"John Doe","age":30,"is_active":true}'


def test_bool_display():
    assert to_json(True) == "true"
    assert to_json(False) == "false"


def test_plain_string_display():
    assert to_json("Hello, world!") == '"Hello, world!"'


def test_string_escaping_display():
    assert to_json('Hello "world"\nNew line') == r'"Hello \"world\"\nNew line"'
    assert to_json("Tab\tBackspace\x08") == r'"Tab\tBackspace\b"'


def test_escape_json_string_quotes_and_escapes():
    assert escape_json_string('a\\b"c') == r'"a\\b\"c"'
    assert escape_json_string("\f\r") == r'"\f\r"'


def test_control_characters_use_lowercase_unicode_escape():
    assert escape_json_string("\x01") == r'"\u0001"'
    assert escape_json_string("\x1f\x7f") == r'"\u001f\u007f"'


def test_non_ascii_and_slash_pass_through():
    assert escape_json_string("é/😀") == '"é/😀"'


def test_null_and_ints():
    assert to_json(None) == "null"
    assert to_json(30) == "30"
    assert to_json(-120) == "-120"


def test_small_object_matches_benchmark_document():
    value = {"name": "John Doe", "age": 30, "is_active": True}
    assert to_json(value) == SMALL_JSON


def test_nested_structures():
    value = {"grades": [85, 90, 92], "address": {"city": "Anytown"}, "phone": None}
    assert (
        to_json(value)
        == '{"grades":[85,90,92],"address":{"city":"Anytown"},"phone":null}'
    )
    assert to_json([]) == "[]"
    assert to_json({}) == "{}"


def test_keys_are_escaped():
    assert to_json({'a"b': 1}) == '{"a\\"b":1}'


def test_float_display():
    assert to_json(98.6) == "98.6"
    assert to_json(-20.012) == "-20.012"
    assert to_json(12300.0) == "12300"
    assert to_json(-123.456e-10) == "-0.0000000123456"


@pytest.mark.parametrize("special", [math.nan, math.inf, -math.inf])
def test_non_finite_floats_become_null(special):
    assert to_json(special) == "null"


def test_unsupported_type_raises():
    with pytest.raises(InvalidTypeError):
        to_json(object())


def test_non_string_key_raises():
    with pytest.raises(InvalidStructureError):
        to_json({1: "x"})


@pytest.mark.parametrize("number", [2**63, -(2**63) - 1])
def test_out_of_range_int_raises(number):
    with pytest.raises(InvalidSerializeValueError):
        to_json(number)


def test_int_bounds_accepted():
    assert to_json(2**63 - 1) == str(2**63 - 1)
    assert to_json(-(2**63)) == str(-(2**63))


def test_serialize_errors_share_base():
    with pytest.raises(SerializeError):
        to_json({"k": {1, 2}})


_ints = st.integers(min_value=-(2**63), max_value=2**63 - 1)
_scalars = st.none() | st.booleans() | _ints | st.text()
_values = st.recursive(
    _scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(), children, max_size=4),
    max_leaves=20,
)


@given(_values)
def test_round_trip_through_standard_decoder(value):
    assert json.loads(to_json(value)) == value


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_finite_float_round_trip(number):
    text = to_json(number)
    assert "e" not in text.lower()
    assert float(text) == number


@given(st.text())
def test_escaped_string_has_no_raw_control_characters(text):
    encoded = escape_json_string(text)
    assert not any(ord(ch) < 0x20 for ch in encoded)
    assert json.loads(encoded) == text