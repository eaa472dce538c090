import pytest

from karyajson.errors import (
    DeserializeError,
    InvalidDeserializeValueError,
    InvalidJsonError,
    InvalidSerializeValueError,
    InvalidStructureError,
    InvalidTypeError,
    MissingFieldError,
    SerializeError,
    TypeMismatchError,
)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (InvalidTypeError, "Invalid type for JSON serialization: "),
        (InvalidSerializeValueError, "Invalid value for JSON serialization: "),
        (InvalidStructureError, "Invalid structure for JSON serialization: "),
    ],
)
def test_serialize_error_display(cls, prefix):
    err = cls("bad thing")
    assert str(err) == prefix + "bad thing"
    assert err.message == "bad thing"
    assert isinstance(err, SerializeError)
    assert not isinstance(err, DeserializeError)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (InvalidJsonError, "Invalid JSON: "),
        (MissingFieldError, "Missing required field: "),
        (TypeMismatchError, "Type mismatch in JSON: "),
        (InvalidDeserializeValueError, "Invalid value in JSON: "),
    ],
)
def test_deserialize_error_display(cls, prefix):
    err = cls("oops")
    assert str(err) == prefix + "oops"
    assert err.message == "oops"
    assert isinstance(err, DeserializeError)
    assert not isinstance(err, SerializeError)


def test_missing_field_exposes_field_name():
    err = MissingFieldError("name")
    assert err.field == "name"
    assert str(err).endswith("name")


def test_errors_can_be_caught_by_base():
    err = InvalidJsonError("Unexpected end of input")
    assert isinstance(err, DeserializeError)
    assert str(err) == "Invalid JSON: Unexpected end of input"
    assert err.message == "Unexpected end of input"


def test_errors_are_value_errors():
    err = InvalidStructureError("keys must be strings")
    assert isinstance(err, ValueError)
    assert err.message == "keys must be strings"
    assert str(err) == "Invalid structure for JSON serialization: keys must be strings"