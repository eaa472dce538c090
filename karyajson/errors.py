"""Exceptions raised while encoding values to JSON or decoding JSON text."""

from __future__ import annotations


class _MessageError(ValueError):
    """Base for errors that render as a fixed prefix followed by a message."""

    prefix = ""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}{self.message}"


class SerializeError(_MessageError):
    """A value could not be turned into JSON text."""


class InvalidTypeError(SerializeError):
    """A value has a type that JSON cannot represent."""

    prefix = "Invalid type for JSON serialization: "


class InvalidSerializeValueError(SerializeError):
    """A value of a supported type cannot be represented in JSON."""

    prefix = "Invalid value for JSON serialization: "


class InvalidStructureError(SerializeError):
    """The shape of the data is not valid for JSON."""

    prefix = "Invalid structure for JSON serialization: "


class DeserializeError(_MessageError):
    """JSON text could not be turned into a value."""


class InvalidJsonError(DeserializeError):
    """The text does not follow the JSON grammar."""

    prefix = "Invalid JSON: "


class MissingFieldError(DeserializeError):
    """A required field is absent from a JSON object."""

    prefix = "Missing required field: "

    @property
    def field(self) -> str:
        """Name of the missing field."""
        return self.message


class TypeMismatchError(DeserializeError):
    """A value has a different type than expected."""

    prefix = "Type mismatch in JSON: "


class InvalidDeserializeValueError(DeserializeError):
    """A value is not valid in its context."""

    prefix = "Invalid value in JSON: "