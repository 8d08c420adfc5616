"""Exception hierarchy for the wire value types."""

from __future__ import annotations

from typing import Any


class WireError(Exception):
    """
    Base exception for all wire-type errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class WireTypeError(WireError, TypeError):
    """Base class for type-related errors."""


class WireTypeCoercionError(WireTypeError):
    """
    Raised when a value cannot be coerced to the expected wire type.

    Attributes:
        expected_type: The type that was expected.
        actual_type: The actual type of the value.
        value: The value that couldn't be coerced (may be truncated for display).
    """

    def __init__(
        self,
        expected_type: str,
        actual_type: str,
        value: Any = None,
    ) -> None:
        self.expected_type = expected_type
        self.actual_type = actual_type
        self.value = value

        msg = f"Expected {expected_type}, got {actual_type}"
        if value is not None:
            value_repr = repr(value)
            if len(value_repr) > 50:
                value_repr = value_repr[:47] + "..."
            msg = f"{msg}: {value_repr}"

        super().__init__(msg)


class WireValueError(WireError, ValueError):
    """
    Base class for value-related errors.

    Raised when the input has an acceptable type but cannot form a valid value.
    """


class ShaHashSizeError(WireValueError):
    """
    Raised when a byte buffer does not hold exactly one digest.

    Attributes:
        type_name: The type being built.
        expected: The required length in bytes.
        actual: The length that was supplied.
    """

    def __init__(self, type_name: str, *, expected: int, actual: int) -> None:
        self.type_name = type_name
        self.expected = expected
        self.actual = actual

        super().__init__(f"invalid {type_name} length of {actual}, want {expected}")


class HashStrSizeError(WireValueError):
    """
    Raised when a digest string holds more hex characters than fit in a digest.

    Attributes:
        max_length: The maximum number of hex characters allowed.
        actual: The number of characters after odd-length padding.
    """

    def __init__(self, *, max_length: int, actual: int) -> None:
        self.max_length = max_length
        self.actual = actual

        super().__init__(f"max hash string length is {max_length} bytes, got {actual}")


class InvalidHexError(WireValueError):
    """
    Raised when a digest string contains a character that is not a hex digit.

    Attributes:
        char: The offending character.
        position: Index of the character in the string the caller supplied.
    """

    def __init__(self, char: str, *, position: int) -> None:
        self.char = char
        self.position = position

        super().__init__(f"invalid hex character {char!r} at position {position}")


class WireSerializationError(WireError):
    """Base class for serialization-related errors."""


class WireStreamError(WireSerializationError):
    """
    Raised when a stream/IO error occurs while reading or writing a wire value.

    Attributes:
        type_name: The type being processed when the error occurred.
        operation: The operation being performed (e.g., "reading", "decoding").
        expected_bytes: Number of bytes expected (if applicable).
        actual_bytes: Number of bytes received (if applicable).
    """

    def __init__(
        self,
        type_name: str,
        operation: str,
        *,
        expected_bytes: int | None = None,
        actual_bytes: int | None = None,
    ) -> None:
        self.type_name = type_name
        self.operation = operation
        self.expected_bytes = expected_bytes
        self.actual_bytes = actual_bytes

        if expected_bytes is not None and actual_bytes is not None:
            msg = (
                f"Stream ended prematurely while {operation} {type_name}: "
                f"expected {expected_bytes} bytes, got {actual_bytes}"
            )
        elif expected_bytes is not None:
            msg = (
                f"Stream ended prematurely while {operation} {type_name}: "
                f"needed {expected_bytes} bytes"
            )
        else:
            msg = f"Stream error while {operation} {type_name}"

        super().__init__(msg)
