"""
Message and block digest type.

A `ShaHash` is the 32-byte value that identifies objects on the wire. It is
treated as opaque: nothing here computes hashes, it only carries them.

Two byte orders are in play:

- Protocol order: the bytes exactly as they travel inside a message.
- Display order: the reverse of protocol order, used only in the hex string
  form shown in logs, command lines and configuration files.

So the digest whose first wire byte is 0x06 and last wire byte is 0x00 is
displayed as "0000...06". Parsing a display string reverses it back.
"""

from __future__ import annotations

import logging
import string
from typing import IO, Any, ClassVar

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .constants import HASH_SIZE, MAX_HASH_STRING_SIZE
from .exceptions import (
    HashStrSizeError,
    InvalidHexError,
    ShaHashSizeError,
    WireStreamError,
    WireTypeCoercionError,
)
from .wire_base import WireType

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Copy a bytes-like input into a fresh immutable `bytes`.

    Accepts `bytes`, `bytearray`, `memoryview` and `ShaHash`. Strings are
    rejected: a hex string must go through `ShaHash.from_str` so that the
    display-order reversal is applied.
    """
    if isinstance(value, ShaHash):
        return value.to_bytes()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise WireTypeCoercionError("bytes-like object", type(value).__name__, value)


class ShaHash(WireType):
    """
    A fixed-size 32-byte digest stored in protocol order.

    The buffer never changes length. The only mutation is `set_bytes`, which
    validates before it writes, so a failed call leaves the value untouched.
    """

    __slots__ = ("_data",)

    LENGTH: ClassVar[int] = HASH_SIZE
    """The exact number of bytes in a digest."""

    # Mutable, so it must not be used as a dict key. Use `to_bytes()` instead.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = None) -> None:
        """
        Create a digest from raw protocol-order bytes.

        Args:
            value: Exactly 32 bytes, or None for the all-zero digest.

        Raises:
            ShaHashSizeError: If the input is not exactly 32 bytes long.
            WireTypeCoercionError: If the input is not bytes-like.
        """
        self._data = bytearray(HASH_SIZE)
        if value is not None:
            self.set_bytes(value)

    @classmethod
    def zero(cls) -> Self:
        """Return a new all-zero digest."""
        return cls()

    @classmethod
    def from_str(cls, hash_str: str) -> Self:
        """
        Parse a display-order hex string.

        The string may be shorter than 64 characters, in which case the
        missing high-order bytes are zero. An odd-length string is treated as
        if it had one extra leading "0", so "1" is the digest whose first
        protocol-order byte is 0x01. The empty string is the zero digest.

        Args:
            hash_str: Upper- or lower-case hex digits, no "0x" prefix.

        Raises:
            HashStrSizeError: If the string encodes more than 32 bytes.
            InvalidHexError: If a character is not a hex digit.
        """
        if not isinstance(hash_str, str):
            raise WireTypeCoercionError("str", type(hash_str).__name__, hash_str)
        if not hash_str:
            return cls()

        padded = "0" + hash_str if len(hash_str) % 2 else hash_str
        if len(padded) > MAX_HASH_STRING_SIZE:
            logger.debug("Rejected hash string of %d characters", len(hash_str))
            raise HashStrSizeError(max_length=MAX_HASH_STRING_SIZE, actual=len(padded))

        for position, char in enumerate(hash_str):
            if char not in _HEX_DIGITS:
                logger.debug("Rejected hash string with %r at position %d", char, position)
                raise InvalidHexError(char, position=position)

        # Decoded bytes are in display order; flip them and zero-fill the tail.
        decoded = bytes.fromhex(padded)
        return cls(decoded[::-1].ljust(HASH_SIZE, b"\x00"))

    def set_bytes(self, value: Any) -> None:
        """
        Overwrite the digest in place with 32 protocol-order bytes.

        Raises:
            ShaHashSizeError: If the input is not exactly 32 bytes long.
            WireTypeCoercionError: If the input is not bytes-like.
        """
        data = _coerce_to_bytes(value)
        if len(data) != HASH_SIZE:
            logger.debug("Rejected %d-byte buffer for %s", len(data), type(self).__name__)
            raise ShaHashSizeError("sha", expected=HASH_SIZE, actual=len(data))
        self._data[:] = data

    def to_bytes(self) -> bytes:
        """Return a copy of the 32 protocol-order bytes."""
        return bytes(self._data)

    def to_str(self) -> str:
        """Return the 64-character lowercase display-order hex string."""
        return self._data[::-1].hex()

    def is_equal(self, other: ShaHash | None) -> bool:
        """Return whether `other` holds the same bytes. Comparing to None is False."""
        if other is None:
            return False
        return self._data == other._data

    @classmethod
    def is_fixed_size(cls) -> bool:
        """A digest always occupies the same number of bytes."""
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        """Get the byte length of a digest."""
        return HASH_SIZE

    def serialize(self, stream: IO[bytes]) -> int:
        """
        Write the raw protocol-order bytes to `stream`.

        Returns:
            Number of bytes written (always 32).
        """
        stream.write(self.to_bytes())
        return HASH_SIZE

    @classmethod
    def deserialize(cls, stream: IO[bytes], scope: int) -> Self:
        """
        Read exactly `scope` bytes from `stream` and build a digest.

        Raises:
            ShaHashSizeError: If `scope` is not 32.
            WireStreamError: If the stream ends prematurely.
        """
        if scope != HASH_SIZE:
            raise ShaHashSizeError("sha", expected=HASH_SIZE, actual=scope)
        data = stream.read(scope)
        if len(data) != scope:
            raise WireStreamError(
                cls.__name__, "decoding", expected_bytes=scope, actual_bytes=len(data)
            )
        return cls(data)

    @classmethod
    def read_from(cls, stream: IO[bytes]) -> Self:
        """Read one digest field from the current position of `stream`."""
        return cls.deserialize(stream, HASH_SIZE)

    def encode_bytes(self) -> bytes:
        """Return the digest's wire representation."""
        return self.to_bytes()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        Accepts an existing digest, 32 raw bytes, or a display-order hex
        string. JSON input is always read as a display-order string.
        Serializes to the display-order hex string in JSON mode.
        """
        raw_schema = core_schema.chain_schema(
            [
                core_schema.bytes_schema(min_length=HASH_SIZE, max_length=HASH_SIZE, strict=True),
                core_schema.no_info_plain_validator_function(cls),
            ]
        )
        display_schema = core_schema.chain_schema(
            [
                core_schema.str_schema(strict=True),
                core_schema.no_info_plain_validator_function(cls.from_str),
            ]
        )

        return core_schema.json_or_python_schema(
            json_schema=display_schema,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(cls),
                    raw_schema,
                    display_schema,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda x: x.to_str(), when_used="json"
            ),
        )

    def __bytes__(self) -> bytes:
        """Return a copy of the protocol-order bytes."""
        return self.to_bytes()

    def __len__(self) -> int:
        return HASH_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShaHash):
            return NotImplemented
        return self.is_equal(other)

    def __copy__(self) -> Self:
        return type(self)(self._data)

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.__copy__()

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        """Return a string representation in display order."""
        return f"{type(self).__name__}({self.to_str()})"


def new_sha_hash(data: Any) -> ShaHash:
    """Return a new digest holding a copy of 32 protocol-order bytes."""
    return ShaHash(data)


def new_sha_hash_from_str(hash_str: str) -> ShaHash:
    """Return a new digest parsed from a display-order hex string."""
    return ShaHash.from_str(hash_str)
