"""Reusable value types for the wire protocol."""

from .constants import HASH_SIZE, MAX_HASH_STRING_SIZE
from .exceptions import (
    HashStrSizeError,
    InvalidHexError,
    ShaHashSizeError,
    WireError,
    WireSerializationError,
    WireStreamError,
    WireTypeCoercionError,
    WireTypeError,
    WireValueError,
)
from .shahash import ShaHash, new_sha_hash, new_sha_hash_from_str
from .wire_base import WireType

__all__ = [
    # Core types
    "ShaHash",
    "WireType",
    "new_sha_hash",
    "new_sha_hash_from_str",
    "HASH_SIZE",
    "MAX_HASH_STRING_SIZE",
    # Exceptions
    "WireError",
    "WireTypeError",
    "WireTypeCoercionError",
    "WireValueError",
    "ShaHashSizeError",
    "HashStrSizeError",
    "InvalidHexError",
    "WireSerializationError",
    "WireStreamError",
]
