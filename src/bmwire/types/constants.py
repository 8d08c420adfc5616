"""Constants used throughout the library."""

from __future__ import annotations

from typing import Final

HASH_SIZE: Final = 32
"""The number of bytes in a message or block digest."""

MAX_HASH_STRING_SIZE: Final = HASH_SIZE * 2
"""The maximum number of hex characters accepted when parsing a digest string."""
