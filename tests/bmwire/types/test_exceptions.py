"""Wire exception hierarchy tests."""

from __future__ import annotations

import pytest

from bmwire.types.exceptions import (
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


@pytest.mark.parametrize(
    ("exc", "bases"),
    [
        (ShaHashSizeError("sha", expected=32, actual=33), (WireValueError, ValueError)),
        (HashStrSizeError(max_length=64, actual=66), (WireValueError, ValueError)),
        (InvalidHexError("g", position=6), (WireValueError, ValueError)),
        (WireTypeCoercionError("str", "int", 5), (WireTypeError, TypeError)),
        (WireStreamError("ShaHash", "decoding"), (WireSerializationError,)),
    ],
)
def test_hierarchy(exc: WireError, bases: tuple[type[Exception], ...]) -> None:
    assert isinstance(exc, WireError)
    for base in bases:
        assert isinstance(exc, base)


def test_size_error_reports_both_lengths() -> None:
    err = ShaHashSizeError("sha", expected=32, actual=33)
    assert err.message == "invalid sha length of 33, want 32"
    assert repr(err) == "ShaHashSizeError('invalid sha length of 33, want 32')"


def test_hash_str_size_message() -> None:
    err = HashStrSizeError(max_length=64, actual=66)
    assert str(err) == "max hash string length is 64 bytes, got 66"


def test_invalid_hex_message() -> None:
    err = InvalidHexError("g", position=6)
    assert (err.char, err.position) == ("g", 6)
    assert str(err) == "invalid hex character 'g' at position 6"


def test_coercion_error_truncates_long_values() -> None:
    err = WireTypeCoercionError("bytes-like object", "list", list(range(100)))
    assert err.message.startswith("Expected bytes-like object, got list: [0, 1, 2")
    assert err.message.endswith("...")


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        (
            {"expected_bytes": 32, "actual_bytes": 10},
            "Stream ended prematurely while decoding ShaHash: expected 32 bytes, got 10",
        ),
        (
            {"expected_bytes": 32},
            "Stream ended prematurely while decoding ShaHash: needed 32 bytes",
        ),
        ({}, "Stream error while decoding ShaHash"),
    ],
)
def test_stream_error_messages(kwargs: dict[str, int], expected: str) -> None:
    assert str(WireStreamError("ShaHash", "decoding", **kwargs)) == expected
