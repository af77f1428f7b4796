"""Tests for base67 decoding."""

from __future__ import annotations

import pytest

from base67 import (
    DecodingError,
    InvalidCharacterError,
    InvalidLengthError,
    decode,
    encode,
)


def test_decode_empty() -> None:
    """Test that an empty string decodes to empty bytes."""
    assert decode("") == b""


def test_decode_known_values() -> None:
    """Test decoding against known vectors."""
    assert decode("WVgA") == b"foo"
    assert decode("AAAA") == bytes([0, 0, 0])
    assert decode("R|4ABx==") == b"Rust"
    assert decode("Pz+SXqDwaBsnGMK=") == b"Hello world"


def test_round_trip() -> None:
    """Test that decode inverts encode for lengths 0 through 200."""
    for length in range(201):
        data = bytes((i * 31 + length * 7) % 256 for i in range(length))
        assert decode(encode(data)) == data, f"Failed round trip for length {length}"


def test_round_trip_all_byte_values() -> None:
    """Test a round trip over every byte value in every chunk position."""
    data = bytes(range(256)) * 3
    for shift in range(3):
        assert decode(encode(data[shift:])) == data[shift:]


@pytest.mark.parametrize("text", ["A", "AB", "ABC", "ABCDE", "WVgA="])
def test_decode_invalid_length(text: str) -> None:
    """Test that lengths that are not a multiple of 4 are rejected."""
    with pytest.raises(InvalidLengthError) as excinfo:
        decode(text)
    assert excinfo.value.length == len(text)
    assert isinstance(excinfo.value, DecodingError)


@pytest.mark.parametrize(
    "text, character, position",
    [
        ("AB!A", "!", 2),
        ("AAAA\x00AAA", "\x00", 4),
        ("=AAA", "=", 0),
        ("A=A=", "=", 1),
        ("A===", "=", 1),
        ("AA=A", "=", 2),
        ("WVgA_AA=", "_", 4),
        ("Aé==", "é", 1),
    ],
)
def test_decode_invalid_character(text: str, character: str, position: int) -> None:
    """Test that characters outside the alphabet are reported with their position."""
    with pytest.raises(InvalidCharacterError) as excinfo:
        decode(text)
    assert excinfo.value.character == character
    assert excinfo.value.position == position


def test_decode_reports_first_invalid_character() -> None:
    """Test that the earliest invalid character fails the whole input."""
    with pytest.raises(InvalidCharacterError) as excinfo:
        decode("WVgA!?AA")
    assert excinfo.value.character == "!"


def test_decode_padding_in_any_group() -> None:
    """Test that padded groups are honored before the final group."""
    assert decode("BK==BK==") == b"MM"


def test_decode_over_range_values_truncate() -> None:
    """Test that values beyond the byte range keep only their low bits."""
    assert decode("--==") == b"\x88"
    assert decode("---=") == b"\x96\xda"
    assert decode("----") == b"\x33\x7b\x50"


def test_decode_rejects_non_str() -> None:
    """Test that bytes input raises TypeError."""
    with pytest.raises(TypeError):
        decode(b"WVgA")  # type: ignore[arg-type]
