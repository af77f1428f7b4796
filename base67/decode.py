"""Base67 decoding.

The input is read in groups of 4 characters. Padding is recognized only in
the last two positions of a group: ``xx==`` carries one byte, ``xxx=`` two
bytes, and an unpadded group three bytes.
"""

from __future__ import annotations

from base67.alphabet import PADDING, RADIX, index_of
from base67.exceptions import (
    InvalidCharacterError,
    InvalidLengthError,
    SymbolNotFoundError,
)


def decode(text: str) -> bytes:
    """Decode a base67 string back into binary data.

    Args:
        text: The base67 string to decode.

    Returns:
        The decoded bytes. An empty string yields empty bytes.

    Raises:
        TypeError: If ``text`` is not a string.
        InvalidLengthError: If the length is not a multiple of 4.
        InvalidCharacterError: If a non-padding position holds a character
            outside the alphabet.

    Example:
        >>> decode("WVgA")
        b'foo'
    """
    check_length(text)
    return _decode_span(text, 0, len(text))


def check_length(text: str) -> None:
    """Validate the type and length of a base67 string before decoding.

    Raises:
        TypeError: If ``text`` is not a string.
        InvalidLengthError: If the length is not a multiple of 4.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    if len(text) % 4 != 0:
        raise InvalidLengthError(len(text))


def _decode_span(text: str, start: int, stop: int) -> bytes:
    """Decode the groups of ``text[start:stop]``; both ends fall on group boundaries."""
    output = bytearray()
    for offset in range(start, stop, 4):
        output += _decode_group(text, offset)
    return bytes(output)


def _decode_group(text: str, offset: int) -> bytes:
    if text[offset + 2] == PADDING and text[offset + 3] == PADDING:
        width = 2
    elif text[offset + 3] == PADDING:
        width = 3
    else:
        width = 4

    value = 0
    for position in range(offset, offset + width):
        value = value * RADIX + _digit(text, position)

    # Over-range values truncate to the low bits.
    size = width - 1
    return (value & ((1 << (8 * size)) - 1)).to_bytes(size, "big")


def _digit(text: str, position: int) -> int:
    character = text[position]
    try:
        return index_of(character)
    except SymbolNotFoundError as e:
        raise InvalidCharacterError(character, position) from e
