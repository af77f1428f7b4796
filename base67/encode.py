"""Base67 encoding.

Input is processed in chunks of 3 bytes, each written as 4 base67 digits. A
short final chunk of 2 bytes becomes 3 digits and ``=``; a final chunk of 1
byte becomes 2 digits and ``==``.
"""

from __future__ import annotations

from typing import Union

from base67.alphabet import PADDING, RADIX, symbol_at

BytesLike = Union[bytes, bytearray, memoryview]

# Digits emitted for a chunk of 1, 2 or 3 bytes.
_DIGITS = {1: 2, 2: 3, 3: 4}


def encode(data: BytesLike) -> str:
    """Encode binary data into a base67 string.

    Args:
        data: The bytes to encode.

    Returns:
        The base67 string. Empty input yields an empty string.

    Raises:
        TypeError: If ``data`` is not bytes-like.

    Example:
        >>> encode(b"foo")
        'WVgA'
        >>> encode(b"Rust")
        'R|4ABx=='
    """
    view = _as_bytes(data)
    return _encode_span(view, 0, len(view))


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str) or not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")
    return bytes(data)


def _encode_span(data: bytes, start: int, stop: int) -> str:
    """Encode ``data[start:stop]``; ``start`` must fall on a chunk boundary."""
    output: list[str] = []
    for offset in range(start, stop, 3):
        output.append(_encode_chunk(data[offset : min(offset + 3, stop)]))
    return "".join(output)


def _encode_chunk(chunk: bytes) -> str:
    width = _DIGITS[len(chunk)]
    value = int.from_bytes(chunk, "big")

    digits = [""] * width
    for i in range(width - 1, -1, -1):
        value, digit = divmod(value, RADIX)
        digits[i] = symbol_at(digit)

    return "".join(digits) + PADDING * (4 - width)
