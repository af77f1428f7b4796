"""Base67 Python implementation.

This package provides base67 encoding and decoding, a base64-like binary to
text encoding built on a 67-character alphabet. Input is processed in groups
of 3 bytes, each written as 4 characters; ``=`` pads a short final group.

Main Components:
    - encode / decode: Module-level codec functions
    - Base67: Codec class with optional parallel processing
    - CodecConfig: Configuration for Base67
    - Interfaces: Protocol definitions for encoders

Example:
    >>> from base67 import decode, encode
    >>> encode(b"foo")
    'WVgA'
    >>> decode("WVgA")
    b'foo'
"""

from base67.alphabet import ALPHABET, PADDING, RADIX, index_of, symbol_at
from base67.codec import Base67, CodecConfig
from base67.decode import decode
from base67.encode import encode
from base67.exceptions import (
    Base67Error,
    DecodingError,
    InvalidCharacterError,
    InvalidLengthError,
    SymbolNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Codec
    "encode",
    "decode",
    "Base67",
    "CodecConfig",
    # Alphabet
    "ALPHABET",
    "PADDING",
    "RADIX",
    "index_of",
    "symbol_at",
    # Exceptions
    "Base67Error",
    "DecodingError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "SymbolNotFoundError",
]
