"""Encoding interfaces for base67.

This module defines protocols for binary-to-text encoders and for
asynchronous token encoders built on top of them.
"""

from __future__ import annotations

from typing import Protocol


class IBinaryEncoder(Protocol):
    """Interface for binary-to-text encoding operations."""

    def encode(self, data: bytes) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str) -> bytes:
        """Decode text back into bytes.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            DecodingError: When the text is not a valid encoding.
        """
        ...


class ITokenEncoder(Protocol):
    """Interface for token encoding and decoding operations."""

    async def encode(self, object: str) -> str:
        """Encode an object string into a token.

        Args:
            object: The object string to encode.

        Returns:
            The encoded token.
        """
        ...

    async def decode(self, raw_token: str) -> str:
        """Decode a raw token into an object string.

        Args:
            raw_token: The raw token to decode.

        Returns:
            The decoded object string.
        """
        ...
