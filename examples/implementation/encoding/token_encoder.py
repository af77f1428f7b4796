"""Token compression and encoding implementation.

This module provides token encoding/decoding with gzip compression and base67
encoding.
"""

import gzip

from base67 import Base67
from base67.interfaces import ITokenEncoder


class TokenEncoder(ITokenEncoder):
    """Token encoder that compresses and encodes tokens.

    Encoding converts the input string to UTF-8 bytes, compresses them with
    gzip at level 9, encodes the result with base67 and removes the padding
    '=' characters. Decoding reverses this process.
    """

    def __init__(self, codec: Base67 | None = None) -> None:
        self.codec = codec if codec is not None else Base67()

    async def encode(self, object: str) -> str:
        """Encode an object string into a compressed and encoded token.

        Args:
            object: The object string to encode.

        Returns:
            The compressed and encoded token string without padding.

        Example:
            >>> encoder = TokenEncoder()
            >>> token = await encoder.encode('{"user": "alice", "role": "admin"}')
            >>> isinstance(token, str)
            True
        """
        compressed_token = gzip.compress(object.encode("utf-8"), compresslevel=9)
        return self.codec.encode(compressed_token).rstrip("=")

    async def decode(self, raw_token: str) -> str:
        """Decode a compressed and encoded token back to the original string.

        Args:
            raw_token: The raw token string to decode.

        Returns:
            The decoded and decompressed object string.

        Raises:
            DecodingError: If the token is not valid base67.
            gzip.BadGzipFile: If the token is not valid gzip data.
            UnicodeDecodeError: If the decompressed data is not valid UTF-8.
        """
        token = raw_token

        # Restore padding (base67 strings must have length divisible by 4)
        while len(token) % 4 != 0:
            token += "="

        compressed_token = self.codec.decode(token)
        return gzip.decompress(compressed_token).decode("utf-8")
