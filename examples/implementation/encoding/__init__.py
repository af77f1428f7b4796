"""Encoding reference implementation package.

This package provides reference implementations built on base67, including
token compression/encoding.
"""

from .token_encoder import TokenEncoder

__all__ = [
    "TokenEncoder",
]
