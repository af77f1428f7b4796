"""Base67 interfaces package.

This package provides protocol definitions for encoders.
"""

from .encoding import IBinaryEncoder, ITokenEncoder

__all__ = [
    "IBinaryEncoder",
    "ITokenEncoder",
]
