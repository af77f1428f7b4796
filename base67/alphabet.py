"""The base67 alphabet.

Uppercase letters, lowercase letters, digits, then ``+ / | \\ -``. The
padding character ``=`` is reserved and never part of the alphabet.
"""

from __future__ import annotations

from typing import Final

from base67.exceptions import SymbolNotFoundError

ALPHABET: Final[str] = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/|\\-"
)
RADIX: Final[int] = len(ALPHABET)
PADDING: Final[str] = "="

_INDEX: Final[dict[str, int]] = {symbol: i for i, symbol in enumerate(ALPHABET)}


def symbol_at(index: int) -> str:
    """Return the alphabet character for a digit in [0, 66].

    Raises:
        IndexError: If ``index`` is out of range.
    """
    if not 0 <= index < RADIX:
        raise IndexError(f"Digit out of range: {index}")
    return ALPHABET[index]


def index_of(character: str) -> int:
    """Return the digit value of an alphabet character.

    Raises:
        SymbolNotFoundError: If ``character`` is not in the alphabet.
    """
    try:
        return _INDEX[character]
    except KeyError as e:
        raise SymbolNotFoundError(character) from e
