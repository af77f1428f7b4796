"""Exception classes for base67.

This module defines custom exception types raised by the base67 codec.
"""


class Base67Error(Exception):
    """Base exception class for all base67 errors."""

    pass


class SymbolNotFoundError(Base67Error):
    """Exception raised when a character is not part of the base67 alphabet."""

    def __init__(self, character: str) -> None:
        super().__init__(f"Character not in alphabet: {character!r}")
        self.character = character


class DecodingError(Base67Error):
    """Exception raised when a base67 string cannot be decoded."""

    pass


class InvalidLengthError(DecodingError):
    """Exception raised when the input length is not a multiple of 4."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Invalid input length: {length}")
        self.length = length


class InvalidCharacterError(DecodingError):
    """Exception raised when a group holds a character outside the alphabet.

    Attributes:
        character: The offending character.
        position: Index of the character in the decoded input.
    """

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"Invalid character: {character!r} at position {position}")
        self.character = character
        self.position = position
