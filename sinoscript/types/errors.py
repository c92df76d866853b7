"""
Error types for dictionary loading and Pinyin conversion.
"""
from __future__ import annotations


class SinoscriptError(ValueError):
    """Base class for all sinoscript errors."""


class MalformedEntryError(SinoscriptError):
    """A dictionary line could not be turned into a valid entry."""

    def __init__(self, line_number: int, line: str, reason: str = "missing '=' delimiter"):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"malformed dictionary entry at line {line_number}: {line!r} ({reason})")


class UnconvertibleCharacterError(SinoscriptError):
    """A Han character has no Pinyin reading in the strict conversion path."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"can't convert to pinyin: {char!r} at position {position}")
