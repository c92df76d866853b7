"""
Types package for Chinese text transliteration.

This package contains result types, configuration classes, the tone format
enum and the error taxonomy used throughout the conversion pipeline.
"""

from sinoscript.types.config import TransliterationConfig
from sinoscript.types.errors import MalformedEntryError, SinoscriptError, UnconvertibleCharacterError
from sinoscript.types.formats import ToneFormat
from sinoscript.types.results import DictionaryInfo, PhraseMatch

__all__ = [
    "DictionaryInfo",
    "MalformedEntryError",
    "PhraseMatch",
    "SinoscriptError",
    "ToneFormat",
    "TransliterationConfig",
    "UnconvertibleCharacterError",
]
