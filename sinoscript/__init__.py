"""
Sinoscript: Chinese to Pinyin and Traditional/Simplified Conversion Library

An embeddable library for converting Chinese text to Pinyin with
context-aware polyphone handling, and between Simplified and Traditional
character forms.
"""

from sinoscript.types import (
    DictionaryInfo,
    MalformedEntryError,
    SinoscriptError,
    ToneFormat,
    TransliterationConfig,
    UnconvertibleCharacterError,
)

__version__ = "0.1.0"

__all__ = [
    "DictionaryInfo",
    "MalformedEntryError",
    "SinoscriptError",
    "ToneFormat",
    "TransliterationConfig",
    "Transliterator",
    "UnconvertibleCharacterError",
]

def __getattr__(name):
    """Lazy import to avoid eager loading of the dictionary data packages."""
    if name == "Transliterator":
        from .transliterator import Transliterator
        return Transliterator
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
