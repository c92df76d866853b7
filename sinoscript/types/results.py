"""
Result types for Pinyin conversion.

This module contains small immutable structures returned by the dictionary
tables and the transliterator.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhraseMatch:
    """Longest phrase override found at a scan position."""

    word: str  # Matched text, e.g. "重庆"
    pinyin: str  # Formatted syllables joined by the caller's separator


@dataclass(frozen=True)
class DictionaryInfo:
    """Immutable snapshot of the loaded dictionary tables."""

    tables_built: bool
    script_entries: int = 0
    glyph_entries: int = 0
    phrase_entries: int = 0
    max_phrase_length: int = 0
