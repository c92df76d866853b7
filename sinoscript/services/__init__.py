"""
Services package for Chinese text transliteration.

This package contains the dictionary tables and the services that load and
format them, organized by responsibility.
"""

from sinoscript.services.formatting import ToneFormattingService
from sinoscript.services.glyph_table import GlyphTable
from sinoscript.services.initialization import DictionaryInitializationService, DictionaryTables
from sinoscript.services.loader import ResourceLoader
from sinoscript.services.phrase_table import PhraseOverrideTable
from sinoscript.services.script_map import ScriptMap
from sinoscript.types import (
    DictionaryInfo,
    MalformedEntryError,
    PhraseMatch,
    ToneFormat,
    TransliterationConfig,
    UnconvertibleCharacterError,
)

__all__ = [
    # Data structures
    "DictionaryInfo",
    "DictionaryInitializationService",
    "DictionaryTables",
    # Tables
    "GlyphTable",
    "MalformedEntryError",
    "PhraseMatch",
    "PhraseOverrideTable",
    # Services
    "ResourceLoader",
    "ScriptMap",
    "ToneFormat",
    "ToneFormattingService",
    # Types (re-exported for compatibility)
    "TransliterationConfig",
    "UnconvertibleCharacterError",
]
