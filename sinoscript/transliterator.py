"""
Chinese Text Transliteration Module

This module converts Chinese text to Pinyin and between Simplified and
Traditional character forms, for phonetic indexing, search normalization and
sorting of Chinese text.

## Overview

The core functionality is provided by the `Transliterator` class, which runs
every input through a three-stage pipeline:

1. **Script Normalization**: Traditional characters are mapped to Simplified
2. **Phrase Overrides**: At each position the longest known phrase wins, so
   polyphones read correctly in context (重庆 → chong qing)
3. **Character Lookup**: Otherwise the primary reading of the single
   character is used; non-Han characters pass through unchanged

## Architecture

- **ScriptMap**: Traditional↔Simplified mapping with a reverse index
- **GlyphTable**: Character → tone-marked Pinyin candidates
- **PhraseOverrideTable**: Phrase → Pinyin, greedy longest match
- **ToneFormattingService**: Tone mark / tone number / no tone output
- **DictionaryInitializationService**: Builds the tables from key=value resources
- **Transliterator**: Orchestrator with dependency-injected tables

## Usage Examples

```python
from sinoscript import ToneFormat, Transliterator

t = Transliterator()
t.to_pinyin("你好")                                   # "nihao"
t.to_pinyin("中国", " ", ToneFormat.WITH_TONE_NUMBER)  # "zhong1 guo2"
t.to_pinyin("重庆", " ", ToneFormat.WITH_TONE_MARK)    # "chóng qìng"
t.initials("成都")                                    # "cd"
t.to_simplified("漢語")                               # "汉语"

# Han characters without a reading: strict vs lenient
t.to_pinyin(text)                          # raises UnconvertibleCharacterError
t.to_pinyin_lenient(text, " ", "?")        # "?" in its place plus a logged warning

# Extend the dictionaries at runtime
t.add_pinyin_dict(["丂=kǎo"])
t.add_multi_pinyin_dict(["长发=cháng,fà"])
```

## Error Handling

- `MalformedEntryError`: a dictionary line lacks '=' or breaks a table invariant
- `UnconvertibleCharacterError`: strict conversion met a Han character with no reading
- Script conversion never fails; unknown characters are returned unchanged

## Thread Safety

Reads are safe from multiple threads once the tables are built. The
`add_*_dict` methods mutate the tables and must be serialized by the caller.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable

from sinoscript.log import logger
from sinoscript.services import (
    DictionaryInfo,
    DictionaryInitializationService,
    DictionaryTables,
    ToneFormat,
    TransliterationConfig,
    UnconvertibleCharacterError,
)

# Separator used internally by first_syllable and initials
_TOKEN_SEPARATOR = ","


class Transliterator:
    """Main Chinese → Pinyin and Traditional ↔ Simplified conversion service."""

    def __init__(self, config: TransliterationConfig | None = None, tables: DictionaryTables | None = None):
        self._config = config or TransliterationConfig.create_default()
        self._data_service = DictionaryInitializationService(self._config)
        self._tables = tables

    @classmethod
    def from_lines(
        cls,
        chinese: Iterable[str] = (),
        pinyin: Iterable[str] = (),
        multi_pinyin: Iterable[str] = (),
        config: TransliterationConfig | None = None,
    ) -> Transliterator:
        """Create a transliterator over the given key=value lines only."""
        config = config or TransliterationConfig.create_default()
        tables = DictionaryInitializationService(config).tables_from_lines(chinese, pinyin, multi_pinyin)
        return cls(config, tables)

    def _ensure_initialized(self) -> DictionaryTables:
        """Ensure tables are built (lazy initialization)."""
        if self._tables is None:
            self._tables = self._data_service.initialize_tables()
        return self._tables

    # Public API methods
    def get_dictionary_info(self) -> DictionaryInfo:
        if self._tables is None:
            return DictionaryInfo(tables_built=False)
        return self._tables.info()

    # ---------- character classes ----------
    def is_han_character(self, char: str) -> bool:
        return self._ensure_initialized().script_map.is_han(char)

    def contains_han_character(self, text: str) -> bool:
        return self._ensure_initialized().script_map.contains_han(text)

    def is_traditional_character(self, char: str) -> bool:
        return self._ensure_initialized().script_map.is_traditional_only(char)

    # ---------- script conversion ----------
    def to_simplified_char(self, char: str) -> str:
        return self._ensure_initialized().script_map.to_simplified(char)

    def to_traditional_char(self, char: str) -> str:
        return self._ensure_initialized().script_map.to_traditional(char)

    def to_simplified(self, text: str) -> str:
        return self._ensure_initialized().script_map.to_simplified_string(text)

    def to_traditional(self, text: str) -> str:
        return self._ensure_initialized().script_map.to_traditional_string(text)

    # ---------- pinyin ----------
    def to_pinyin(
        self,
        text: str,
        separator: str = "",
        tone_format: ToneFormat = ToneFormat.WITHOUT_TONE,
    ) -> str:
        """
        Convert text to Pinyin, failing on Han characters without a reading.

        Raises UnconvertibleCharacterError for the first unmapped Han character;
        no partial output is returned.
        """

        def fail(char: str, position: int) -> str:
            raise UnconvertibleCharacterError(char, position)

        return self._convert(text, separator, tone_format, fail)

    def to_pinyin_lenient(
        self,
        text: str,
        separator: str = " ",
        default_pinyin: str = " ",
        tone_format: ToneFormat = ToneFormat.WITHOUT_TONE,
    ) -> str:
        """Convert text to Pinyin, using default_pinyin for Han characters without a reading."""

        def substitute(char: str, position: int) -> str:
            logger.warning(f"Can't convert to pinyin: {char!r} at position {position}, using {default_pinyin!r}")
            return default_pinyin

        return self._convert(text, separator, tone_format, substitute)

    def first_syllable(self, text: str) -> str:
        """Pinyin of the first character only (成都 → cheng)."""
        return self.to_pinyin_lenient(text, _TOKEN_SEPARATOR).split(_TOKEN_SEPARATOR)[0]

    def initials(self, text: str, unmapped_marker: str = "#") -> str:
        """First letter of every Pinyin token (成都 → cd)."""
        pinyin = self.to_pinyin_lenient(text, _TOKEN_SEPARATOR, unmapped_marker)
        return "".join(token[:1] for token in pinyin.split(_TOKEN_SEPARATOR))

    def pronunciations(self, char: str) -> list[str]:
        """All tone-marked readings of a character, primary reading first."""
        return self._ensure_initialized().glyph_table.candidate_pronunciations(char)

    def has_multiple_pronunciations(self, char: str) -> bool:
        return self._ensure_initialized().glyph_table.has_multiple_pronunciations(char)

    # ---------- dictionary extension ----------
    def add_chinese_dict(self, lines: Iterable[str]) -> None:
        """Merge Traditional=Simplified lines into the script mapping."""
        self._ensure_initialized().script_map.merge_dictionary(lines)

    def add_pinyin_dict(self, lines: Iterable[str]) -> None:
        """Merge character=reading lines into the character table."""
        self._ensure_initialized().glyph_table.merge_dictionary(lines)

    def add_multi_pinyin_dict(self, lines: Iterable[str]) -> None:
        """Merge phrase=reading lines into the phrase override table."""
        self._ensure_initialized().phrase_table.merge_dictionary(lines)

    def _convert(
        self,
        text: str,
        separator: str,
        tone_format: ToneFormat,
        on_missing: Callable[[str, int], str],
    ) -> str:
        tables = self._ensure_initialized()
        text = tables.script_map.to_simplified_string(text)

        units: list[str] = []
        i = 0
        while i < len(text):
            match = tables.phrase_table.longest_match(text, i, tone_format, separator)
            if match is not None:
                units.append(match.pinyin)
                i += len(match.word)
                continue

            char = text[i]
            if tables.script_map.is_han(char):
                candidates = tables.glyph_table.format_pronunciations(char, tone_format)
                units.append(candidates[0] if candidates else on_missing(char, i))
            else:
                units.append(char)
            i += 1

        return separator.join(units)
