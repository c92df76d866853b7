"""
Dictionary initialization service for Pinyin conversion.

This module loads the three key=value resources (Traditional→Simplified,
character→Pinyin, phrase→Pinyin) and builds the tables a transliterator
works on. Built-in resources are parsed once per process and shared
read-only; every set of tables gets its own mutable copy.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from types import MappingProxyType

from sinoscript.log import logger
from sinoscript.services import sources
from sinoscript.services.formatting import ToneFormattingService
from sinoscript.services.glyph_table import GlyphTable
from sinoscript.services.loader import EntryValidator, ResourceLoader
from sinoscript.services.phrase_table import PhraseOverrideTable
from sinoscript.services.script_map import ScriptMap
from sinoscript.types import DictionaryInfo, TransliterationConfig


@dataclass(frozen=True)
class DictionaryTables:
    """Container for the three dictionary tables of one transliterator."""

    script_map: ScriptMap
    glyph_table: GlyphTable
    phrase_table: PhraseOverrideTable

    def info(self) -> DictionaryInfo:
        return DictionaryInfo(
            tables_built=True,
            script_entries=len(self.script_map),
            glyph_entries=len(self.glyph_table),
            phrase_entries=len(self.phrase_table),
            max_phrase_length=self.phrase_table.max_phrase_length,
        )


def _parse_builtin(label: str, lines: Iterable[str]) -> Mapping[str, str]:
    entries = ResourceLoader().parse(lines)
    logger.debug(f"Built-in {label}: {len(entries)} entries")
    return MappingProxyType(entries)


# One parse per process for each distinct set of inputs the providers read
@cache
def _builtin_script_pairs(script_range: tuple[int, int]) -> Mapping[str, str]:
    return _parse_builtin("Traditional→Simplified pairs", sources.chinese_lines(script_range))


@cache
def _builtin_readings() -> Mapping[str, str]:
    return _parse_builtin("character readings", sources.pinyin_lines())


@cache
def _builtin_phrases(separator: str, min_phrase_length: int) -> Mapping[str, str]:
    return _parse_builtin("phrase readings", sources.multi_pinyin_lines(separator, min_phrase_length))


class DictionaryInitializationService:
    """Service to build the dictionary tables."""

    def __init__(self, config: TransliterationConfig, loader: ResourceLoader | None = None):
        self._config = config
        self._loader = loader or ResourceLoader()
        self._formatter = ToneFormattingService(config)

    def initialize_tables(self) -> DictionaryTables:
        """
        Build tables from resource files in config.resource_dir, falling back to built-in data.

        Resource files are checked with the same rules as merged lines, so a
        malformed file raises MalformedEntryError here.
        """
        config = self._config
        tables = self._build(
            self._load_resource(
                config.chinese_resource,
                ScriptMap.entry_validator(config),
                lambda: _builtin_script_pairs(config.script_range),
            ),
            self._load_resource(
                config.pinyin_resource,
                GlyphTable.entry_validator(config),
                _builtin_readings,
            ),
            self._load_resource(
                config.multi_pinyin_resource,
                PhraseOverrideTable.entry_validator(config),
                lambda: _builtin_phrases(config.pinyin_separator, config.min_phrase_length),
            ),
        )
        info = tables.info()
        logger.info(
            f"Dictionaries loaded: {info.script_entries} script pairs, "
            f"{info.glyph_entries} characters, {info.phrase_entries} phrases",
        )
        return tables

    def tables_from_lines(
        self,
        chinese: Iterable[str] = (),
        pinyin: Iterable[str] = (),
        multi_pinyin: Iterable[str] = (),
    ) -> DictionaryTables:
        """Build tables from raw key=value lines only, without any built-in data."""
        tables = self._build({}, {}, {})
        tables.script_map.merge_dictionary(chinese)
        tables.glyph_table.merge_dictionary(pinyin)
        tables.phrase_table.merge_dictionary(multi_pinyin)
        return tables

    def _build(
        self,
        chinese: Mapping[str, str],
        pinyin: Mapping[str, str],
        multi_pinyin: Mapping[str, str],
    ) -> DictionaryTables:
        return DictionaryTables(
            script_map=ScriptMap(self._config, chinese, self._loader),
            glyph_table=GlyphTable(self._config, pinyin, self._formatter, self._loader),
            phrase_table=PhraseOverrideTable(self._config, multi_pinyin, self._formatter, self._loader),
        )

    def _load_resource(
        self,
        name: str,
        validate: EntryValidator,
        builtin: Callable[[], Mapping[str, str]],
    ) -> Mapping[str, str]:
        if self._config.resource_dir is not None:
            path = Path(self._config.resource_dir) / name
            if path.exists():
                return self._loader.read(path, validate)
            logger.debug(f"{path} not found, using built-in {name}")
        return builtin()
