"""
Single character → Pinyin table.

Values hold one or more tone-marked candidate readings joined by the
configured separator, the first candidate being the primary reading.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from sinoscript.services.formatting import ToneFormattingService
from sinoscript.services.loader import EntryValidator, ResourceLoader
from sinoscript.types import ToneFormat, TransliterationConfig

# Placeholder some dictionaries use for characters without a reading
_NO_READING = "null"


class GlyphTable:
    """Character → tone-marked Pinyin lookup with tone formatting."""

    def __init__(
        self,
        config: TransliterationConfig,
        entries: Mapping[str, str],
        formatter: ToneFormattingService | None = None,
        loader: ResourceLoader | None = None,
    ):
        self._config = config
        self._entries = dict(entries)
        self._formatter = formatter or ToneFormattingService(config)
        self._loader = loader or ResourceLoader()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, char: str) -> bool:
        return self._reading(char) is not None

    def candidate_pronunciations(self, char: str) -> list[str]:
        """Tone-marked candidates for char, empty when unmapped."""
        reading = self._reading(char)
        if reading is None:
            return []
        return reading.split(self._config.pinyin_separator)

    def format_pronunciations(self, char: str, tone_format: ToneFormat) -> list[str]:
        """Candidates for char in the requested format, empty when unmapped."""
        reading = self._reading(char)
        if reading is None:
            return []
        return self._formatter.format_pinyin(reading, tone_format)

    def format(self, pinyin: str, tone_format: ToneFormat) -> list[str]:
        return self._formatter.format_pinyin(pinyin, tone_format)

    def has_multiple_pronunciations(self, char: str) -> bool:
        return len(self.candidate_pronunciations(char)) > 1

    @classmethod
    def entry_validator(cls, config: TransliterationConfig) -> EntryValidator:
        return _single_character_key

    def merge_dictionary(self, lines: Iterable[str]) -> None:
        """Add or overwrite character=reading entries from raw resource lines."""
        self._entries.update(self._loader.parse(lines, validate=self.entry_validator(self._config)))

    def _reading(self, char: str) -> str | None:
        reading = self._entries.get(char)
        if not reading or reading == _NO_READING:
            return None
        return reading


def _single_character_key(key: str, value: str) -> str | None:
    if len(key) != 1:
        return "expected a single character key"
    return None
