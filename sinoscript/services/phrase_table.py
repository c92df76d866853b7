"""
Phrase → Pinyin override table.

Holds readings for multi-character sequences whose pronunciation in context
differs from character-by-character lookup (polyphones such as 重庆 or
银行). Matches are found greedily, longest phrase first.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from sinoscript.services.formatting import ToneFormattingService
from sinoscript.services.loader import EntryValidator, ResourceLoader
from sinoscript.types import PhraseMatch, ToneFormat, TransliterationConfig


class PhraseOverrideTable:
    """Greedy longest-match lookup over phrase readings."""

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
        self._max_phrase_length: int | None = None  # computed on first scan

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def max_phrase_length(self) -> int:
        if self._max_phrase_length is None:
            self._max_phrase_length = max(map(len, self._entries), default=0)
        return self._max_phrase_length

    def longest_match(
        self,
        text: str,
        start: int = 0,
        tone_format: ToneFormat = ToneFormat.WITHOUT_TONE,
        separator: str = ",",
    ) -> PhraseMatch | None:
        """
        Find the longest phrase starting at `start`.

        Lengths are tried from min(remaining text, longest phrase) down to the
        minimum phrase length, so the first hit is the longest one. Each
        syllable of the matched reading is formatted and only its first
        candidate kept; syllables are joined with `separator`.
        """
        min_length = self._config.min_phrase_length
        remaining = len(text) - start
        if remaining < min_length:
            return None

        for length in range(min(remaining, self.max_phrase_length), min_length - 1, -1):
            word = text[start : start + length]
            reading = self._entries.get(word)
            if reading:
                syllables = [
                    self._formatter.format_pinyin(token, tone_format)[0]
                    for token in reading.split(self._config.pinyin_separator)
                ]
                return PhraseMatch(word=word, pinyin=separator.join(syllables))
        return None

    def merge_dictionary(self, lines: Iterable[str]) -> None:
        """Add or overwrite phrase=reading entries from raw resource lines."""
        entries = self._loader.parse(lines, validate=self.entry_validator(self._config))
        self._entries.update(entries)
        if self._max_phrase_length is not None:
            self._max_phrase_length = max(self._max_phrase_length, max(map(len, entries), default=0))

    @classmethod
    def entry_validator(cls, config: TransliterationConfig) -> EntryValidator:
        """Phrases need min_phrase_length characters and one syllable per character."""

        def validate(key: str, value: str) -> str | None:
            if len(key) < config.min_phrase_length:
                return f"phrase must have at least {config.min_phrase_length} characters"
            if len(value.split(config.pinyin_separator)) != len(key):
                return "expected one syllable per character"
            return None

        return validate
