"""
Tone formatting service for Pinyin conversion.

This module turns tone-marked dictionary values ("hǎo,hào") into the
requested output format: unchanged tone marks, tone numbers ("hao3") or
plain letters ("hao").
"""
from __future__ import annotations

from sinoscript.types import ToneFormat, TransliterationConfig


class ToneFormattingService:
    """Service for converting tone-marked Pinyin into the requested tone format."""

    def __init__(self, config: TransliterationConfig):
        self._config = config
        # Marked vowel i → unmarked[i // 4], tone i % 4 + 1
        self._bases = {
            marked: config.unmarked_vowels[i // 4] for i, marked in enumerate(config.marked_vowels)
        }
        self._tones = {marked: str(i % 4 + 1) for i, marked in enumerate(config.marked_vowels)}
        self._strip_table = str.maketrans(
            {**self._bases, config.u_umlaut: config.u_umlaut_replacement},
        )

    def format_pinyin(self, pinyin: str, tone_format: ToneFormat) -> list[str]:
        """Format a separator-joined list of tone-marked candidates."""
        if tone_format is ToneFormat.WITH_TONE_MARK:
            return pinyin.split(self._config.pinyin_separator)
        if tone_format is ToneFormat.WITH_TONE_NUMBER:
            return self.with_tone_number(pinyin)
        if tone_format is ToneFormat.WITHOUT_TONE:
            return self.without_tone(pinyin)
        raise ValueError(f"unsupported tone format: {tone_format!r}")

    def without_tone(self, pinyin: str) -> list[str]:
        """Strip tone marks; candidates that collapse together are kept once, in order."""
        candidates = pinyin.translate(self._strip_table).split(self._config.pinyin_separator)
        return list(dict.fromkeys(candidates))

    def with_tone_number(self, pinyin: str) -> list[str]:
        return [self._syllable_with_tone_number(s) for s in pinyin.split(self._config.pinyin_separator)]

    def _syllable_with_tone_number(self, syllable: str) -> str:
        syllable = syllable.replace(self._config.u_umlaut, self._config.u_umlaut_replacement)
        for char in reversed(syllable):
            tone = self._tones.get(char)
            if tone is not None:
                return syllable.replace(char, self._bases[char]) + tone
        # No tone mark means neutral tone
        return syllable + self._config.neutral_tone
