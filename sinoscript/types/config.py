"""
Configuration for Chinese text transliteration.

All static settings live in one immutable dataclass so that every table and
service built from it agrees on separators, alphabets and resource names.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path

# Han ideographs U+4E00-U+9FA5 plus the legacy numeral 〇 (U+3007)
_HAN_PATTERN = re.compile(r"[一-龥〇]")


@dataclass(frozen=True)
class TransliterationConfig:
    """Immutable configuration shared by the dictionary tables and the transliterator."""

    # Separator between candidate readings inside a dictionary value
    pinyin_separator: str

    # Tone alphabets: marked vowel i maps to unmarked[i // 4] with tone i % 4 + 1
    marked_vowels: str
    unmarked_vowels: str
    u_umlaut: str
    u_umlaut_replacement: str
    neutral_tone: str

    # Phrase overrides cover at least this many characters
    min_phrase_length: int

    # Precompiled regex patterns (immutable)
    han_pattern: re.Pattern[str]

    # Codepoints scanned when deriving the built-in Traditional→Simplified mapping
    script_range: tuple[int, int]

    # Resource file names, looked up in resource_dir when it is set
    chinese_resource: str
    pinyin_resource: str
    multi_pinyin_resource: str
    resource_dir: str | None = None

    @classmethod
    def create_default(cls) -> TransliterationConfig:
        """Factory method to create default configuration."""
        return cls(
            pinyin_separator=",",
            marked_vowels="āáǎàēéěèīíǐìōóǒòūúǔùǖǘǚǜ",
            unmarked_vowels="aeiouv",
            u_umlaut="ü",
            u_umlaut_replacement="v",
            neutral_tone="5",
            min_phrase_length=2,
            han_pattern=_HAN_PATTERN,
            script_range=(0x4E00, 0x9FFF),
            chinese_resource="chinese.txt",
            pinyin_resource="pinyin.txt",
            multi_pinyin_resource="multi_pinyin.txt",
        )

    def with_resource_dir(self, resource_dir: str | Path | None) -> TransliterationConfig:
        """Immutable update pointing resource lookups at a directory of key=value files."""
        return replace(self, resource_dir=None if resource_dir is None else str(resource_dir))
