"""
Built-in dictionary resources.

The three resources are rendered as key=value lines from the data shipped
with pypinyin (character and phrase readings) and OpenCC (Traditional→
Simplified conversion), so they go through the same loader as custom
resource files.
"""
from __future__ import annotations

from collections.abc import Iterator

import opencc
from pypinyin.phrases_dict import phrases_dict
from pypinyin.pinyin_dict import pinyin_dict


def pinyin_lines() -> Iterator[str]:
    """character=reading,reading lines, primary reading first."""
    for codepoint, readings in pinyin_dict.items():
        yield f"{chr(codepoint)}={readings}"


def multi_pinyin_lines(separator: str, min_phrase_length: int) -> Iterator[str]:
    """phrase=syllable,syllable lines with the first reading of every character."""
    for phrase, readings in phrases_dict.items():
        # One reading per character, anything else cannot be aligned
        if len(phrase) < min_phrase_length or len(readings) != len(phrase):
            continue
        if not all(readings):
            continue
        yield f"{phrase}={separator.join(candidates[0] for candidates in readings)}"


def chinese_lines(script_range: tuple[int, int]) -> Iterator[str]:
    """traditional=simplified lines for every character OpenCC simplifies."""
    converter = opencc.OpenCC("t2s")
    first, last = script_range
    characters = [chr(codepoint) for codepoint in range(first, last + 1)]

    # One character per line keeps phrase rules from spanning characters
    converted = converter.convert("\n".join(characters)).split("\n")
    if len(converted) != len(characters):
        converted = [converter.convert(c) for c in characters]

    for traditional, simplified in zip(characters, converted):
        if len(simplified) == 1 and simplified != traditional:
            yield f"{traditional}={simplified}"
