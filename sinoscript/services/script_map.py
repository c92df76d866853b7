"""
Traditional/Simplified character mapping.

The mapping is keyed by Traditional character and valued by Simplified
character. A reverse index (Simplified → Traditional keys in insertion order)
is maintained alongside it so that Simplified→Traditional lookups stay O(1);
it costs one list entry per mapped pair. Chains such as A=B, B=C are
resolved as entries arrive, so every key maps straight to its final form.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from sinoscript.services.loader import EntryValidator, ResourceLoader
from sinoscript.types import TransliterationConfig


class ScriptMap:
    """Traditional↔Simplified conversion over a mergeable character table."""

    def __init__(self, config: TransliterationConfig, entries: Mapping[str, str], loader: ResourceLoader | None = None):
        self._config = config
        self._loader = loader or ResourceLoader()
        self._forward: dict[str, str] = {}
        self._reverse: dict[str, list[str]] = {}
        self._update(entries)

    def __len__(self) -> int:
        return len(self._forward)

    # ---------- character classes ----------
    def is_han(self, char: str) -> bool:
        """True for a single Han ideograph (U+4E00-U+9FA5) or 〇."""
        return len(char) == 1 and self._config.han_pattern.match(char) is not None

    def contains_han(self, text: str) -> bool:
        return self._config.han_pattern.search(text) is not None

    def is_traditional_only(self, char: str) -> bool:
        return char in self._forward

    # ---------- conversion ----------
    def to_simplified(self, char: str) -> str:
        return self._forward.get(char, char)

    def to_traditional(self, char: str) -> str:
        """Return the first Traditional key mapped to char, or char itself."""
        keys = self._reverse.get(char)
        return keys[0] if keys else char

    def to_simplified_string(self, text: str) -> str:
        return "".join(self._forward.get(c, c) for c in text)

    def to_traditional_string(self, text: str) -> str:
        return "".join(self.to_traditional(c) for c in text)

    # ---------- extension ----------
    @classmethod
    def entry_validator(cls, config: TransliterationConfig) -> EntryValidator:
        """Validator for Traditional=Simplified lines, shared by file loading and merging."""
        return _single_character_pair

    def merge_dictionary(self, lines: Iterable[str]) -> None:
        """Add or overwrite Traditional=Simplified pairs from raw resource lines."""
        self._update(self._loader.parse(lines, validate=self.entry_validator(self._config)))

    def _update(self, entries: Mapping[str, str]) -> None:
        # Values are never keys, so simplifying twice changes nothing
        for traditional, simplified in entries.items():
            if simplified != traditional:
                simplified = self._forward.get(simplified, simplified)
            if simplified == traditional:
                self._unlink(traditional)
                continue
            self._assign(traditional, simplified)
            for key in list(self._reverse.get(traditional, ())):
                self._assign(key, simplified)

    def _assign(self, traditional: str, simplified: str) -> None:
        if self._forward.get(traditional) == simplified:
            return
        self._unlink(traditional)
        self._forward[traditional] = simplified
        self._reverse.setdefault(simplified, []).append(traditional)

    def _unlink(self, traditional: str) -> None:
        previous = self._forward.pop(traditional, None)
        if previous is not None:
            keys = self._reverse[previous]
            keys.remove(traditional)
            if not keys:
                del self._reverse[previous]


def _single_character_pair(key: str, value: str) -> str | None:
    if len(key) != 1 or len(value) != 1:
        return "expected single characters"
    return None
