"""
Resource loading for the key=value dictionary format.

Every dictionary (Traditional→Simplified, character→Pinyin, phrase→Pinyin)
arrives as a sequence of text lines. Only the first '=' on a line is
significant and later keys overwrite earlier ones.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from sinoscript.log import logger
from sinoscript.types import MalformedEntryError

# Returns a rejection reason for an entry, or None to accept it
EntryValidator = Callable[[str, str], str | None]


class ResourceLoader:
    """Parses key=value lines into a mapping."""

    def __init__(self, delimiter: str = "="):
        self._delimiter = delimiter

    def parse(
        self,
        lines: Iterable[str],
        validate: EntryValidator | None = None,
    ) -> dict[str, str]:
        """
        Parse raw lines into a key → value mapping.

        Blank lines are skipped. A non-blank line without the delimiter, or
        with an empty key, raises MalformedEntryError and nothing is returned,
        so callers never see a partially parsed resource. `validate` may
        return a reason string to reject an otherwise well-formed entry.
        """
        entries: dict[str, str] = {}
        for line_number, raw in enumerate(lines, start=1):
            line = raw.strip()
            if not line:
                continue
            key, sep, value = line.partition(self._delimiter)
            if not sep:
                raise MalformedEntryError(line_number, raw)
            if not key:
                raise MalformedEntryError(line_number, raw, "empty key")
            if validate is not None:
                reason = validate(key, value)
                if reason:
                    raise MalformedEntryError(line_number, raw, reason)
            entries[key] = value
        return entries

    def read(
        self,
        path: str | Path,
        validate: EntryValidator | None = None,
    ) -> dict[str, str]:
        """Parse a UTF-8 resource file."""
        path = Path(path)
        logger.debug(f"Reading dictionary resource {path}")
        with path.open(encoding="utf-8") as f:
            return self.parse(f, validate)
