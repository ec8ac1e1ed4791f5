from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Location in the source: 0-based offset, 1-based line and column."""

    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class Cursor:
    """Read position over the full source text.

    Recognizers advance ``offset`` as they consume input and put it back
    when they decline, so the next alternative starts from the same place.
    """

    __slots__ = ("text", "offset", "_line_starts")

    def __init__(self, text: str, offset: int = 0):
        self.text = text
        self.offset = offset
        self._line_starts = [0] + [found.end() for found in re.finditer("\n", text)]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    @property
    def remainder(self) -> str:
        return self.text[self.offset :]

    def position(self, offset: int | None = None) -> Position:
        """Derive line and column from an absolute offset."""
        if offset is None:
            offset = self.offset
        line = bisect_right(self._line_starts, offset)
        column = offset - self._line_starts[line - 1] + 1
        return Position(offset=offset, line=line, column=column)

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.offset)

    def consume(self, prefix: str) -> bool:
        """Step over ``prefix`` if the input continues with it."""
        if not self.startswith(prefix):
            return False
        self.offset += len(prefix)
        return True

    def match(self, pattern: re.Pattern[str]) -> re.Match[str] | None:
        """Anchor ``pattern`` at the cursor and step over what it matched."""
        found = pattern.match(self.text, self.offset)
        if found is not None:
            self.offset = found.end()
        return found

    def take_line_until(self, terminator: str) -> str | None:
        """Take text up to ``terminator`` without crossing a newline.

        The terminator itself is left in place. Returns None when the
        terminator does not occur on the current line.
        """
        end = self.text.find(terminator, self.offset)
        newline = self.text.find("\n", self.offset)
        if end == -1 or (newline != -1 and newline < end):
            return None
        taken = self.text[self.offset : end]
        self.offset = end
        return taken


__all__ = ["Cursor", "Position"]
