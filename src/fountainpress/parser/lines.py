"""Peekable line cursor used by the title page extractor and classifier."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

_NEWLINE_PATTERN = re.compile(r"\r\n|\r")


def split_lines(content: str) -> list[str]:
    """Split screenplay text on ``\\n``, ``\\r\\n`` or a lone ``\\r``."""
    return _NEWLINE_PATTERN.sub("\n", content).split("\n")


@dataclass(frozen=True)
class Line:
    """One source line with its position."""

    index: int
    raw: str

    @property
    def text(self) -> str:
        """The line with surrounding whitespace removed."""
        return self.raw.strip()

    @property
    def is_blank(self) -> bool:
        return not self.text

    @property
    def is_indented(self) -> bool:
        return self.raw[:1].isspace()


class LineCursor:
    """Forward-only cursor over lines with one-line lookahead."""

    def __init__(self, lines: Sequence[str], start: int = 0) -> None:
        """Initialize the cursor.

        Args:
            lines: Source lines without line terminators
            start: Index of the first line to yield
        """
        self._lines = lines
        self._position = start

    @property
    def position(self) -> int:
        """Index of the next line to be returned."""
        return self._position

    def at_end(self) -> bool:
        return self._position >= len(self._lines)

    def peek(self, offset: int = 0) -> Line | None:
        """Return the line ``offset`` lines ahead without consuming it."""
        index = self._position + offset
        if 0 <= index < len(self._lines):
            return Line(index=index, raw=self._lines[index])
        return None

    def advance(self) -> Line:
        """Consume and return the next line.

        Raises:
            StopIteration: If the cursor is exhausted
        """
        line = self.peek()
        if line is None:
            raise StopIteration
        self._position += 1
        return line

    def __iter__(self) -> Iterator[Line]:
        return self

    def __next__(self) -> Line:
        return self.advance()
