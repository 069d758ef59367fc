"""Line source wrapper with a line counter and a single pushback slot."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional, Union

from miniyaml.errors import InternalParserError

LineSource = Union[str, Iterable[str]]

EMPTY_LINE = re.compile(r"^\s*(?:#.*)?$", re.ASCII)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_LINE_END = re.compile(r"(?:\r\n|\r|\n)$")


def is_blank(line: str) -> bool:
    """True for whitespace-only and comment lines."""
    return EMPTY_LINE.match(line) is not None


def iter_lines(source: LineSource) -> Iterator[str]:
    """Yield lines without their terminators from text or an iterable of lines."""
    if isinstance(source, str):
        lines = _LINE_BREAK.split(source)
        # "a\nb\n" ends with a break, not with an empty line.
        if lines and lines[-1] == "":
            lines.pop()
        yield from lines
        return
    for line in source:
        yield _LINE_END.sub("", line)


class LineInput:
    """Reads a document line by line.

    ``read_line`` returns "clean" lines (blank and comment lines skipped) and
    ``read_literal_line`` returns raw lines. At most one line can be pushed
    back with ``unread_line``; pushing back a second one is a parser bug.
    """

    def __init__(self, source: LineSource) -> None:
        self._lines: Iterator[str] = iter_lines(source)
        self._unread: Optional[str] = None
        self.line_count: int = 0

    def _next_raw(self) -> Optional[str]:
        line = next(self._lines, None)
        if line is not None:
            self.line_count += 1
        return line

    def read_line(self) -> Optional[str]:
        """Return the next clean line, or ``None`` at end of input."""
        line = self._unread
        if line is not None:
            self._unread = None
            if not is_blank(line):
                return line
        while True:
            line = self._next_raw()
            if line is None or not is_blank(line):
                return line

    def read_literal_line(self) -> Optional[str]:
        """Return the next raw line, including blank and comment lines."""
        line = self._unread
        if line is not None:
            self._unread = None
            return line
        return self._next_raw()

    def unread_line(self, line: Optional[str]) -> None:
        if line is None:
            return
        if self._unread is not None:
            raise InternalParserError("Internal Error: can only unread 1 line", line=self.line_count)
        self._unread = line

    def peek_line(self) -> Optional[str]:
        """Return the next clean line without consuming it."""
        line = self.read_line()
        self.unread_line(line)
        return line


__all__ = ["LineInput", "LineSource", "EMPTY_LINE", "is_blank", "iter_lines"]
