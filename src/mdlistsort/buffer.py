"""Host buffer contract and an in-memory implementation of it."""

from __future__ import annotations

from typing import Protocol

from mdlistsort.config import MDLISTSORT_LINE_TERMINATOR
from mdlistsort.exceptions import LineOutOfRangeError
from mdlistsort.schemas import CursorPosition

_CRLF = "\r\n"


class EditorHost(Protocol):
    """Buffer and cursor operations the sorter needs from an editor.

    Positions are zero-based. ``replace_range`` treats ``to_pos`` as
    exclusive, and ``(last_line + 1, 0)`` as the end of ``last_line``
    including its terminator.
    """

    line_terminator: str

    def get_line(self, index: int) -> str: ...

    def line_count(self) -> int: ...

    def get_cursor_position(self) -> CursorPosition: ...

    def set_cursor_position(self, line: int, column: int) -> None: ...

    def replace_range(self, text: str, from_pos: CursorPosition, to_pos: CursorPosition) -> None: ...


def detect_line_terminator(text: str, default: str = MDLISTSORT_LINE_TERMINATOR) -> str:
    """Return ``\\r\\n`` if the text uses it, ``\\n`` if it has newlines, else ``default``."""
    if _CRLF in text:
        return _CRLF
    if "\n" in text:
        return "\n"
    return default


class TextBuffer:
    """An editor buffer held in memory.

    Lines are split the way a code editor splits them: a trailing newline
    yields a final empty line, and an empty text is a single empty line.
    """

    def __init__(
        self,
        text: str = "",
        *,
        cursor: CursorPosition | None = None,
        line_terminator: str | None = None,
    ) -> None:
        self.line_terminator = line_terminator or detect_line_terminator(text)
        self._lines = text.split(self.line_terminator)
        self._cursor = CursorPosition(line=0, column=0)
        if cursor is not None:
            self.set_cursor_position(cursor.line, cursor.column)

    @classmethod
    def from_lines(cls, lines: list[str], *, cursor: CursorPosition | None = None) -> TextBuffer:
        return cls(MDLISTSORT_LINE_TERMINATOR.join(lines), cursor=cursor, line_terminator=MDLISTSORT_LINE_TERMINATOR)

    @property
    def text(self) -> str:
        return self.line_terminator.join(self._lines)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        if not 0 <= index < len(self._lines):
            err = f"Line {index} is outside the buffer (0-{len(self._lines) - 1})"
            raise LineOutOfRangeError(err)
        return self._lines[index]

    def get_cursor_position(self) -> CursorPosition:
        return self._cursor

    def set_cursor_position(self, line: int, column: int) -> None:
        """Move the cursor, clamping it into the document."""
        line = min(max(line, 0), len(self._lines) - 1)
        column = min(max(column, 0), len(self._lines[line]))
        self._cursor = CursorPosition(line=line, column=column)

    def replace_range(self, text: str, from_pos: CursorPosition, to_pos: CursorPosition) -> None:
        """Replace the text between two positions; ``to_pos`` is exclusive."""
        start = self._offset(from_pos)
        end = self._offset(to_pos)
        if end < start:
            start, end = end, start
        current = self.text
        self._lines = (current[:start] + text + current[end:]).split(self.line_terminator)
        self.set_cursor_position(self._cursor.line, self._cursor.column)

    def _offset(self, pos: CursorPosition) -> int:
        # Positions past the end of the document clip to its end.
        if pos.line >= len(self._lines):
            return len(self.text)
        terminator_len = len(self.line_terminator)
        offset = sum(len(line) + terminator_len for line in self._lines[: pos.line])
        return offset + min(pos.column, len(self._lines[pos.line]))
