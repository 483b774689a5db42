"""Detection of markdown bullet lines and of the run around the cursor."""

from __future__ import annotations

import re

from mdlistsort.buffer import EditorHost
from mdlistsort.schemas import LineRecord, ListRun

# Bullet markers only; ordered markers such as "1." never match.
_LIST_LINE_RE = re.compile(r"^\s*[-*+].*$")


def is_list_line(text: str) -> bool:
    """Return True if the line starts (after whitespace) with ``-``, ``*`` or ``+``."""
    return _LIST_LINE_RE.match(text) is not None


def locate_run(host: EditorHost, pivot_index: int) -> tuple[int, int] | None:
    """Find the contiguous block of list lines enclosing ``pivot_index``.

    Args:
        host: Buffer to scan.
        pivot_index: Line the scan starts from, usually the cursor line.

    Returns:
        Inclusive ``(first_index, last_index)``, or None when the pivot is
        outside the buffer or is not a list line.
    """
    line_count = host.line_count()
    if not 0 <= pivot_index < line_count:
        return None
    if not is_list_line(host.get_line(pivot_index)):
        return None

    first = pivot_index
    while first > 0 and is_list_line(host.get_line(first - 1)):
        first -= 1

    last = pivot_index
    while last < line_count - 1 and is_list_line(host.get_line(last + 1)):
        last += 1

    return first, last


def read_run(host: EditorHost, pivot_index: int) -> ListRun | None:
    """Locate the run around ``pivot_index`` and read its lines into records."""
    bounds = locate_run(host, pivot_index)
    if bounds is None:
        return None
    first, last = bounds
    records = [
        LineRecord(
            content=host.get_line(index),
            is_cursor_line=index == pivot_index,
            source_index=index,
        )
        for index in range(first, last + 1)
    ]
    return ListRun(first_index=first, last_index=last, records=records)
