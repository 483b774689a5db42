"""Sort the markdown list under the cursor of an editor host."""

from __future__ import annotations

import logging

from mdlistsort.buffer import EditorHost
from mdlistsort.detection import read_run
from mdlistsort.positions import assign_destinations, find_cursor_destination
from mdlistsort.rendering import render, strip_placeholder_line
from mdlistsort.schemas import CursorPosition, SortDirection, SortOutcome
from mdlistsort.sorting import sort_tree, suppress_placeholder
from mdlistsort.tree import build_tree

logger = logging.getLogger(__name__)


def sort_list(host: EditorHost, direction: SortDirection | str) -> SortOutcome | None:
    """Sort the list around the cursor and keep the cursor on its line.

    The whole run is rebuilt in memory first and written back with a single
    ``replace_range`` call. The cursor keeps its column and moves to the new
    line of the item it was on.

    Args:
        host: The focused buffer.
        direction: ``ascending`` or ``descending``.

    Returns:
        The outcome, or None when the cursor is not on a list line.
    """
    direction = SortDirection(direction)
    cursor = host.get_cursor_position()
    run = read_run(host, cursor.line)
    if run is None:
        logger.debug("No list under the cursor at line %d", cursor.line)
        return None

    tree = build_tree(run.records)

    # A descending sort drops the placeholder's own line from the output.
    tracked_line = cursor.line
    if direction is SortDirection.DESCENDING and suppress_placeholder(tree):
        tracked_line -= 1

    sort_tree(tree, direction)
    assign_destinations(tree, run.first_index)
    destination = find_cursor_destination(tree)

    text = render(tree, host.line_terminator)
    text, placeholder_removed = strip_placeholder_line(text, host.line_terminator)
    if placeholder_removed and destination is not None:
        destination -= 1

    new_line = destination if destination is not None else tracked_line
    _write_back(host, text, run.first_index, run.last_index)
    host.set_cursor_position(new_line, cursor.column)

    logger.debug(
        "Sorted lines %d-%d %s, cursor %d -> %d",
        run.first_index,
        run.last_index,
        direction.value,
        cursor.line,
        new_line,
    )
    return SortOutcome(
        run=run,
        direction=direction,
        cursor_before=cursor,
        cursor_after=CursorPosition(line=max(new_line, 0), column=cursor.column),
        text=text,
        placeholder_removed=placeholder_removed,
    )


def sort_ascending(host: EditorHost) -> SortOutcome | None:
    return sort_list(host, SortDirection.ASCENDING)


def sort_descending(host: EditorHost) -> SortOutcome | None:
    return sort_list(host, SortDirection.DESCENDING)


def _write_back(host: EditorHost, text: str, first_index: int, last_index: int) -> None:
    from_pos = CursorPosition(line=first_index, column=0)
    if last_index + 1 < host.line_count():
        host.replace_range(
            text + host.line_terminator,
            from_pos,
            CursorPosition(line=last_index + 1, column=0),
        )
        return
    # The run ends the document: stop at the end of its last line so a
    # buffer without a final newline does not gain one.
    last_line = host.get_line(last_index)
    host.replace_range(text, from_pos, CursorPosition(line=last_index, column=len(last_line)))
