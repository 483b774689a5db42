"""Run a sort request against an in-memory buffer."""

from __future__ import annotations

from mdlistsort.buffer import TextBuffer
from mdlistsort.exceptions import MdListSortError
from mdlistsort.schemas import SortDirection
from mdlistsort.sorter import sort_list
from mdlistsort.utils.logging_config import get_logger
from server.models import SortErrorResponse, SortResponse, SortSuccessResponse

logger = get_logger(__name__)


def process_sort(
    text: str,
    *,
    line: int,
    column: int = 0,
    direction: SortDirection = SortDirection.ASCENDING,
) -> SortResponse:
    """Sort the list around ``(line, column)`` in ``text``."""
    buffer = TextBuffer(text)
    if line >= buffer.line_count():
        logger.warning(
            "Cursor outside the document",
            extra={"line": line, "line_count": buffer.line_count()},
        )
        return SortErrorResponse(error=f"Line {line} is outside the document (0-{buffer.line_count() - 1})")
    buffer.set_cursor_position(line, column)

    try:
        outcome = sort_list(buffer, direction)
    except MdListSortError as exc:
        logger.error("Sort failed", extra={"line": line, "direction": direction.value, "error": str(exc)})
        return SortErrorResponse(error=str(exc))

    if outcome is None:
        logger.info("No list at cursor", extra={"line": line})
        return SortSuccessResponse(text=buffer.text, line=line, column=column, sorted=False)

    logger.info(
        "Sort completed",
        extra={
            "direction": direction.value,
            "first_line": outcome.run.first_index,
            "last_line": outcome.run.last_index,
        },
    )
    # The column is reported as requested, not as clamped by the buffer.
    return SortSuccessResponse(
        text=buffer.text,
        line=outcome.cursor_after.line,
        column=column,
        sorted=True,
        first_line=outcome.run.first_index,
        last_line=outcome.run.last_index,
    )
