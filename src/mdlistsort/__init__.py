"""mdlistsort: sort nested markdown lists around the cursor."""

from mdlistsort.buffer import EditorHost, TextBuffer
from mdlistsort.commands import (
    SORT_ASCENDING,
    SORT_DESCENDING,
    CommandRegistry,
    register_sort_commands,
)
from mdlistsort.detection import is_list_line, locate_run, read_run
from mdlistsort.exceptions import (
    BufferAccessError,
    CommandError,
    LineOutOfRangeError,
    MdListSortError,
)
from mdlistsort.schemas import (
    CursorPosition,
    LineRecord,
    ListNode,
    ListRun,
    SortDirection,
    SortOutcome,
)
from mdlistsort.sorter import sort_ascending, sort_descending, sort_list

__all__ = [
    "SORT_ASCENDING",
    "SORT_DESCENDING",
    "BufferAccessError",
    "CommandError",
    "CommandRegistry",
    "CursorPosition",
    "EditorHost",
    "LineOutOfRangeError",
    "LineRecord",
    "ListNode",
    "ListRun",
    "MdListSortError",
    "SortDirection",
    "SortOutcome",
    "TextBuffer",
    "is_list_line",
    "locate_run",
    "read_run",
    "register_sort_commands",
    "sort_ascending",
    "sort_descending",
    "sort_list",
]
