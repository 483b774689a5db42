"""Shared schemas for mdlistsort."""

from mdlistsort.schemas.editor import CursorPosition, ListRun, SortDirection
from mdlistsort.schemas.nodes import LineRecord, ListNode
from mdlistsort.schemas.outcome import SortOutcome

__all__ = [
    "CursorPosition",
    "LineRecord",
    "ListNode",
    "ListRun",
    "SortDirection",
    "SortOutcome",
]
