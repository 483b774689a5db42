"""Sort outcome model."""

from __future__ import annotations

from pydantic import BaseModel

from mdlistsort.schemas.editor import CursorPosition, ListRun, SortDirection


class SortOutcome(BaseModel):
    """What a single sort invocation did to the buffer."""

    run: ListRun
    direction: SortDirection
    cursor_before: CursorPosition
    cursor_after: CursorPosition
    text: str
    placeholder_removed: bool = False
