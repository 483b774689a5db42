"""List line and tree node models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LineRecord(BaseModel):
    """A single buffer line taken from a list run.

    Attributes:
        content: The line text without its terminator.
        is_cursor_line: True if the cursor sits on this line.
        source_index: Line number in the buffer. ``None`` for the synthetic
            placeholder, which has no source line.
    """

    content: str
    is_cursor_line: bool = False
    source_index: int | None = Field(default=None, ge=0)


class ListNode(LineRecord):
    """A list item with the sub-list nested under it."""

    indent_level: int = Field(..., ge=0)
    children: list["ListNode"] = Field(default_factory=list)
    destination_index: int | None = None
    is_placeholder: bool = False
