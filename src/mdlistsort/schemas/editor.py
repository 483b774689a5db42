"""Editor-facing models: cursor positions and detected runs."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mdlistsort.schemas.nodes import LineRecord


class SortDirection(str, Enum):
    """Enumeration for sort directions."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class CursorPosition(BaseModel):
    """A (line, column) position in a buffer, both zero-based."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=0)
    column: int = Field(default=0, ge=0)


class ListRun(BaseModel):
    """The contiguous block of list lines enclosing the cursor.

    Attributes:
        first_index: First buffer line of the run (inclusive).
        last_index: Last buffer line of the run (inclusive).
        records: One record per line of the run, in buffer order.
    """

    first_index: int = Field(..., ge=0)
    last_index: int = Field(..., ge=0)
    records: list[LineRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_bounds(self) -> ListRun:
        """Validate that the run is not inverted."""
        if self.last_index < self.first_index:
            err = f"Run ends ({self.last_index}) before it starts ({self.first_index})"
            raise ValueError(err)
        return self
