"""Pydantic models for the sort API."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, field_validator

from mdlistsort.schemas import SortDirection
from server.server_config import MAX_TEXT_SIZE

_DIRECTION_ALIASES = {"asc": SortDirection.ASCENDING.value, "desc": SortDirection.DESCENDING.value}


class SortRequest(BaseModel):
    """Request model for the /api/sort endpoint.

    Attributes
    ----------
    text : str
        The whole buffer content.
    line : int
        Cursor line, zero-based.
    column : int
        Cursor column, zero-based. Returned unchanged.
    direction : SortDirection
        Sort direction; ``asc`` and ``desc`` are accepted as shorthands.

    """

    text: str = Field(..., max_length=MAX_TEXT_SIZE, description="Buffer content")
    line: int = Field(..., ge=0, description="Cursor line (0-based)")
    column: int = Field(default=0, ge=0, description="Cursor column (0-based)")
    direction: SortDirection = Field(default=SortDirection.ASCENDING, description="Sort direction")

    @field_validator("direction", mode="before")
    @classmethod
    def normalize_direction(cls, v: object) -> object:
        """Accept shorthands and any casing for ``direction``."""
        if isinstance(v, str):
            value = v.strip().lower()
            return _DIRECTION_ALIASES.get(value, value)
        return v


class SortSuccessResponse(BaseModel):
    """Success response model for the /api/sort endpoint.

    Attributes
    ----------
    text : str
        Buffer content after the sort.
    line : int
        New cursor line.
    column : int
        Cursor column.
    sorted : bool
        False when the cursor was not on a list line and nothing changed.
    first_line : int | None
        First line of the sorted run.
    last_line : int | None
        Last line of the sorted run, before the sort.

    """

    text: str = Field(..., description="Buffer content after sorting")
    line: int = Field(..., description="New cursor line")
    column: int = Field(..., description="Cursor column")
    sorted: bool = Field(..., description="Whether a list was sorted")
    first_line: int | None = Field(default=None, description="First line of the sorted run")
    last_line: int | None = Field(default=None, description="Last line of the sorted run")


class SortErrorResponse(BaseModel):
    """Error response model for the /api/sort endpoint."""

    error: str = Field(..., description="Error message")


# Union type for API responses
SortResponse = Union[SortSuccessResponse, SortErrorResponse]
