"""Local configuration for mdlistsort."""

from __future__ import annotations

import os

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LINE_TERMINATOR = "\n"

# Content of the synthetic root inserted when a run starts inside a sub-list.
PLACEHOLDER_CONTENT = "'"
# Content the placeholder takes once it is flagged for removal (descending sorts).
SUPPRESSED_PLACEHOLDER_CONTENT = "_"
PLACEHOLDER_SENTINELS = frozenset({PLACEHOLDER_CONTENT, SUPPRESSED_PLACEHOLDER_CONTENT})

MDLISTSORT_LOG_LEVEL = os.getenv("MDLISTSORT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MDLISTSORT_LINE_TERMINATOR = (
    os.getenv("MDLISTSORT_LINE_TERMINATOR", DEFAULT_LINE_TERMINATOR)
    .encode("utf-8")
    .decode("unicode_escape")
)
