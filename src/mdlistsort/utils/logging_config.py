"""Logging setup shared by the CLI and the HTTP host."""

from __future__ import annotations

import logging

from mdlistsort.config import MDLISTSORT_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root logger once for an entry point.

    Args:
        level: Level name or number. Defaults to ``MDLISTSORT_LOG_LEVEL``.
    """
    resolved = level if level is not None else MDLISTSORT_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logging.basicConfig(level=resolved, format=_LOG_FORMAT, force=True)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
