"""Configuration for the HTTP host."""

from __future__ import annotations

import os

DEFAULT_MAX_TEXT_SIZE = 1_000_000
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

MAX_TEXT_SIZE = int(os.getenv("MDLISTSORT_MAX_TEXT_SIZE", str(DEFAULT_MAX_TEXT_SIZE)))
SERVER_HOST = os.getenv("HOST", DEFAULT_HOST)
SERVER_PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
SERVER_RELOAD = os.getenv("RELOAD", "false").lower() == "true"
