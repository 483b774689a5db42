"""Test setup for mdlistsort."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running the subprocess CLI tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (spawn a Python subprocess)",
    )


@pytest.fixture
def make_buffer():
    """Build a TextBuffer from lines with the cursor at ``(line, column)``."""
    from mdlistsort.buffer import TextBuffer
    from mdlistsort.schemas import CursorPosition

    def _make(lines: list[str], line: int = 0, column: int = 0) -> TextBuffer:
        return TextBuffer.from_lines(lines, cursor=CursorPosition(line=line, column=column))

    return _make
