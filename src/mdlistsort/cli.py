"""Command-line interface: sort the list around a line of a file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from mdlistsort.buffer import TextBuffer
from mdlistsort.commands import SORT_ASCENDING, SORT_DESCENDING, CommandRegistry, register_sort_commands
from mdlistsort.config import MDLISTSORT_LOG_LEVEL
from mdlistsort.exceptions import MdListSortError
from mdlistsort.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdlistsort",
        description="Sort the markdown list around a line, keeping sub-lists under their parents.",
    )
    parser.add_argument("file", help="Markdown file to read")
    parser.add_argument("-l", "--line", type=int, required=True, help="Cursor line (0-based)")
    parser.add_argument("-c", "--column", type=int, default=0, help="Cursor column (0-based)")
    parser.add_argument("-d", "--descending", action="store_true", help="Sort in descending order")
    destination = parser.add_mutually_exclusive_group()
    destination.add_argument("-o", "--output", default="-", help="Output file, '-' for stdout (default)")
    destination.add_argument("-i", "--in-place", action="store_true", help="Rewrite FILE in place")
    parser.add_argument("--log-level", default=MDLISTSORT_LOG_LEVEL, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    path = Path(args.file)
    if not path.is_file():
        logger.error("File not found: %s", path)
        return 1
    with path.open(encoding="utf-8", newline="") as handle:
        buffer = TextBuffer(handle.read())

    if not 0 <= args.line < buffer.line_count() or args.column < 0:
        logger.error("Cursor %d:%d is outside %s", args.line, args.column, path)
        return 1
    buffer.set_cursor_position(args.line, args.column)

    registry = CommandRegistry()
    dispose = register_sort_commands(registry, lambda: buffer)
    try:
        registry.dispatch(SORT_DESCENDING if args.descending else SORT_ASCENDING)
    except MdListSortError as exc:
        logger.error("Sort failed: %s", exc)
        return 1
    finally:
        dispose()

    target = path if args.in_place else args.output
    if target == "-":
        sys.stdout.write(buffer.text)
        sys.stdout.flush()
    else:
        with Path(target).open("w", encoding="utf-8", newline="") as handle:
            handle.write(buffer.text)

    cursor = buffer.get_cursor_position()
    print(f"{cursor.line}:{cursor.column}", file=sys.stderr)
    return 0
