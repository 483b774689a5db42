"""Flatten a list tree back into text."""

from __future__ import annotations

from typing import Sequence

from mdlistsort.config import MDLISTSORT_LINE_TERMINATOR, PLACEHOLDER_SENTINELS
from mdlistsort.schemas import ListNode


def render(tree: Sequence[ListNode], line_terminator: str = MDLISTSORT_LINE_TERMINATOR) -> str:
    """Render nodes in pre-order, each subtree directly after its node."""
    return line_terminator.join(_render_lines(tree))


def strip_placeholder_line(text: str, line_terminator: str = MDLISTSORT_LINE_TERMINATOR) -> tuple[str, bool]:
    """Drop a leading placeholder line and its terminator.

    Returns:
        The remaining text and whether a line was dropped.
    """
    first, separator, rest = text.partition(line_terminator)
    if first not in PLACEHOLDER_SENTINELS:
        return text, False
    return (rest if separator else ""), True


def _render_lines(tree: Sequence[ListNode]) -> list[str]:
    lines: list[str] = []
    for node in tree:
        lines.append(node.content)
        lines.extend(_render_lines(node.children))
    return lines
