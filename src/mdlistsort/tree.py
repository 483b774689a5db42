"""Build a nested list tree from a flat run of list lines."""

from __future__ import annotations

from typing import Sequence

from mdlistsort.config import PLACEHOLDER_CONTENT
from mdlistsort.schemas import LineRecord, ListNode


def indent_level(text: str) -> int:
    """Count leading spaces. Tabs are not indentation."""
    return len(text) - len(text.lstrip(" "))


def make_placeholder() -> ListNode:
    """Create the synthetic level-0 root used when a run starts inside a sub-list."""
    return ListNode(content=PLACEHOLDER_CONTENT, indent_level=0, is_placeholder=True)


def build_tree(records: Sequence[LineRecord], level: int = 0) -> list[ListNode]:
    """Nest a flat run of list lines by indentation.

    Lines are consumed left to right. A line indented deeper than the line
    before it starts that line's sub-list; a line indented less than the
    current group's threshold closes the group. When a top-level run starts
    indented, a placeholder root is prepended so the run still has a level-0
    parent.

    Args:
        records: The run's lines, in buffer order. Not modified.
        level: Indentation threshold of the group being built.

    Returns:
        The root nodes of the tree.
    """
    pending: list[LineRecord] = list(records)
    if pending and level == 0 and indent_level(pending[0].content) > 0:
        pending.insert(0, make_placeholder())
    nodes, _ = _build_group(pending, 0, level)
    return nodes


def has_placeholder(tree: Sequence[ListNode]) -> bool:
    return bool(tree) and tree[0].is_placeholder


def _build_group(
    records: list[LineRecord], position: int, threshold: int
) -> tuple[list[ListNode], int]:
    nodes: list[ListNode] = []
    while position < len(records):
        record = records[position]
        current_level = indent_level(record.content)
        if current_level < threshold:
            break
        position += 1

        children: list[ListNode] = []
        if position < len(records):
            next_level = indent_level(records[position].content)
            if next_level > current_level:
                children, position = _build_group(records, position, next_level)

        if isinstance(record, ListNode):
            nodes.append(record.model_copy(update={"children": children}))
        else:
            nodes.append(
                ListNode(
                    **record.model_dump(),
                    indent_level=current_level,
                    children=children,
                )
            )
    return nodes, position
