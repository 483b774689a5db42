"""Map sorted tree nodes to their new buffer lines."""

from __future__ import annotations

from typing import Sequence

from mdlistsort.schemas import ListNode


def assign_destinations(tree: Sequence[ListNode], start_index: int) -> int:
    """Number the nodes in pre-order starting at ``start_index``.

    Returns:
        The index following the last numbered node.
    """
    index = start_index
    for node in tree:
        node.destination_index = index
        index += 1
        if node.children:
            index = assign_destinations(node.children, index)
    return index


def find_cursor_destination(tree: Sequence[ListNode]) -> int | None:
    """Return the destination of the cursor line, or None if the tree has none."""
    for node in tree:
        if node.is_cursor_line:
            return node.destination_index
        if node.children:
            found = find_cursor_destination(node.children)
            if found is not None:
                return found
    return None
