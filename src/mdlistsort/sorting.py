"""Recursive, direction-aware sorting of list trees."""

from __future__ import annotations

from mdlistsort.config import SUPPRESSED_PLACEHOLDER_CONTENT
from mdlistsort.schemas import ListNode, SortDirection
from mdlistsort.tree import has_placeholder


def sort_key(node: ListNode) -> str:
    """Case-insensitive sort key of a node."""
    return node.content.lower()


def sort_tree(tree: list[ListNode], direction: SortDirection | str) -> None:
    """Sort every sibling group of ``tree`` in place.

    Each group is ordered on its own; groups at different levels are never
    compared with each other. Equal keys keep their relative order in both
    directions. A synthetic placeholder always stays first in its group.

    Only a root group behind a placeholder mixes indentation levels; there
    deeper items stay ahead of shallower ones so the rewritten text nests
    the same way.
    """
    descending = SortDirection(direction) is SortDirection.DESCENDING
    tree.sort(key=sort_key, reverse=descending)
    tree.sort(key=lambda node: (not node.is_placeholder, -node.indent_level))
    for node in tree:
        if node.children:
            sort_tree(node.children, direction)


def suppress_placeholder(tree: list[ListNode]) -> bool:
    """Flag a leading placeholder for removal from the rendered output.

    Returns:
        True if the tree started with a placeholder.
    """
    if not has_placeholder(tree):
        return False
    tree[0].content = SUPPRESSED_PLACEHOLDER_CONTENT
    return True
