"""Tests for tree sorting."""

from __future__ import annotations

from mdlistsort.config import PLACEHOLDER_CONTENT, SUPPRESSED_PLACEHOLDER_CONTENT
from mdlistsort.schemas import LineRecord, ListNode, SortDirection
from mdlistsort.sorting import sort_tree, suppress_placeholder
from mdlistsort.tree import build_tree


def _tree(lines: list[str]) -> list[ListNode]:
    return build_tree([LineRecord(content=line, source_index=i) for i, line in enumerate(lines)])


def _contents(nodes: list[ListNode]) -> list[str]:
    return [node.content for node in nodes]


class TestSortTree:
    """Tests for sort_tree function."""

    def test_ascending(self) -> None:
        """Sorts a flat group in ascending order."""
        tree = _tree(["- banana", "- apple", "- cherry"])
        sort_tree(tree, SortDirection.ASCENDING)
        assert _contents(tree) == ["- apple", "- banana", "- cherry"]

    def test_descending(self) -> None:
        """Sorts a flat group in descending order."""
        tree = _tree(["- banana", "- apple", "- cherry"])
        sort_tree(tree, SortDirection.DESCENDING)
        assert _contents(tree) == ["- cherry", "- banana", "- apple"]

    def test_accepts_direction_strings(self) -> None:
        """Direction values are accepted as plain strings."""
        tree = _tree(["- b", "- a"])
        sort_tree(tree, "ascending")
        assert _contents(tree) == ["- a", "- b"]

    def test_case_insensitive(self) -> None:
        """Upper and lower case compare equal."""
        tree = _tree(["- b", "- A", "- c"])
        sort_tree(tree, SortDirection.ASCENDING)
        assert _contents(tree) == ["- A", "- b", "- c"]

    def test_stable_ascending(self) -> None:
        """Equal keys keep their original order."""
        tree = _tree(["- b", "- item", "- ITEM", "- a", "- Item"])
        sort_tree(tree, SortDirection.ASCENDING)
        assert _contents(tree) == ["- a", "- b", "- item", "- ITEM", "- Item"]

    def test_stable_descending(self) -> None:
        """Equal keys keep their original order when descending too."""
        tree = _tree(["- item", "- z", "- ITEM", "- a"])
        sort_tree(tree, SortDirection.DESCENDING)
        assert _contents(tree) == ["- z", "- item", "- ITEM", "- a"]

    def test_sorts_each_group_independently(self) -> None:
        """Children are sorted within their own parent only."""
        tree = _tree(["- b", "  - z", "  - y", "- a", "  - x", "  - w"])
        sort_tree(tree, SortDirection.ASCENDING)

        assert _contents(tree) == ["- a", "- b"]
        assert _contents(tree[0].children) == ["  - w", "  - x"]
        assert _contents(tree[1].children) == ["  - y", "  - z"]

    def test_placeholder_stays_first(self) -> None:
        """The placeholder leads its group whatever the other keys are."""
        for direction in SortDirection:
            tree = _tree(["  - x", "\t- tabbed", "- a"])
            sort_tree(tree, direction)
            assert tree[0].is_placeholder

    def test_indented_roots_stay_before_level_zero(self) -> None:
        """Behind a placeholder, deeper roots precede shallower ones in both directions."""
        for direction in SortDirection:
            tree = _tree(["    - deep", "  - z", "  - m", " - a", "- top", "- b"])
            sort_tree(tree, direction)

            assert [node.indent_level for node in tree] == [0, 2, 2, 1, 0, 0]
            assert tree[0].is_placeholder

    def test_indented_roots_sorted_within_level(self) -> None:
        tree = _tree(["    - deep", "  - z", "  - m", "- top", "- b"])
        sort_tree(tree, SortDirection.DESCENDING)
        assert _contents(tree[1:]) == ["  - z", "  - m", "- top", "- b"]

        sort_tree(tree, SortDirection.ASCENDING)
        assert _contents(tree[1:]) == ["  - m", "  - z", "- b", "- top"]


class TestSuppressPlaceholder:
    """Tests for suppress_placeholder function."""

    def test_marks_placeholder(self) -> None:
        """Switches the placeholder to the removal sentinel."""
        tree = _tree(["  - x", "- y"])
        assert tree[0].content == PLACEHOLDER_CONTENT

        assert suppress_placeholder(tree)
        assert tree[0].content == SUPPRESSED_PLACEHOLDER_CONTENT
        assert tree[0].is_placeholder

    def test_no_placeholder(self) -> None:
        """Leaves trees without a placeholder alone."""
        tree = _tree(["- x", "  - y"])
        assert not suppress_placeholder(tree)
        assert tree[0].content == "- x"

    def test_empty_tree(self) -> None:
        assert not suppress_placeholder([])
