"""Inspect how a markdown list is nested before sorting it."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from mdlistsort.buffer import TextBuffer
from mdlistsort.detection import read_run
from mdlistsort.schemas import ListNode
from mdlistsort.tree import build_tree


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the list tree around a line of a markdown file.")
    parser.add_argument("--file", required=True, help="Markdown file path")
    parser.add_argument("--line", type=int, required=True, help="Line inside the list (0-based)")
    args = parser.parse_args()

    buffer = TextBuffer(load_text(args.file))
    run = read_run(buffer, args.line)
    if run is None:
        print(f"Line {args.line} is not part of a list")
        return

    tree = build_tree(run.records)
    print(f"Run: lines {run.first_index}-{run.last_index}")
    print("\nTree:")
    print_tree(tree)

    print("\nItems per depth:")
    for depth, count in sorted(collect_depths(tree).items()):
        print(f"{depth}: {count}")


def load_text(file_path: str) -> str:
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


def print_tree(nodes: list[ListNode], depth: int = 0) -> None:
    for node in nodes:
        label = "(placeholder)" if node.is_placeholder else node.content.strip()
        print(f"{'    ' * depth}{label}  [indent={node.indent_level}]")
        print_tree(node.children, depth + 1)


def collect_depths(nodes: list[ListNode], depth: int = 0, counts: Counter | None = None) -> Counter:
    counts = counts if counts is not None else Counter()
    for node in nodes:
        if not node.is_placeholder:
            counts[depth] += 1
        collect_depths(node.children, depth + 1, counts)
    return counts


if __name__ == "__main__":
    main()
