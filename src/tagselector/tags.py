"""Traverse, search and render tag forests."""

from __future__ import annotations

from typing import Iterable, Iterator

from tagselector.schemas import TagNode


def iter_tags(nodes: Iterable[TagNode]) -> Iterator[TagNode]:
    """Yield every node in depth-first pre-order (the order of the source headings)."""
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def count_tags(nodes: Iterable[TagNode]) -> int:
    """Count total tags in the forest."""
    return sum(1 for _ in iter_tags(nodes))


def find_tag(nodes: Iterable[TagNode], full_path: str) -> TagNode | None:
    """Return the first node whose full path equals ``full_path``.

    Labels may repeat across documents, in which case the node from the
    earliest document wins.
    """
    for node in iter_tags(nodes):
        if node.full_path == full_path:
            return node
    return None


def tag_at(nodes: Iterable[TagNode], index: int) -> TagNode | None:
    """Return the node at ``index`` in :func:`iter_tags` order, or None."""
    if index < 0:
        return None
    for position, node in enumerate(iter_tags(nodes)):
        if position == index:
            return node
    return None


def render_tag_tree(nodes: list[TagNode], *, numbered: bool = False) -> str:
    """Render the forest as an indented listing, one tag per line.

    With ``numbered`` each line is prefixed by the tag's index, usable with
    :func:`tag_at`.
    """
    lines: list[str] = []
    counter = 0

    def _render(level_nodes: list[TagNode], indent: int) -> None:
        nonlocal counter
        for node in level_nodes:
            prefix = f"[{counter}] " if numbered else ""
            lines.append(" " * (indent * 4) + prefix + node.label)
            counter += 1
            _render(node.children, indent + 1)

    _render(nodes, 0)
    return "\n".join(lines)
