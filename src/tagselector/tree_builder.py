"""Build the tag forest of a markdown document from its heading lines."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from tagselector.config import MAX_TAG_NESTING, PATH_SEPARATOR
from tagselector.headings import match_heading
from tagselector.schemas import TagNode

logger = logging.getLogger(__name__)

# Markdown line endings only; form feeds and Unicode separators stay inside a line.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class _Frame:
    """An open heading whose deeper headings become its children."""

    depth: int
    children: list[TagNode]
    path: str


def build_tag_forest(document_text: str) -> list[TagNode]:
    """Parse ``document_text`` into an ordered forest of tag nodes.

    Headings nest under the closest preceding heading with fewer markers,
    so skipped levels attach directly to that ancestor and no intermediate
    nodes are created. Non-heading lines are ignored. Headings that would
    nest more than ``MAX_TAG_NESTING`` levels deep are skipped.

    Args:
        document_text: Raw markdown text.

    Returns:
        Root nodes of the document in source order. Empty when the text
        has no heading lines.
    """
    forest: list[TagNode] = []
    stack = [_Frame(depth=0, children=forest, path="")]

    for line in _LINE_BREAK_RE.split(document_text):
        heading = match_heading(line)
        if heading is None:
            continue

        # The sentinel has depth 0 and every heading has depth >= 1,
        # so the stack never empties.
        while stack[-1].depth >= heading.depth:
            stack.pop()

        if len(stack) > MAX_TAG_NESTING:
            logger.warning("Skipping heading %r nested deeper than %d levels", heading.label, MAX_TAG_NESTING)
            continue

        parent = stack[-1]
        full_path = join_tag_path(parent.path, heading.label)
        node = TagNode(
            label=heading.label,
            depth=heading.depth,
            relative_path=heading.label,
            full_path=full_path,
        )
        parent.children.append(node)
        stack.append(_Frame(depth=heading.depth, children=node.children, path=full_path))

    return forest


def join_tag_path(parent_path: str, label: str) -> str:
    """Append ``label`` to ``parent_path``, omitting the separator at the root."""
    if not parent_path:
        return label
    return f"{parent_path}{PATH_SEPARATOR}{label}"
