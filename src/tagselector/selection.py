"""Turn a selected tag into the text that gets inserted."""

from __future__ import annotations

from tagselector.config import HEADING_MARKER
from tagselector.schemas import TagNode


def resolve_insertion(node: TagNode, insert_full_path: bool) -> str:
    """Return ``#<full path>`` or ``#<label>`` for ``node``."""
    if insert_full_path:
        return HEADING_MARKER + node.full_path
    return HEADING_MARKER + node.label


def toggle_insert_mode(insert_full_path: bool) -> bool:
    """Flip between full-path and label-only insertion."""
    return not insert_full_path


def describe_insert_mode(insert_full_path: bool) -> str:
    """Human-readable name of the current insert mode."""
    return "full path" if insert_full_path else "label only"
