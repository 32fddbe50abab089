"""Detect heading lines and extract tag depth and label."""

from __future__ import annotations

import re
from dataclasses import dataclass

from tagselector.config import HEADING_MARKER

# A marker run, at least one whitespace character, then the label token.
# The label stops at the next whitespace run, so "## Backend API" yields "Backend".
_HEADING_RE = re.compile(rf"^({re.escape(HEADING_MARKER)}+)\s+(\S+)")


@dataclass(frozen=True)
class HeadingMatch:
    """Depth and label of a heading line."""

    depth: int
    label: str


def match_heading(line: str) -> HeadingMatch | None:
    """Return the heading depth and label for ``line``, or None.

    A heading is a run of one or more ``#`` at the very start of the line,
    followed by whitespace and a non-empty label. The label is the first
    whitespace-delimited token after the markers; anything after it on the
    same line is ignored.

    Args:
        line: A single line of text, with or without its line terminator.

    Returns:
        A HeadingMatch, or None if the line is not a heading.
    """
    match = _HEADING_RE.match(line)
    if not match:
        return None
    return HeadingMatch(depth=len(match.group(1)), label=match.group(2))
