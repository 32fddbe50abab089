"""Apply an insertion string to a text buffer at its cursor."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from tagselector.exceptions import NoActiveTargetError
from tagselector.file_utils import read_text_async, write_text_async

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    """Zero-based line and character position."""

    line: int
    ch: int


@dataclass
class TextBuffer:
    """Editable text with a cursor and an optional selection.

    Attributes:
        text: Current buffer contents.
        cursor: Insertion point, or None when nothing is focused.
        selection_end: Other end of the selection, if any. The selected
            range is replaced on insert.
    """

    text: str = ""
    cursor: Cursor | None = None
    selection_end: Cursor | None = None

    def insert(self, value: str) -> Cursor:
        """Insert ``value`` at the cursor and move the cursor past it.

        Raises:
            NoActiveTargetError: If the buffer has no cursor.
        """
        if self.cursor is None:
            raise NoActiveTargetError("Buffer has no cursor")

        start = self._offset(self.cursor)
        end = start if self.selection_end is None else self._offset(self.selection_end)
        start, end = min(start, end), max(start, end)

        self.text = self.text[:start] + value + self.text[end:]
        self.cursor = self._position(start + len(value))
        self.selection_end = None
        return self.cursor

    def _offset(self, cursor: Cursor) -> int:
        lines = self.text.split("\n")
        line = min(max(cursor.line, 0), len(lines) - 1)
        ch = min(max(cursor.ch, 0), len(lines[line]))
        return sum(len(previous) + 1 for previous in lines[:line]) + ch

    def _position(self, offset: int) -> Cursor:
        before = self.text[:offset]
        line = before.count("\n")
        return Cursor(line=line, ch=offset - (before.rfind("\n") + 1))


def insert_tag(buffer: TextBuffer | None, value: str) -> bool:
    """Insert ``value`` into ``buffer``; silently skip when there is no target.

    Returns:
        True if the text was inserted.
    """
    if buffer is None:
        logger.debug("No active buffer, skipping insertion of %s", value)
        return False
    try:
        buffer.insert(value)
    except NoActiveTargetError:
        logger.debug("Buffer has no cursor, skipping insertion of %s", value)
        return False
    return True


async def read_buffer(path: Path, cursor: Cursor | None) -> TextBuffer:
    """Load a file into a buffer positioned at ``cursor``.

    A missing file yields an empty buffer so tags can seed new notes.
    """
    text = await read_text_async(path) if path.exists() else ""
    return TextBuffer(text=text, cursor=cursor)


async def write_buffer(path: Path, buffer: TextBuffer) -> None:
    """Persist the buffer contents to ``path``, creating parent directories."""
    await asyncio.to_thread(path.parent.mkdir, parents=True, exist_ok=True)
    await write_text_async(path, buffer.text)
