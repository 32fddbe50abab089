"""Async wrappers that keep blocking filesystem calls off the event loop."""

from __future__ import annotations

import asyncio
from pathlib import Path


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read a tag document or note in a worker thread.

    Decoding is strict: ``UnicodeDecodeError`` and ``OSError`` reach the
    caller, which decides whether the failure is fatal.

    Args:
        path: File to read.
        encoding: Text encoding of the file.

    Returns:
        The decoded file contents.
    """
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Replace the contents of ``path`` with ``content`` in a worker thread."""
    await asyncio.to_thread(path.write_text, content, encoding=encoding)
