"""Find the markdown tag documents under a directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable

from tagselector.config import TAGSELECTOR_MARKDOWN_EXTENSIONS

logger = logging.getLogger(__name__)


def discover_tag_files(
    root: Path,
    *,
    extensions: Iterable[str] = TAGSELECTOR_MARKDOWN_EXTENSIONS,
) -> list[Path]:
    """Recursively list markdown files under ``root``.

    Args:
        root: Directory to scan.
        extensions: File suffixes to accept, compared case-insensitively.

    Returns:
        Matching files sorted by their path relative to ``root``. Empty when
        ``root`` is not a directory.
    """
    if not root.is_dir():
        logger.error("Tag directory is not a directory: %s", root)
        return []

    suffixes = {ext.lower() for ext in extensions}
    files = [
        path for path in root.rglob("*") if path.is_file() and path.suffix.lower() in suffixes
    ]
    return sorted(files, key=lambda path: path.relative_to(root).as_posix())


async def discover_tag_files_async(
    root: Path,
    *,
    extensions: Iterable[str] = TAGSELECTOR_MARKDOWN_EXTENSIONS,
) -> list[Path]:
    """Run :func:`discover_tag_files` in a worker thread."""
    return await asyncio.to_thread(discover_tag_files, root, extensions=tuple(extensions))
