"""Tag selection workflow: tag directory -> forest -> chosen tag -> buffer."""

from __future__ import annotations

import logging
from pathlib import Path

from tagselector.aggregation import load_tag_forest
from tagselector.config import DEFAULT_INSERT_FULL_PATH, HEADING_MARKER
from tagselector.discovery import discover_tag_files_async
from tagselector.exceptions import EmptyResultError, TagNotFoundError
from tagselector.insertion import TextBuffer, insert_tag
from tagselector.schemas import AggregationResult, TagNode, TagSelectorSettings
from tagselector.selection import resolve_insertion
from tagselector.settings import resolve_tag_directory
from tagselector.tags import find_tag, tag_at

logger = logging.getLogger(__name__)


async def list_tag_files(settings: TagSelectorSettings) -> list[Path]:
    """Return the markdown files under the configured tag directory.

    Raises:
        ConfigurationMissingError: If no tag directory is configured.
    """
    root = resolve_tag_directory(settings)
    return await discover_tag_files_async(root)


async def collect_tags(
    settings: TagSelectorSettings,
    *,
    file: str | None = None,
) -> AggregationResult:
    """Load the tag forest from every document in the tag directory.

    Args:
        settings: Settings naming the tag directory.
        file: Optional document, relative to the tag directory, to restrict
            the forest to.

    Returns:
        The aggregated forest and any per-document read failures.

    Raises:
        ConfigurationMissingError: If no tag directory is configured.
        EmptyResultError: If the documents contain no tags.
    """
    root = resolve_tag_directory(settings)
    paths = await discover_tag_files_async(root)
    if file is not None:
        paths = _restrict_to_file(root, paths, file)

    result = await load_tag_forest(paths)
    if not result.nodes:
        raise EmptyResultError(f"No tags found in {file or root}")
    return result


def select_tag(
    nodes: list[TagNode],
    *,
    full_path: str | None = None,
    index: int | None = None,
) -> TagNode:
    """Pick a node by full path or by its position in the tag listing.

    Raises:
        ValueError: Unless exactly one of ``full_path`` and ``index`` is given.
        TagNotFoundError: If no node matches.
    """
    if (full_path is None) == (index is None):
        raise ValueError("Provide exactly one of full_path or index")

    if full_path is not None:
        node = find_tag(nodes, full_path.removeprefix(HEADING_MARKER))
        target = full_path
    else:
        node = tag_at(nodes, index)
        target = f"index {index}"

    if node is None:
        raise TagNotFoundError(f"Tag not found: {target}")
    return node


def insert_selected(
    buffer: TextBuffer | None,
    node: TagNode,
    insert_full_path: bool = DEFAULT_INSERT_FULL_PATH,
) -> str | None:
    """Resolve ``node`` and insert it into ``buffer``.

    Returns:
        The inserted text, or None when there was no buffer to insert into.
    """
    value = resolve_insertion(node, insert_full_path)
    if not insert_tag(buffer, value):
        return None
    logger.debug("Inserted %s", value)
    return value


def _restrict_to_file(root: Path, paths: list[Path], file: str) -> list[Path]:
    wanted = Path(file)
    for path in paths:
        relative = path.relative_to(root)
        if relative == wanted or path == wanted:
            return [path]
    logger.warning("Tag file not found in tag directory: %s", file)
    return []
