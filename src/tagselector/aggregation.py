"""Combine the tag forests of several documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Awaitable, Callable, Iterable

from tagselector.exceptions import DocumentUnreadableError
from tagselector.file_utils import read_text_async
from tagselector.schemas import AggregationResult, DocumentFailure, TagNode
from tagselector.tree_builder import build_tag_forest

logger = logging.getLogger(__name__)

DocumentReader = Callable[[Path], Awaitable[str]]


def aggregate_forests(documents: Iterable[tuple[str, str]]) -> list[TagNode]:
    """Build every document and concatenate their root nodes.

    Roots are never merged: two documents that both start with ``# Project``
    contribute two separate ``Project`` roots.

    Args:
        documents: ``(identifier, text)`` pairs in the order to aggregate.

    Returns:
        All root nodes, grouped by document in the supplied order.
    """
    nodes: list[TagNode] = []
    for _identifier, text in documents:
        nodes.extend(build_tag_forest(text))
    return nodes


async def read_document(path: Path, reader: DocumentReader = read_text_async) -> str:
    """Return the text of ``path``.

    Raises:
        DocumentUnreadableError: If the file cannot be read or decoded.
    """
    try:
        return await reader(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentUnreadableError(str(path), str(exc)) from exc


async def load_tag_forest(
    paths: Iterable[Path],
    *,
    reader: DocumentReader = read_text_async,
) -> AggregationResult:
    """Read each document in turn and aggregate the resulting forests.

    Documents are read one after another so the output order always matches
    ``paths``. A document that cannot be read contributes no tags and is
    recorded in ``failures``; the remaining documents are still processed.

    Args:
        paths: Documents to read.
        reader: Coroutine returning a document's text.

    Returns:
        The aggregated nodes together with any per-document failures.
    """
    documents: list[tuple[str, str]] = []
    failures: list[DocumentFailure] = []

    for path in paths:
        try:
            text = await read_document(path, reader)
        except DocumentUnreadableError as error:
            logger.warning("%s", error)
            failures.append(DocumentFailure(path=error.path, error=error.reason))
            continue
        documents.append((str(path), text))

    nodes = aggregate_forests(documents)
    logger.debug("Loaded %d root tags from %d documents", len(nodes), len(documents))
    return AggregationResult(nodes=nodes, failures=failures, documents=len(documents))
