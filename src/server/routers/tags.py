"""Tag endpoints for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from server.dependencies import get_settings
from server.models import ErrorResponse, ResolveRequest, ResolveResponse, TagForestResponse
from tagselector.schemas import TagSelectorSettings
from tagselector.selection import describe_insert_mode, resolve_insertion
from tagselector.selector import collect_tags, select_tag
from tagselector.tags import count_tags
from tagselector.utils.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter()

COMMON_TAG_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Tag directory not configured"},
    404: {"model": ErrorResponse, "description": "No tags found or unknown tag"},
}


@router.get("/api/tags", response_model=TagForestResponse, responses=COMMON_TAG_RESPONSES)
async def api_tags(
    settings: Annotated[TagSelectorSettings, Depends(get_settings)],
    file: str | None = None,
) -> TagForestResponse:
    """Return the tag forest of the configured tag directory.

    **Query Parameters**
    - **file** (`str`, optional): only parse this document, relative to the tag directory

    **Returns**
    - **TagForestResponse**: root tags, total count, and unreadable documents
    """
    result = await collect_tags(settings, file=file)
    count = count_tags(result.nodes)
    logger.info("Tag forest served", extra={"documents": result.documents, "tags": count})
    return TagForestResponse(
        nodes=result.nodes,
        count=count,
        documents=result.documents,
        failures=result.failures,
    )


@router.post("/api/resolve", response_model=ResolveResponse, responses=COMMON_TAG_RESPONSES)
async def api_resolve(
    resolve_request: ResolveRequest,
    settings: Annotated[TagSelectorSettings, Depends(get_settings)],
) -> ResolveResponse:
    """Resolve a selected tag into the text to insert.

    **Parameters**

    - **resolve_request** (`ResolveRequest`): selected full path and insert mode

    **Returns**

    - **ResolveResponse**: ``#<full path>`` or ``#<label>`` for the selected tag
    """
    result = await collect_tags(settings, file=resolve_request.file)
    node = select_tag(result.nodes, full_path=resolve_request.full_path)
    return ResolveResponse(
        insertion=resolve_insertion(node, resolve_request.insert_full_path),
        full_path=node.full_path,
        label=node.label,
        mode=describe_insert_mode(resolve_request.insert_full_path),
    )
