"""FastAPI application for the tag API."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from server.models import ErrorResponse
from server.routers import tags_router
from tagselector.exceptions import ConfigurationMissingError, EmptyResultError, TagNotFoundError
from tagselector.utils.logging_config import get_logger

logger = get_logger(__name__)

app = FastAPI(title="tagselector", description="Serve markdown tag trees to selection UIs.")
app.include_router(tags_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Report that the service is up."""
    return {"status": "ok"}


@app.exception_handler(ConfigurationMissingError)
async def configuration_missing_handler(request: Request, exc: ConfigurationMissingError) -> JSONResponse:
    logger.warning("Tag directory not configured", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=str(exc)).model_dump(),
    )


@app.exception_handler(EmptyResultError)
@app.exception_handler(TagNotFoundError)
async def not_found_handler(request: Request, exc: EmptyResultError | TagNotFoundError) -> JSONResponse:
    logger.info("Tag lookup failed", extra={"path": request.url.path, "error": str(exc)})
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorResponse(error=str(exc)).model_dump(),
    )
