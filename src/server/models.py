"""Pydantic models for the tag API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from tagselector.config import DEFAULT_INSERT_FULL_PATH
from tagselector.schemas import DocumentFailure, TagNode


class TagForestResponse(BaseModel):
    """Response model for the /api/tags endpoint.

    Attributes
    ----------
    nodes : list[TagNode]
        Root tags of every document, in document order.
    count : int
        Total number of tags in the forest.
    documents : int
        Number of documents read successfully.
    failures : list[DocumentFailure]
        Documents that could not be read.

    """

    nodes: list[TagNode] = Field(..., description="Root tags in document order")
    count: int = Field(..., ge=0, description="Total number of tags")
    documents: int = Field(..., ge=0, description="Documents read successfully")
    failures: list[DocumentFailure] = Field(default_factory=list, description="Unreadable documents")


class ResolveRequest(BaseModel):
    """Request model for the /api/resolve endpoint.

    Attributes
    ----------
    full_path : str
        Full path of the selected tag.
    insert_full_path : bool
        Insert the full path (default) or only the label.
    file : str | None
        Restrict the lookup to one document of the tag directory.

    """

    full_path: str = Field(..., description="Full path of the selected tag")
    insert_full_path: bool = Field(default=DEFAULT_INSERT_FULL_PATH, description="Insert full path or label")
    file: str | None = Field(default=None, description="Document to restrict the lookup to")

    @field_validator("full_path")
    @classmethod
    def validate_full_path(cls, v: str) -> str:
        """Validate that ``full_path`` is not empty."""
        if not v.strip():
            err = "full_path cannot be empty"
            raise ValueError(err)
        return v.strip()


class ResolveResponse(BaseModel):
    """Response model for the /api/resolve endpoint."""

    insertion: str = Field(..., description="Text to insert at the cursor")
    full_path: str = Field(..., description="Full path of the resolved tag")
    label: str = Field(..., description="Label of the resolved tag")
    mode: str = Field(..., description="Insert mode used")


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
