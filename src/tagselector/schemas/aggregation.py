"""Aggregation output models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tagselector.schemas.tags import TagNode


class DocumentFailure(BaseModel):
    """A tag document that could not be read."""

    path: str
    error: str


class AggregationResult(BaseModel):
    """Tags collected from a set of documents.

    Attributes:
        nodes: Root nodes of every document, in document order.
        failures: Documents that could not be read.
        documents: Number of documents read successfully.
    """

    nodes: list[TagNode] = Field(default_factory=list)
    failures: list[DocumentFailure] = Field(default_factory=list)
    documents: int = 0
