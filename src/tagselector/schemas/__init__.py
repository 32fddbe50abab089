"""Shared schemas for tagselector."""

from tagselector.schemas.aggregation import AggregationResult, DocumentFailure
from tagselector.schemas.settings import TagSelectorSettings
from tagselector.schemas.tags import TagNode

__all__ = ["AggregationResult", "DocumentFailure", "TagNode", "TagSelectorSettings"]
