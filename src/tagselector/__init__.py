"""tagselector: pick tags from the heading tree of markdown documents."""

from tagselector.aggregation import aggregate_forests, load_tag_forest
from tagselector.exceptions import (
    ConfigurationMissingError,
    DocumentUnreadableError,
    EmptyResultError,
    NoActiveTargetError,
    TagNotFoundError,
    TagSelectorError,
)
from tagselector.headings import HeadingMatch, match_heading
from tagselector.insertion import Cursor, TextBuffer, insert_tag
from tagselector.schemas import AggregationResult, DocumentFailure, TagNode, TagSelectorSettings
from tagselector.selection import resolve_insertion, toggle_insert_mode
from tagselector.selector import collect_tags, insert_selected, select_tag
from tagselector.tree_builder import build_tag_forest

__all__ = [
    "AggregationResult",
    "ConfigurationMissingError",
    "Cursor",
    "DocumentFailure",
    "DocumentUnreadableError",
    "EmptyResultError",
    "HeadingMatch",
    "NoActiveTargetError",
    "TagNode",
    "TagNotFoundError",
    "TagSelectorError",
    "TagSelectorSettings",
    "TextBuffer",
    "aggregate_forests",
    "build_tag_forest",
    "collect_tags",
    "insert_selected",
    "insert_tag",
    "load_tag_forest",
    "match_heading",
    "resolve_insertion",
    "select_tag",
    "toggle_insert_mode",
]
