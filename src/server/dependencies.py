"""Shared FastAPI dependencies."""

from __future__ import annotations

from tagselector.schemas import TagSelectorSettings
from tagselector.settings import load_settings


def get_settings() -> TagSelectorSettings:
    """Load the settings for each request so edits apply without a restart."""
    return load_settings()
