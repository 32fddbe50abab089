"""Persisted settings model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TagSelectorSettings(BaseModel):
    """User settings stored between sessions.

    Attributes:
        tag_directory_path: Directory holding the markdown tag documents.
    """

    model_config = ConfigDict(extra="ignore")

    tag_directory_path: str = Field(default="", description="Directory holding tag documents")
