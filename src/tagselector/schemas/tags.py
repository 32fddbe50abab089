"""Tag tree models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TagNode(BaseModel):
    """A hierarchical tag node derived from one heading line."""

    label: str
    depth: int = Field(..., ge=1)
    relative_path: str
    full_path: str
    children: list["TagNode"] = Field(default_factory=list)
