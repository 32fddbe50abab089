"""Test setup for tagselector."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tagselector.schemas import TagSelectorSettings  # noqa: E402


@pytest.fixture
def tag_directory(tmp_path: Path) -> Path:
    """A tag directory with two documents and one non-markdown file."""
    root = tmp_path / "tags"
    (root / "nested").mkdir(parents=True)
    (root / "projects.md").write_text(
        "# Project\n## Backend\n### API\n## Frontend\n",
        encoding="utf-8",
    )
    (root / "nested" / "topics.md").write_text(
        "Intro text\n\n# Reading\n## Books\n",
        encoding="utf-8",
    )
    (root / "notes.txt").write_text("# Ignored\n", encoding="utf-8")
    return root


@pytest.fixture
def settings(tag_directory: Path) -> TagSelectorSettings:
    """Settings pointing at the sample tag directory."""
    return TagSelectorSettings(tag_directory_path=str(tag_directory))
