"""Tests for file utilities module."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagselector.file_utils import read_text_async, write_text_async


class TestReadTextAsync:
    """Tests for read_text_async function."""

    @pytest.mark.asyncio
    async def test_reads_text_content(self, tmp_path: Path) -> None:
        """Reads text content from file."""
        path = tmp_path / "tags.md"
        path.write_text("# Tag", encoding="utf-8")

        result = await read_text_async(path)

        assert result == "# Tag"

    @pytest.mark.asyncio
    async def test_respects_encoding(self, tmp_path: Path) -> None:
        """Respects specified encoding."""
        path = tmp_path / "tags.md"
        path.write_text("# Café", encoding="latin-1")

        result = await read_text_async(path, encoding="latin-1")

        assert result == "# Café"

    @pytest.mark.asyncio
    async def test_raises_for_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await read_text_async(tmp_path / "missing.md")


class TestWriteTextAsync:
    """Tests for write_text_async function."""

    @pytest.mark.asyncio
    async def test_writes_text_content(self, tmp_path: Path) -> None:
        """Writes text content to file."""
        path = tmp_path / "note.md"

        await write_text_async(path, "#Project")

        assert path.read_text(encoding="utf-8") == "#Project"
