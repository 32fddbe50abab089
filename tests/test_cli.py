"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tagselector import cli
from tagselector.schemas import TagSelectorSettings
from tagselector.settings import load_settings, save_settings


@pytest.fixture(autouse=True)
def _skip_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CLI from replacing the test session's log handlers."""
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


@pytest.fixture
def settings_path(tmp_path: Path, settings: TagSelectorSettings) -> Path:
    path = tmp_path / "settings.json"
    save_settings(settings, path)
    return path


def _run(settings_path: Path, *args: str) -> int:
    return cli.main(["--settings", str(settings_path), *args])


class TestConfigCommand:
    """Tests for the config subcommand."""

    def test_sets_tag_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "settings.json"

        assert _run(path, "config", "--tag-directory", "Tags") == 0

        assert load_settings(path).tag_directory_path == "Tags"
        assert "tag_directory_path: Tags" in capsys.readouterr().out

    def test_shows_unset_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(tmp_path / "none.json", "config") == 0

        assert "(not set)" in capsys.readouterr().out


class TestFilesCommand:
    """Tests for the files subcommand."""

    def test_lists_files(self, settings_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(settings_path, "files") == 0

        assert capsys.readouterr().out.splitlines() == ["nested/topics.md", "projects.md"]

    def test_empty_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "settings.json"
        save_settings(TagSelectorSettings(tag_directory_path=str(tmp_path / "empty")), path)

        assert _run(path, "files") == 1
        assert "No markdown files found" in capsys.readouterr().err


class TestTagsCommand:
    """Tests for the tags subcommand."""

    def test_prints_numbered_tree(self, settings_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(settings_path, "tags") == 0

        assert capsys.readouterr().out.splitlines() == [
            "[0] Reading",
            "    [1] Books",
            "[2] Project",
            "    [3] Backend",
            "        [4] API",
            "    [5] Frontend",
        ]

    def test_prints_json(self, settings_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(settings_path, "tags", "--json", "--file", "projects.md") == 0

        forest = json.loads(capsys.readouterr().out)
        assert [node["full_path"] for node in forest] == ["Project"]
        assert forest[0]["children"][0]["children"][0] == {
            "label": "API",
            "depth": 3,
            "relative_path": "API",
            "full_path": "Project/Backend/API",
            "children": [],
        }

    def test_missing_configuration_is_notice(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(tmp_path / "none.json", "tags") == 1

        assert "Notice: Tag directory is not set" in capsys.readouterr().err

    def test_no_tags_is_notice(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        tags = tmp_path / "tags"
        tags.mkdir()
        (tags / "plain.md").write_text("nothing here", encoding="utf-8")
        path = tmp_path / "settings.json"
        save_settings(TagSelectorSettings(tag_directory_path=str(tags)), path)

        assert _run(path, "tags") == 1
        assert "Notice: No tags found" in capsys.readouterr().err


class TestInsertCommand:
    """Tests for the insert subcommand."""

    def test_prints_full_path(self, settings_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(settings_path, "insert", "--path", "Project/Backend/API") == 0

        assert capsys.readouterr().out.strip() == "#Project/Backend/API"

    def test_prints_label(self, settings_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(settings_path, "insert", "--path", "Project/Backend/API", "--label-only") == 0

        assert capsys.readouterr().out.strip() == "#API"

    def test_selects_by_index(self, settings_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(settings_path, "insert", "--index", "1") == 0

        assert capsys.readouterr().out.strip() == "#Reading/Books"

    def test_inserts_into_file(self, settings_path: Path, tmp_path: Path) -> None:
        note = tmp_path / "note.md"
        note.write_text("Title\ntags: \n", encoding="utf-8")

        code = _run(
            settings_path,
            "insert", "--path", "Project/Frontend",
            "--into", str(note), "--line", "1", "--column", "6",
        )

        assert code == 0
        assert note.read_text(encoding="utf-8") == "Title\ntags: #Project/Frontend\n"

    def test_unknown_tag_is_notice(self, settings_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(settings_path, "insert", "--path", "Nope") == 1

        assert "Tag not found: Nope" in capsys.readouterr().err

    def test_requires_selector(self, settings_path: Path) -> None:
        with pytest.raises(SystemExit):
            _run(settings_path, "insert")
