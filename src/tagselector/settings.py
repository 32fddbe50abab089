"""Load, save and interpret the persisted tagselector settings."""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote

from pydantic import ValidationError

from tagselector.config import TAGSELECTOR_SETTINGS_PATH, TAGSELECTOR_TAG_DIRECTORY
from tagselector.exceptions import ConfigurationMissingError
from tagselector.schemas import TagSelectorSettings

logger = logging.getLogger(__name__)


def load_settings(path: Path = TAGSELECTOR_SETTINGS_PATH) -> TagSelectorSettings:
    """Read settings from ``path``, falling back to defaults.

    Stored values are laid over the defaults, so a file written by an older
    version that lacks newer keys still loads.
    """
    if not path.exists():
        return TagSelectorSettings()
    try:
        return TagSelectorSettings.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return TagSelectorSettings()


def save_settings(settings: TagSelectorSettings, path: Path = TAGSELECTOR_SETTINGS_PATH) -> None:
    """Write ``settings`` to ``path`` as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(settings.model_dump_json(indent=2) + "\n", encoding="utf-8")
    logger.info("Settings saved to %s", path)


def resolve_tag_directory(
    settings: TagSelectorSettings,
    *,
    override: str = TAGSELECTOR_TAG_DIRECTORY,
) -> Path:
    """Return the configured tag directory.

    ``override`` (the ``TAGSELECTOR_TAG_DIRECTORY`` environment variable by
    default) wins over the stored setting. Percent-encoded paths, as copied
    from a vault URL, are decoded.

    Raises:
        ConfigurationMissingError: If no tag directory is configured.
    """
    raw = (override or settings.tag_directory_path).strip()
    if not raw:
        raise ConfigurationMissingError(
            "Tag directory is not set. Configure it with "
            "'tagselector config --tag-directory DIR'."
        )
    return Path(unquote(raw)).expanduser()
