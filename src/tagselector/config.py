"""Local configuration for tagselector."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_SETTINGS_FILE = ".tagselector.json"
DEFAULT_MARKDOWN_EXTENSIONS = ".md"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

# Heading marker character; its run length encodes the tag depth.
HEADING_MARKER = "#"
# Separator between labels in a tag's full path.
PATH_SEPARATOR = "/"
# Insert the full path unless the user toggles to label-only.
DEFAULT_INSERT_FULL_PATH = True
# Deepest parent/child nesting kept in a tag tree; serializers cannot recurse much further.
MAX_TAG_NESTING = 128

TAGSELECTOR_SETTINGS_PATH = Path(os.getenv("TAGSELECTOR_SETTINGS_PATH", DEFAULT_SETTINGS_FILE)).expanduser().resolve()
# Overrides the stored tag directory when set.
TAGSELECTOR_TAG_DIRECTORY = os.getenv("TAGSELECTOR_TAG_DIRECTORY", "")
TAGSELECTOR_MARKDOWN_EXTENSIONS = tuple(
    ext.strip().lower()
    for ext in os.getenv("TAGSELECTOR_MARKDOWN_EXTENSIONS", DEFAULT_MARKDOWN_EXTENSIONS).split(",")
    if ext.strip()
)
TAGSELECTOR_LOG_LEVEL = os.getenv("TAGSELECTOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
TAGSELECTOR_HOST = os.getenv("TAGSELECTOR_HOST", DEFAULT_HOST)
TAGSELECTOR_PORT = int(os.getenv("TAGSELECTOR_PORT", str(DEFAULT_PORT)))
