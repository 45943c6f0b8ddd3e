"""Local configuration for markdown-notes-tree."""

from __future__ import annotations

import logging
import os


DEFAULT_README_FILENAME = "README.md"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(value: str | None) -> str:
    """Return the upper-cased level name, or DEFAULT_LOG_LEVEL if it is unknown."""
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


# Name of the main README and of every generated directory README.
MARKDOWN_NOTES_TREE_README_FILENAME = os.getenv(
    "MARKDOWN_NOTES_TREE_README_FILENAME", DEFAULT_README_FILENAME
)
MARKDOWN_NOTES_TREE_LOG_LEVEL = resolve_log_level(os.getenv("MARKDOWN_NOTES_TREE_LOG_LEVEL"))

# Always skipped while scanning, in addition to hidden entries.
ALWAYS_IGNORED_NAMES = frozenset({"node_modules"})
