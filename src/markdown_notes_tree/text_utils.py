"""Line-ending and heading helpers shared by the merger and the tree builder."""

from __future__ import annotations

import re

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")
_TRAILING_NEWLINES_RE = re.compile(r"(?:\r\n|\r|\n)+\Z")
_TITLE_PREFIX = "# "


def split_lines(text: str) -> list[str]:
    """Split text on CRLF, CR or LF."""
    return _NEWLINE_RE.split(text)


def normalize_line_endings(text: str, line_ending: str) -> str:
    """Rewrite every newline sequence in text to line_ending."""
    return _NEWLINE_RE.sub(lambda _match: line_ending, text)


def ensure_single_trailing_line_ending(text: str, line_ending: str) -> str:
    """Return text ending with exactly one line_ending."""
    return _TRAILING_NEWLINES_RE.sub("", text) + line_ending


def extract_title(markdown_text: str) -> str | None:
    """Get the level-1 heading on the first line of a markdown document.

    Only the first line is inspected. Whitespace around the heading text is
    stripped. Returns None if the line is not a ``# `` heading.
    """
    first_line = split_lines(markdown_text)[0]
    if not first_line.startswith(_TITLE_PREFIX):
        return None
    return first_line[len(_TITLE_PREFIX):].strip()
