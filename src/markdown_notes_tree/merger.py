"""Merge a rendered tree into existing README contents."""

from __future__ import annotations

from markdown_notes_tree.exceptions import DescriptionMarkerError, TreeMarkerOrderError
from markdown_notes_tree.text_utils import (
    ensure_single_trailing_line_ending,
    normalize_line_endings,
)

TREE_START_MARKER = "<!-- auto-generated notes tree starts here -->"
TREE_END_MARKER = "<!-- auto-generated notes tree ends here -->"
DESCRIPTION_START_MARKER = "<!-- optional markdown-notes-tree directory description starts here -->"
DESCRIPTION_END_MARKER = "<!-- optional markdown-notes-tree directory description ends here -->"
ENTIRE_FILE_GENERATED_MARKER = "<!-- this entire file is auto-generated -->"

_NEWLINE_CHARS = "\r\n"


def find_marker(contents: str, marker: str) -> int | None:
    """Return the index of the first occurrence of marker, or None if absent."""
    index = contents.find(marker)
    return None if index == -1 else index


def merge_main(current_contents: str, markdown_fragment: str, line_ending: str) -> str:
    """Put the tree fragment into the main README contents.

    Text before the tree start marker and after the tree end marker is kept.
    Contents without markers get the tree region appended. Contents with only
    a start marker (written by older versions, which had no end marker) lose
    everything after it and get a closed region.

    Args:
        current_contents: Current README text, possibly empty.
        markdown_fragment: Rendered tree.
        line_ending: Line ending used throughout the result.

    Returns:
        The new README text, ending with exactly one line ending.

    Raises:
        TreeMarkerOrderError: If the end marker is present without a start
            marker before it.
    """
    start_index = find_marker(current_contents, TREE_START_MARKER)
    end_index = find_marker(current_contents, TREE_END_MARKER)

    if end_index is not None and (start_index is None or end_index < start_index):
        raise TreeMarkerOrderError(
            "Invalid file structure: tree end marker found before tree start marker "
            f"(end marker: {TREE_END_MARKER!r}, start marker: {TREE_START_MARKER!r})"
        )

    region = (line_ending * 2).join([TREE_START_MARKER, markdown_fragment, TREE_END_MARKER])

    if start_index is not None and end_index is not None:
        # Text around a closed region is kept as is.
        before = current_contents[:start_index]
        after = current_contents[end_index + len(TREE_END_MARKER):]
        return _finish([before + region + after], line_ending)

    before = current_contents if start_index is None else current_contents[:start_index]
    before = before.rstrip(_NEWLINE_CHARS)

    blocks: list[str] = []
    if before.strip():
        blocks.append(before)
    blocks.append(region)

    return _finish(blocks, line_ending)


def merge_directory(
    name: str, current_contents: str, markdown_fragment: str, line_ending: str
) -> str:
    """Create the contents of a directory README.

    The whole file is generated, except for the text between the description
    markers, which is carried over from current_contents.

    Args:
        name: Directory title used for the heading.
        current_contents: Current README text, possibly empty.
        markdown_fragment: Rendered tree for the directory.
        line_ending: Line ending used throughout the result.

    Returns:
        The new README text, ending with exactly one line ending.

    Raises:
        DescriptionMarkerError: If the description markers are not either both
            absent or a single well-ordered pair.
    """
    description = _find_description_region(current_contents)
    if description is None:
        description = line_ending * 2

    blocks = [
        ENTIRE_FILE_GENERATED_MARKER,
        f"# {name}",
        DESCRIPTION_START_MARKER + description + DESCRIPTION_END_MARKER,
        markdown_fragment,
    ]

    return _finish(blocks, line_ending)


def extract_directory_description(current_contents: str) -> str | None:
    """Get the one-line description from a directory README.

    Whitespace inside the description region collapses to single spaces.
    Returns None when there is no region or it is blank.
    """
    description = _find_description_region(current_contents)
    if description is None:
        return None
    return " ".join(description.split()) or None


def _find_description_region(contents: str) -> str | None:
    start_count = contents.count(DESCRIPTION_START_MARKER)
    end_count = contents.count(DESCRIPTION_END_MARKER)

    if start_count == 0 and end_count == 0:
        return None

    start_index = find_marker(contents, DESCRIPTION_START_MARKER)
    end_index = find_marker(contents, DESCRIPTION_END_MARKER)

    if (
        start_count != 1
        or end_count != 1
        or start_index is None
        or end_index is None
        or end_index < start_index
    ):
        raise DescriptionMarkerError(
            "Invalid file structure: only one description marker found "
            "or end marker found before start marker"
        )

    return contents[start_index + len(DESCRIPTION_START_MARKER):end_index]


def _finish(blocks: list[str], line_ending: str) -> str:
    contents = (line_ending * 2).join(blocks)
    contents = normalize_line_endings(contents, line_ending)
    return ensure_single_trailing_line_ending(contents, line_ending)
