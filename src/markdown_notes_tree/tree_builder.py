"""Scan a notes directory into a tree of TreeNode objects."""

from __future__ import annotations

import fnmatch
from pathlib import Path

from markdown_notes_tree.config import ALWAYS_IGNORED_NAMES
from markdown_notes_tree.merger import extract_directory_description
from markdown_notes_tree.options import TreeOptions
from markdown_notes_tree.schemas import TreeNode
from markdown_notes_tree.text_utils import extract_title

_NOTE_SUFFIX = ".md"


def build_tree(root: Path, options: TreeOptions) -> list[TreeNode]:
    """Build the notes tree below root.

    Notes are markdown files other than README files. Hidden entries,
    ``node_modules``, symlinked directories and entries matching
    ``options.ignore`` are skipped.
    Directories without notes are left out unless
    ``options.include_all_directories_by_default`` is set.

    Args:
        root: The notes directory.
        options: Run options.

    Returns:
        Top-level nodes, directories first unless
        ``options.notes_before_directories`` is set.

    Raises:
        DescriptionMarkerError: If a directory README has malformed description
            markers.
    """
    return _build_nodes(root, [], options)


def read_text(path: Path) -> str:
    """Read a UTF-8 file without translating line endings.

    Undecodable bytes become U+FFFD instead of failing the run.
    """
    with path.open(encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def _build_nodes(directory: Path, relative_parts: list[str], options: TreeOptions) -> list[TreeNode]:
    directories: list[TreeNode] = []
    notes: list[TreeNode] = []

    for entry in sorted(directory.iterdir(), key=lambda path: (path.name.lower(), path.name)):
        entry_parts = [*relative_parts, entry.name]
        if _is_ignored(entry_parts, options):
            continue

        if entry.is_symlink() and entry.is_dir():
            # Symlinked directories are not followed.
            continue

        if entry.is_dir():
            children = _build_nodes(entry, entry_parts, options)
            if not children and not options.include_all_directories_by_default:
                continue
            directories.append(
                TreeNode(
                    is_directory=True,
                    filename=entry.name,
                    title=entry.name,
                    description=_read_directory_description(entry, options),
                    children=children,
                )
            )
        elif _is_note(entry, options):
            notes.append(
                TreeNode(
                    is_directory=False,
                    filename=entry.name,
                    title=extract_title(read_text(entry)) or entry.name,
                )
            )

    if options.order_notes_by_title:
        notes.sort(key=lambda node: (node.title.lower(), node.title))

    if options.notes_before_directories:
        return notes + directories
    return directories + notes


def _is_ignored(entry_parts: list[str], options: TreeOptions) -> bool:
    name = entry_parts[-1]
    if name.startswith(".") or name in ALWAYS_IGNORED_NAMES:
        return True
    relative_path = "/".join(entry_parts)
    return any(
        fnmatch.fnmatch(relative_path, pattern) or fnmatch.fnmatch(name, pattern)
        for pattern in options.ignore
    )


def _is_note(entry: Path, options: TreeOptions) -> bool:
    return (
        entry.is_file()
        and entry.suffix.lower() == _NOTE_SUFFIX
        and entry.name != options.readme_filename
    )


def _read_directory_description(directory: Path, options: TreeOptions) -> str | None:
    readme_path = directory / options.readme_filename
    if not readme_path.is_file():
        return None
    return extract_directory_description(read_text(readme_path))
