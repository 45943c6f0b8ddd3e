"""Write the notes tree to the main README and to directory READMEs."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from markdown_notes_tree.merger import merge_directory, merge_main
from markdown_notes_tree.options import TreeOptions
from markdown_notes_tree.renderer import render
from markdown_notes_tree.schemas import TreeNode
from markdown_notes_tree.tree_builder import build_tree, read_text

logger = logging.getLogger(__name__)

_SILENT_LOGGER = logging.getLogger(f"{__name__}.silent")
_SILENT_LOGGER.addHandler(logging.NullHandler())
_SILENT_LOGGER.propagate = False


def execute(
    root: Path,
    options: TreeOptions,
    *,
    progress_logger: logging.Logger | None = None,
    line_ending: str = os.linesep,
) -> list[Path]:
    """Regenerate the READMEs of a notes directory.

    Every new file is computed before anything is written, so an invalid
    README leaves all files untouched. Not intended to be run concurrently
    against the same directory.

    Args:
        root: The notes directory.
        options: Run options.
        progress_logger: Logger receiving progress messages. Defaults to the
            module logger; ignored when ``options.silent`` is set.
        line_ending: Line ending used in written files.

    Returns:
        Paths of the files whose contents changed.

    Raises:
        InvalidFileStructureError: If an existing README has malformed markers.
    """
    log = _SILENT_LOGGER if options.silent else (progress_logger or logger)

    log.info("Processing files in order to build notes tree")
    tree = build_tree(root, options)

    log.info("Building notes tree for main README file")
    pending = [get_main_readme(root, tree, line_ending, options)]

    if not options.no_subdirectory_trees:
        log.info("Building trees for directories")
        pending.extend(iter_directory_readmes(root, tree, line_ending, options))

    written: list[Path] = []
    for path, current, contents in pending:
        if current == contents:
            log.debug("Unchanged: %s", path)
            continue
        log.info("Writing to %s", path)
        path.write_text(contents, encoding="utf-8", newline="")
        written.append(path)

    log.info("Finished execution")
    return written


def get_main_readme(
    root: Path, tree: list[TreeNode], line_ending: str, options: TreeOptions
) -> tuple[Path, str, str]:
    """Compute the main README path with its current and new contents."""
    path = root / options.readme_filename
    current = _read_if_exists(path)
    markdown_for_tree = render(tree, line_ending, options)
    return path, current, merge_main(current, markdown_for_tree, line_ending)


def iter_directory_readmes(
    root: Path, tree: list[TreeNode], line_ending: str, options: TreeOptions
) -> Iterator[tuple[Path, str, str]]:
    """Yield the README path with current and new contents for every directory."""
    stack: list[tuple[Path, TreeNode]] = [
        (root / node.filename, node) for node in reversed(tree) if node.is_directory
    ]
    while stack:
        directory, node = stack.pop()
        path = directory / options.readme_filename
        current = _read_if_exists(path)
        markdown_for_tree = render(node.children, line_ending, options)
        yield path, current, merge_directory(node.title, current, markdown_for_tree, line_ending)

        stack.extend(
            (directory / child.filename, child)
            for child in reversed(node.children)
            if child.is_directory
        )


def _read_if_exists(path: Path) -> str:
    if not path.is_file():
        return ""
    return read_text(path)
