"""Command line interface for markdown-notes-tree."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from markdown_notes_tree.config import (
    MARKDOWN_NOTES_TREE_LOG_LEVEL,
    MARKDOWN_NOTES_TREE_README_FILENAME,
)
from markdown_notes_tree.exceptions import NotesTreeError
from markdown_notes_tree.options import TreeOptions
from markdown_notes_tree.tree_writer import execute

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markdown-notes-tree",
        description="Generate README files listing the markdown notes in a directory tree.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Notes directory (default: current directory)",
    )
    parser.add_argument(
        "--linkToSubdirectoryReadme",
        action="store_true",
        help="Link directory entries to their README file instead of the directory",
    )
    parser.add_argument("--useTabs", action="store_true", help="Indent with tabs instead of spaces")
    parser.add_argument(
        "--subdirectoryDescriptionOnNewLine",
        action="store_true",
        help="Put directory descriptions on a separate line",
    )
    parser.add_argument(
        "--noSubdirectoryTrees",
        action="store_true",
        help="Only write the main README, not one README per directory",
    )
    parser.add_argument("--silent", action="store_true", help="Do not log progress")
    parser.add_argument(
        "--readmeFilename",
        default=MARKDOWN_NOTES_TREE_README_FILENAME,
        help=f"README file name (default: {MARKDOWN_NOTES_TREE_README_FILENAME})",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Glob pattern of files or directories to skip (repeatable)",
    )
    parser.add_argument(
        "--notesBeforeDirectories",
        action="store_true",
        help="List notes before subdirectories",
    )
    parser.add_argument("--orderNotesByTitle", action="store_true", help="Sort notes by title")
    parser.add_argument(
        "--includeAllDirectoriesByDefault",
        action="store_true",
        help="Also list directories that contain no notes",
    )
    return parser


def get_options(args: argparse.Namespace) -> TreeOptions:
    """Convert parsed arguments into run options."""
    return TreeOptions(
        link_to_subdirectory_readme=args.linkToSubdirectoryReadme,
        use_tabs=args.useTabs,
        subdirectory_description_on_new_line=args.subdirectoryDescriptionOnNewLine,
        readme_filename=args.readmeFilename,
        no_subdirectory_trees=args.noSubdirectoryTrees,
        silent=args.silent,
        ignore=list(args.ignore),
        notes_before_directories=args.notesBeforeDirectories,
        order_notes_by_title=args.orderNotesByTitle,
        include_all_directories_by_default=args.includeAllDirectoriesByDefault,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the markdown-notes-tree command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    root = Path(args.directory).expanduser().resolve()
    if not root.is_dir():
        parser.error(f"Not a directory: {root}")

    logging.basicConfig(level=MARKDOWN_NOTES_TREE_LOG_LEVEL, format="%(message)s")

    try:
        execute(root, get_options(args))
    except NotesTreeError as exc:
        logger.error("%s", exc)
        return 1
    return 0
