"""markdown-notes-tree: generate README trees for a directory of markdown notes."""

from markdown_notes_tree.exceptions import (
    DescriptionMarkerError,
    InvalidFileStructureError,
    NotesTreeError,
    TreeMarkerOrderError,
)
from markdown_notes_tree.merger import (
    extract_directory_description,
    merge_directory,
    merge_main,
)
from markdown_notes_tree.options import TreeOptions
from markdown_notes_tree.renderer import render
from markdown_notes_tree.schemas import TreeNode
from markdown_notes_tree.text_utils import extract_title
from markdown_notes_tree.tree_builder import build_tree
from markdown_notes_tree.tree_writer import execute

__all__ = [
    "DescriptionMarkerError",
    "InvalidFileStructureError",
    "NotesTreeError",
    "TreeMarkerOrderError",
    "TreeNode",
    "TreeOptions",
    "build_tree",
    "execute",
    "extract_directory_description",
    "extract_title",
    "merge_directory",
    "merge_main",
    "render",
]
