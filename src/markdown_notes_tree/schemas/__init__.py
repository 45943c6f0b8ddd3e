"""Shared schemas for markdown-notes-tree."""

from markdown_notes_tree.schemas.tree import TreeNode

__all__ = ["TreeNode"]
