"""Custom exceptions for markdown-notes-tree."""


class NotesTreeError(Exception):
    """Base exception for markdown-notes-tree operations."""


class InvalidFileStructureError(NotesTreeError):
    """Existing file content has auto-generated markers in an unusable layout."""


class TreeMarkerOrderError(InvalidFileStructureError):
    """Tree end marker found before (or without) the tree start marker."""


class DescriptionMarkerError(InvalidFileStructureError):
    """Directory description markers are missing, duplicated or misordered."""
