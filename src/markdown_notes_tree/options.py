"""Options controlling tree rendering and README generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_notes_tree.config import MARKDOWN_NOTES_TREE_README_FILENAME


@dataclass
class TreeOptions:
    """Options for a markdown-notes-tree run.

    Attributes:
        link_to_subdirectory_readme: If True, directory entries link to the
            directory's README file instead of the directory itself.
        use_tabs: If True, indent nested entries with tabs instead of four spaces.
        subdirectory_description_on_new_line: If True, directory descriptions are
            rendered on their own indented line instead of after the link.
        readme_filename: File name of the main README and of directory READMEs.
        no_subdirectory_trees: If True, do not generate a README per directory.
        silent: If True, suppress progress logging.
        ignore: Glob patterns for files and directories to leave out.
        notes_before_directories: If True, list notes before subdirectories.
        order_notes_by_title: If True, sort notes by title instead of filename.
        include_all_directories_by_default: If True, keep directories that do
            not contain any notes.
    """

    link_to_subdirectory_readme: bool = False
    use_tabs: bool = False
    subdirectory_description_on_new_line: bool = False
    readme_filename: str = MARKDOWN_NOTES_TREE_README_FILENAME
    no_subdirectory_trees: bool = False
    silent: bool = False
    ignore: list[str] = field(default_factory=list)
    notes_before_directories: bool = False
    order_notes_by_title: bool = False
    include_all_directories_by_default: bool = False
