"""Render a notes tree as a nested markdown list."""

from __future__ import annotations

from typing import Sequence

from markdown_notes_tree.options import TreeOptions
from markdown_notes_tree.schemas import TreeNode

_SPACES_INDENT = "    "
_TAB_INDENT = "\t"
_HARD_BREAK = "  "


def render(nodes: Sequence[TreeNode], line_ending: str, options: TreeOptions) -> str:
    """Create the markdown list for a tree.

    Nodes are rendered depth-first in the given order. Links are relative to the
    directory holding the first level of nodes and always use ``/``.

    Args:
        nodes: Top-level nodes of the tree.
        line_ending: Line ending placed between lines (none after the last one).
        options: Formatting options.

    Returns:
        The markdown fragment.
    """
    lines: list[str] = []
    _append_node_lines(lines, nodes, [], 0, options)
    return line_ending.join(lines)


def _append_node_lines(
    lines: list[str],
    nodes: Sequence[TreeNode],
    parent_path: list[str],
    depth: int,
    options: TreeOptions,
) -> None:
    indent_unit = _TAB_INDENT if options.use_tabs else _SPACES_INDENT
    indentation = indent_unit * depth

    for node in nodes:
        path_parts = [*parent_path, node.filename]

        if not node.is_directory:
            lines.append(f"{indentation}- [{node.title}]({'/'.join(path_parts)})")
            continue

        link = _directory_link(path_parts, options)
        bullet = f"{indentation}- [**{node.title}**]({link})"

        if node.description:
            if options.subdirectory_description_on_new_line:
                lines.append(bullet + _HARD_BREAK)
                lines.append(indentation + indent_unit + node.description)
            else:
                lines.append(f"{bullet} - {node.description}")
        else:
            lines.append(bullet)

        _append_node_lines(lines, node.children, path_parts, depth + 1, options)


def _directory_link(path_parts: list[str], options: TreeOptions) -> str:
    if options.link_to_subdirectory_readme:
        return "/".join([*path_parts, options.readme_filename])
    return "/".join(path_parts)
