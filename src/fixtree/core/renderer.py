from __future__ import annotations

"""
Tree Renderer.

Converts nested tree models (planned or scanned) into ASCII lines.
"""

from typing import List

from fixtree.domain.tree_models import SEPARATOR, PlannedTree


def render_tree_structure(
        tree_structure: PlannedTree,
        lines: List[str],
        prefix: str = "",
        show_sizes: bool = False,
) -> None:
    """
    Recursively transform the tree model into a list of strings.

    Uses standard connectors (├──, └──); directories are suffixed with '/'.

    Args:
        tree_structure: Current tree level.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        show_sizes: Append the byte size to file entries when known.
    """
    entries = sorted(tree_structure.keys())
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        node = tree_structure[entry]

        if isinstance(node, dict):
            lines.append(f"{prefix}{connector}{entry}{SEPARATOR}")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(node, lines, prefix=new_prefix, show_sizes=show_sizes)
            continue

        label = f"{entry} ({node} B)" if show_sizes and node is not None else entry
        lines.append(f"{prefix}{connector}{label}")


def render_tree(tree_structure: PlannedTree, root_label: str = ".", show_sizes: bool = False) -> List[str]:
    """Render a whole tree headed by 'root_label'."""
    lines = [root_label]
    render_tree_structure(tree_structure, lines, show_sizes=show_sizes)
    return lines
