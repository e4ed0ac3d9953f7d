from __future__ import annotations

"""
Tree Renderer.

Converts Node models back into box-drawing diagrams. Produces exactly the
dialect understood by the tree parser, so a rendered tree parses back into
an equivalent structure.
"""

from typing import List, Tuple

from treeforge.domain.constants import (
    BRANCH_MARKER,
    CONTINUATION_BLOCK,
    INDENT_BLOCK,
    LAST_BRANCH_MARKER,
    PATH_SEPARATOR,
)
from treeforge.domain.tree_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Node) -> List[str]:
    """
    Render a Node tree as a list of diagram lines.

    The first line is the root entry; directories carry a trailing
    separator and children keep their stored order.

    Args:
        root: Root node to render.

    Returns:
        List[str]: Visual lines of the diagram.
    """
    lines: List[str] = [_label(root)]
    render_tree_structure(root, lines, prefix="")
    return lines


def render_tree_structure(node: Node, lines: List[str], prefix: str = "") -> None:
    """
    Append the descendants of a node to the output lines.

    Uses the standard connectors (├──, └──) and continuation prefixes
    for nested directories. The walk keeps its own stack, so nesting
    depth is not bounded by the interpreter recursion limit.

    Args:
        node: Directory whose children are rendered.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix of the node's children.
    """
    # (entry, prefix, is_last), popped in diagram order
    pending: List[Tuple[Node, str, bool]] = _child_frames(node, prefix)

    while pending:
        child, child_prefix, is_last = pending.pop()
        connector = LAST_BRANCH_MARKER if is_last else BRANCH_MARKER

        lines.append(f"{child_prefix}{connector}{_label(child)}")

        if child.is_directory and child.children:
            new_prefix = child_prefix + (INDENT_BLOCK if is_last else CONTINUATION_BLOCK)
            pending.extend(_child_frames(child, new_prefix))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _label(node: Node) -> str:
    return f"{node.name}{PATH_SEPARATOR}" if node.is_directory else node.name


def _child_frames(node: Node, prefix: str) -> List[Tuple[Node, str, bool]]:
    """Stack frames for the children of a node, last child first."""
    last = len(node.children) - 1
    return [(child, prefix, i == last) for i, child in reversed(list(enumerate(node.children)))]
