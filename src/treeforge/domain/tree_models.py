from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive node type shared by the diagram parser, the
renderer and the filesystem materializer.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class Node:
    """
    Represents a single entry (directory or file) of a project tree.

    Attributes:
        name: Display name of the entry, without trailing separator.
        is_directory: True for directories, False for plain files.
        children: Ordered child entries, in diagram order. Always empty for files.
    """
    name: str
    is_directory: bool = False
    children: List[Node] = field(default_factory=list)

    def add_child(self, child: Node) -> Node:
        """
        Append a child entry, preserving insertion order.

        Args:
            child: Node to attach under this directory.

        Returns:
            Node: The attached child.

        Raises:
            ValueError: If this node is a file.
        """
        if not self.is_directory:
            raise ValueError(f"Cannot attach '{child.name}' to file node '{self.name}'.")
        self.children.append(child)
        return child

    def walk(self) -> Iterator[Tuple[int, Node]]:
        """Yield (depth, node) pairs in pre-order, this node at depth 0."""
        stack: List[Tuple[int, Node]] = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            for child in reversed(node.children):
                stack.append((depth + 1, child))

    def count(self) -> int:
        """Total number of nodes in this subtree, including itself."""
        return sum(1 for _ in self.walk())
