from __future__ import annotations

"""
Filesystem Materializer.

Walks a Node tree depth-first (pre-order) and creates the matching
directories and empty files below a base path. The walk is fail-fast:
the first filesystem error aborts it and entries created so far are
left in place.
"""

import logging
import os
from typing import List, Tuple

from treeforge.domain.constants import DIRECTORY_MODE
from treeforge.domain.errors import MaterializationError
from treeforge.domain.tree_models import Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize(node: Node, base_path: str, *, dry_run: bool = False) -> List[str]:
    """
    Create the directories and files described by a tree.

    Directory creation is idempotent and existing files are truncated,
    so running twice over the same base path yields the same layout.

    Args:
        node: Root of the tree to create.
        base_path: Directory under which the root entry is created.
        dry_run: Compute the target paths without touching the disk.

    Returns:
        List[str]: Paths of all handled entries, in pre-order.

    Raises:
        MaterializationError: On the first entry that cannot be created.
    """
    handled: List[str] = []

    # Explicit stack of (node, parent path); children pushed in reverse keep pre-order
    pending: List[Tuple[Node, str]] = [(node, base_path)]
    while pending:
        current, parent = pending.pop()
        path = _materialize_node(current, parent, handled, dry_run)
        for child in reversed(current.children):
            pending.append((child, path))

    verb = "Planned" if dry_run else "Created"
    logger.info(f"{verb} {len(handled)} entries under: {os.path.join(base_path, node.name)}")
    return handled

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _materialize_node(node: Node, base_path: str, handled: List[str], dry_run: bool) -> str:
    """Create a single entry (children excluded) and return its path."""
    _check_entry_name(node.name, base_path)
    path = os.path.join(base_path, node.name)

    if node.is_directory:
        if not dry_run:
            _create_directory(path, "Directory creation failed")
        handled.append(path)
        logger.debug(f"[MKDIR] {path}")
        return path

    if not dry_run:
        _create_directory(os.path.dirname(path), "Parent directory creation failed")
        _create_empty_file(path)
    handled.append(path)
    logger.debug(f"[TOUCH] {path}")
    return path


def _create_directory(path: str, message: str) -> None:
    """Create a directory and its missing ancestors; existing ones are accepted."""
    if not path:
        return
    try:
        os.makedirs(path, mode=DIRECTORY_MODE, exist_ok=True)
    except (OSError, ValueError) as e:
        raise MaterializationError(message, path, "directory", e) from e


def _create_empty_file(path: str) -> None:
    """Create a zero-length file, truncating any previous content."""
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except (OSError, ValueError) as e:
        raise MaterializationError("File creation failed", path, "file", e) from e


def _check_entry_name(name: str, base_path: str) -> None:
    """Reject names that would escape their parent directory or that no filesystem accepts."""
    parts = name.replace("\\", "/").split("/")
    if not name or "\x00" in name or os.path.isabs(name) or ".." in parts:
        raise MaterializationError(
            f"Unsafe entry name {name!r}", os.path.join(base_path, name), "name"
        )
