from __future__ import annotations

"""
Tree Diagram Parser.

Rebuilds a hierarchical Node model from the box-drawing text produced by
tools like `tree`. Nesting depth is recovered from the indentation run in
front of each entry: every vertical bar and every 4-space block counts as
one level. The first non-blank line is always the root directory.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from treeforge.domain.constants import (
    INDENT_BLOCK,
    NO_BREAK_SPACE,
    PATH_SEPARATOR,
    VERTICAL_BAR,
)
from treeforge.domain.errors import TreeParseError
from treeforge.domain.tree_models import Node

logger = logging.getLogger(__name__)

# <indent><marker>?<name>. The name may not start with whitespace or a
# drawing glyph, so lines made only of decoration never match.
_ENTRY_RX = re.compile(
    r"^(?P<indent>[│\s]*)"
    r"(?P<marker>[├└]── )?"
    r"(?P<name>[^\s│├└].*)$"
)

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass
class ParseReport:
    """
    Outcome of a lenient parse.

    Attributes:
        root: Root directory node of the recovered tree.
        warnings: Human-readable notes about skipped lines and clamped depths.
    """
    root: Node
    warnings: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_tree(text: str, *, strict: bool = False) -> Node:
    """
    Parse a tree diagram into its root Node.

    Args:
        text: Multi-line diagram text.
        strict: Reject entries nested deeper than any open directory
                instead of re-attaching them to the deepest one.

    Returns:
        Node: The root directory of the diagram.

    Raises:
        TreeParseError: If the diagram has no usable root line, or on
                        inconsistent nesting in strict mode.
    """
    return parse_tree_report(text, strict=strict).root


def parse_tree_report(text: str, *, strict: bool = False) -> ParseReport:
    """
    Parse a tree diagram and collect warnings for every recovered irregularity.

    Unparseable lines are skipped. A line whose depth has no open parent
    directory is clamped to the deepest open directory, or rejected when
    strict is set.

    Args:
        text: Multi-line diagram text.
        strict: Raise on inconsistent nesting instead of clamping.

    Returns:
        ParseReport: Root node plus the collected warnings.
    """
    lines = (text or "").splitlines()

    # 1. Root line: first non-blank line, always a directory
    root_index = _first_content_index(lines)
    if root_index is None:
        raise TreeParseError("Diagram is empty: no root line found.")

    root_name = _strip_separator(lines[root_index].strip())
    if not root_name:
        raise TreeParseError("Root entry has no name.", line_no=root_index + 1)

    root = Node(name=root_name, is_directory=True)
    report = ParseReport(root=root)

    # stack[d] is the open directory that receives entries of depth d
    stack: List[Node] = [root]
    last_depth = 0

    # 2. Entry lines
    for index in range(root_index + 1, len(lines)):
        line_no = index + 1
        line = lines[index].replace(NO_BREAK_SPACE, " ").rstrip()

        match = _ENTRY_RX.match(line)
        if not match:
            if line:
                _note(report, f"Line {line_no}: skipped unparseable entry {line!r}.", logging.DEBUG)
            continue

        name = _strip_separator(match.group("name"))
        if not name:
            _note(report, f"Line {line_no}: skipped entry without a name.", logging.DEBUG)
            continue

        depth = compute_depth(match.group("indent"))
        is_dir = line.endswith(PATH_SEPARATOR)

        # 3. Close every directory deeper than the current entry
        if depth <= last_depth:
            del stack[depth + 1:]

        # 4. Depth jumps beyond the deepest open directory
        if depth >= len(stack):
            if strict:
                raise TreeParseError(
                    f"Inconsistent nesting: '{name}' is at depth {depth + 1} "
                    f"but the deepest open directory is at depth {len(stack) - 1}.",
                    line_no=line_no,
                )
            clamped = len(stack) - 1
            _note(
                report,
                f"Line {line_no}: '{name}' nested too deep (depth {depth + 1}); "
                f"attached to '{stack[clamped].name}'.",
                logging.WARNING,
            )
            depth = clamped

        node = stack[depth].add_child(Node(name=name, is_directory=is_dir))
        if is_dir:
            stack.append(node)
        last_depth = depth

    logger.debug(f"Parsed diagram '{root.name}': {root.count()} entries, {len(report.warnings)} warnings.")
    return report


def compute_depth(indent: str) -> int:
    """
    Compute the nesting level encoded by an indentation run.

    Vertical bars and 4-space blocks each add one level; a bar with its
    trailing three spaces is not a 4-space block.

    Args:
        indent: Leading glyph/whitespace run of a diagram line.

    Returns:
        int: Zero-based depth below the root.
    """
    return indent.count(VERTICAL_BAR) + indent.count(INDENT_BLOCK)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _first_content_index(lines: List[str]) -> Optional[int]:
    for i, line in enumerate(lines):
        if line.strip():
            return i
    return None


def _strip_separator(name: str) -> str:
    """Remove one trailing path separator."""
    if name.endswith(PATH_SEPARATOR):
        return name[:-1]
    return name


def _note(report: ParseReport, message: str, level: int) -> None:
    report.warnings.append(message)
    logger.log(level, message)
