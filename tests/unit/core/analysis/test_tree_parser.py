from __future__ import annotations

"""
Unit tests for the Tree Diagram Parser.

Verifies:
1. Structure recovery for the reference project diagram.
2. Root handling and file/directory classification.
3. Stack truncation when returning to shallower levels.
4. Lenient skipping and depth-jump clamping (and strict rejection).
"""

import pytest

from treeforge.core.analysis.tree_parser import compute_depth, parse_tree, parse_tree_report
from treeforge.domain.errors import TreeParseError


def _names(node):
    return [child.name for child in node.children]


# -----------------------------------------------------------------------------
# REFERENCE SCENARIO
# -----------------------------------------------------------------------------

def test_parse_reference_project(sample_diagram: str) -> None:
    """The reference diagram yields 7 nodes with the expected nesting."""
    root = parse_tree(sample_diagram)

    assert root.name == "project"
    assert root.is_directory is True
    assert _names(root) == ["README.md", "src", ".gitignore"]

    readme, src, gitignore = root.children
    assert readme.is_directory is False
    assert gitignore.is_directory is False
    assert src.is_directory is True
    assert _names(src) == ["index.ts", "utils"]

    utils = src.children[1]
    assert utils.is_directory is True
    assert _names(utils) == ["date.ts"]
    assert utils.children[0].is_directory is False

    assert root.count() == 7


def test_reference_project_depths(sample_diagram: str) -> None:
    """Pre-order depths follow the vertical order of the diagram."""
    root = parse_tree(sample_diagram)
    depths = [(depth, node.name) for depth, node in root.walk()]

    assert depths == [
        (0, "project"),
        (1, "README.md"),
        (1, "src"),
        (2, "index.ts"),
        (2, "utils"),
        (3, "date.ts"),
        (1, ".gitignore"),
    ]

# -----------------------------------------------------------------------------
# ROOT HANDLING
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("first_line", ["x", "x/", "  x/  "])
def test_root_is_always_a_directory(first_line: str) -> None:
    root = parse_tree(first_line)

    assert root.name == "x"
    assert root.is_directory is True
    assert root.children == []


def test_leading_blank_lines_before_root() -> None:
    root = parse_tree("\n\nroot/\n└── a.txt")

    assert root.name == "root"
    assert _names(root) == ["a.txt"]


@pytest.mark.parametrize("text", ["", "\n", "   \n\t\n"])
def test_empty_input_raises(text: str) -> None:
    with pytest.raises(TreeParseError):
        parse_tree(text)


def test_root_without_name_raises() -> None:
    with pytest.raises(TreeParseError) as exc_info:
        parse_tree("/\n└── a.txt")

    assert exc_info.value.line_no == 1

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

def test_trailing_separator_marks_directories() -> None:
    root = parse_tree("root/\n├── empty/\n└── file.txt")

    empty, file_node = root.children
    assert empty.name == "empty"
    assert empty.is_directory is True
    assert empty.children == []
    assert file_node.is_directory is False
    assert file_node.children == []


def test_trailing_whitespace_does_not_hide_separator() -> None:
    root = parse_tree("root/\n├── pkg/   \n│   └── mod.py")

    pkg = root.children[0]
    assert pkg.is_directory is True
    assert _names(pkg) == ["mod.py"]


def test_names_keep_inner_spaces() -> None:
    root = parse_tree("root/\n└── my notes.txt")
    assert _names(root) == ["my notes.txt"]

# -----------------------------------------------------------------------------
# NESTING AND TRUNCATION
# -----------------------------------------------------------------------------

def test_shallower_line_closes_deeper_directories() -> None:
    diagram = (
        "root/\n"
        "├── a/\n"
        "│   ├── b/\n"
        "│   │   └── x.txt\n"
        "│   └── y.txt\n"
        "└── z.txt"
    )
    root = parse_tree(diagram)

    a = root.children[0]
    b = a.children[0]
    assert _names(root) == ["a", "z.txt"]
    assert _names(a) == ["b", "y.txt"]
    assert _names(b) == ["x.txt"]


def test_space_indentation_under_last_child() -> None:
    diagram = (
        "root/\n"
        "└── a/\n"
        "    └── b/\n"
        "        └── c.txt"
    )
    root = parse_tree(diagram)

    a = root.children[0]
    b = a.children[0]
    assert _names(b) == ["c.txt"]


def test_markers_are_optional() -> None:
    root = parse_tree("root/\nsrc/\n    main.py\nREADME.md")

    src = root.children[0]
    assert _names(root) == ["src", "README.md"]
    assert _names(src) == ["main.py"]


def test_crlf_line_endings() -> None:
    root = parse_tree("root/\r\n├── a/\r\n│   └── b.txt\r\n└── c.txt\r\n")

    assert _names(root) == ["a", "c.txt"]
    assert _names(root.children[0]) == ["b.txt"]


def test_no_break_space_indentation() -> None:
    """GNU tree output pads continuation columns with U+00A0."""
    diagram = (
        "root/\n"
        "├── a/\n"
        "│\u00a0\u00a0 └── b.txt\n"
        "└── c/\n"
        "\u00a0\u00a0\u00a0 └── d.txt"
    )
    root = parse_tree(diagram)

    a, c = root.children
    assert _names(a) == ["b.txt"]
    assert _names(c) == ["d.txt"]


@pytest.mark.parametrize(
    "indent, expected",
    [
        ("", 0),
        ("│   ", 1),
        ("    ", 1),
        ("│       ", 2),
        ("│   │   ", 2),
        ("    │   ", 2),
        ("        ", 2),
    ],
)
def test_compute_depth(indent: str, expected: int) -> None:
    assert compute_depth(indent) == expected

# -----------------------------------------------------------------------------
# LENIENCY AND DEPTH JUMPS
# -----------------------------------------------------------------------------

def test_unparseable_lines_are_skipped_and_reported() -> None:
    report = parse_tree_report("root/\n\n│\n├── a.txt\n   \n├── /\n└── b.txt")

    assert _names(report.root) == ["a.txt", "b.txt"]
    assert len(report.warnings) == 2
    assert report.warnings[0].startswith("Line 3:")
    assert "without a name" in report.warnings[1]


def test_clean_diagram_has_no_warnings(sample_diagram: str) -> None:
    report = parse_tree_report(sample_diagram)
    assert report.warnings == []


def test_depth_jump_is_clamped_to_deepest_open_directory() -> None:
    diagram = (
        "root/\n"
        "├── a/\n"
        "│   │   │   └── deep.txt\n"
        "└── b.txt"
    )
    report = parse_tree_report(diagram)

    a = report.root.children[0]
    assert _names(report.root) == ["a", "b.txt"]
    assert _names(a) == ["deep.txt"]
    assert len(report.warnings) == 1
    assert "deep.txt" in report.warnings[0]


def test_entry_below_a_file_is_reattached() -> None:
    report = parse_tree_report("root/\n├── a.txt\n│   └── b.txt")

    a_txt = report.root.children[0]
    assert _names(report.root) == ["a.txt", "b.txt"]
    assert a_txt.children == []
    assert len(report.warnings) == 1


def test_strict_mode_rejects_depth_jumps() -> None:
    with pytest.raises(TreeParseError) as exc_info:
        parse_tree("root/\n├── a.txt\n│   │   └── orphan.txt", strict=True)

    assert exc_info.value.line_no == 3
    assert "Inconsistent nesting" in str(exc_info.value)


def test_strict_mode_accepts_consistent_diagrams(sample_diagram: str) -> None:
    root = parse_tree(sample_diagram, strict=True)
    assert root.count() == 7
