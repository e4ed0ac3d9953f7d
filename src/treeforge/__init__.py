from __future__ import annotations

"""
treeforge: create directory structures from tree diagrams.
"""

from treeforge.core.analysis.tree_parser import ParseReport, parse_tree, parse_tree_report
from treeforge.core.analysis.tree_renderer import render_tree
from treeforge.core.pipeline.engine import run_pipeline
from treeforge.core.services.materializer import materialize
from treeforge.domain.errors import MaterializationError, TreeParseError
from treeforge.domain.tree_models import Node

__version__ = "1.0.0"

__all__ = [
    "Node",
    "ParseReport",
    "TreeParseError",
    "MaterializationError",
    "parse_tree",
    "parse_tree_report",
    "render_tree",
    "materialize",
    "run_pipeline",
]
