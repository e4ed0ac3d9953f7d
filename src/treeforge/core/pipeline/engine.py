from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates the scaffolding workflow:
1. Validates configuration and normalizes the destination path.
2. Parses the diagram into a Node tree.
3. Renders a preview of the recovered structure.
4. Materializes the tree (or plans it in dry-run mode).
5. Packs metrics and paths into a PipelineResult.
"""

import logging
import os
from typing import Any, Dict, Optional

from treeforge.core.analysis.tree_parser import parse_tree_report
from treeforge.core.analysis.tree_renderer import render_tree
from treeforge.core.pipeline.validator import validate_config
from treeforge.core.services.materializer import materialize
from treeforge.domain.errors import MaterializationError, TreeParseError
from treeforge.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from treeforge.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        diagram: str,
        *,
        dry_run: bool = False,
) -> PipelineResult:
    """
    Execute the full diagram-to-filesystem pipeline.

    Parse and materialization failures are logged and returned as error
    results; they are not raised.

    Args:
        config: The configuration dictionary (raw or partial).
        diagram: Tree diagram text.
        dry_run: If True, compute the target paths without writing to disk.

    Returns:
        PipelineResult: Object containing status, metrics, and summary.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config if config is not None else {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    output_base_dir = normalize_path(cfg.get("output_base_dir", ""), os.getcwd())
    strict = bool(cfg["strict_nesting"])

    # -------------------------------------------------------------------------
    # 2) Parsing
    # -------------------------------------------------------------------------
    try:
        report = parse_tree_report(diagram, strict=strict)
    except TreeParseError as e:
        msg = f"Invalid diagram: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, output_base_dir, dry_run=dry_run)

    root = report.root
    directories = sum(1 for _, node in root.walk() if node.is_directory)
    files = root.count() - directories

    # -------------------------------------------------------------------------
    # 3) Preview
    # -------------------------------------------------------------------------
    tree_lines = render_tree(root)
    if cfg["print_tree"]:
        logger.info("Tree Preview:\n" + "\n".join(tree_lines))

    # -------------------------------------------------------------------------
    # 4) Materialization
    # -------------------------------------------------------------------------
    try:
        created = materialize(root, output_base_dir, dry_run=dry_run)
    except MaterializationError as e:
        logger.error(f"Materialization aborted: {e}")
        return create_error_result(
            str(e), cfg, output_base_dir,
            dry_run=dry_run,
            root_name=root.name,
            failed_path=e.path,
            warnings=report.warnings,
            summary_extra={"failed_action": e.action},
        )

    # -------------------------------------------------------------------------
    # 5) Finalize
    # -------------------------------------------------------------------------
    root_path = os.path.join(output_base_dir, root.name)
    summary = {
        "root_path": root_path,
        "directories": directories,
        "files": files,
        "entries": len(created),
        "parse_warnings": len(report.warnings),
        "dry_run": dry_run,
    }

    logger.info("Pipeline completed successfully.")
    return create_success_result(
        cfg, output_base_dir, root.name, root_path,
        dry_run=dry_run,
        directories=directories,
        files=files,
        created_paths=created,
        warnings=report.warnings,
        tree_lines=tree_lines,
        summary_extra=summary,
    )
