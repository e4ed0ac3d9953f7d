from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
execution outcomes between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete pipeline execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        output_base_dir: Normalized directory under which the tree is created.
        strict_nesting: Whether inconsistent nesting was rejected.
        dry_run: Whether the run only planned paths.
        root_name: Name of the diagram root entry (empty if parsing failed).
        root_path: Absolute path of the materialized root directory.
        directories: Number of directory entries in the tree.
        files: Number of file entries in the tree.
        created_paths: Paths created (or planned) in pre-order.
        failed_path: Path whose creation failed, if any.
        warnings: Parser notes about skipped or re-attached lines.
        tree_lines: Rendered diagram of the parsed tree.
        summary: Technical execution summary.
    """
    ok: bool
    error: str

    output_base_dir: str
    strict_nesting: bool
    dry_run: bool

    root_name: str = ""
    root_path: str = ""
    directories: int = 0
    files: int = 0

    created_paths: List[str] = field(default_factory=list)
    failed_path: str = ""
    warnings: List[str] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        output_base_dir: str,
        *,
        dry_run: bool = False,
        root_name: str = "",
        failed_path: str = "",
        warnings: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        output_base_dir: The normalized destination directory.
        dry_run: Whether the run was a simulation.
        root_name: Root entry name, when parsing succeeded.
        failed_path: Path that could not be created.
        warnings: Parser warnings collected before the failure.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        output_base_dir=output_base_dir,
        strict_nesting=bool(cfg.get("strict_nesting", False)),
        dry_run=dry_run,
        root_name=root_name,
        failed_path=failed_path,
        warnings=warnings or [],
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        output_base_dir: str,
        root_name: str,
        root_path: str,
        *,
        dry_run: bool,
        directories: int,
        files: int,
        created_paths: List[str],
        warnings: Optional[List[str]] = None,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        cfg: Final configuration used during execution.
        output_base_dir: The normalized destination directory.
        root_name: Name of the diagram root.
        root_path: Absolute path of the root directory on disk.
        dry_run: Whether the run was a simulation.
        directories: Count of directory entries.
        files: Count of file entries.
        created_paths: Paths handled by the materializer.
        warnings: Parser warnings.
        tree_lines: Rendered diagram.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        output_base_dir=output_base_dir,
        strict_nesting=bool(cfg.get("strict_nesting", False)),
        dry_run=dry_run,
        root_name=root_name,
        root_path=root_path,
        directories=directories,
        files=files,
        created_paths=created_paths,
        warnings=warnings or [],
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
