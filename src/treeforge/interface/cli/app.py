from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults,
persisted state and CLI overrides), logging bootstrap, diagram loading,
pipeline execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from treeforge.core.pipeline.engine import run_pipeline
from treeforge.core.pipeline.validator import validate_config
from treeforge.domain.config import get_default_config, load_config, save_config
from treeforge.domain.pipeline_models import PipelineResult
from treeforge.infra.fs import read_text_file, strip_bom
from treeforge.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from treeforge.interface.cli import args as cli_args
from treeforge.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 unreadable input,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration hierarchy (defaults / persisted / overrides)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console stderr, optional rotating file)
    log_file = args.log_file
    if not log_file and clean_conf["save_log"]:
        log_file = get_default_log_path()
    configure_logging(LoggingConfig(level=clean_conf["log_level"], console=True, log_file=log_file))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        session = dict(clean_conf)
        if args.output_base_dir is None:
            # Unset destination keeps following the working directory
            session.pop("output_base_dir", None)
        save_config(session)
        logger.info(i18n.t("cli.status.saved"))
        if args.diagram is None and args.diagram_file is None:
            return 0

    # 4. Diagram loading
    source = args.diagram_file or ("<argument>" if args.diagram is not None else "-")
    try:
        diagram = _read_diagram(args)
    except KeyboardInterrupt:
        return _report_interrupt()
    except (OSError, UnicodeDecodeError) as e:
        msg = i18n.t("cli.errors.read_fail", source=source, error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Pipeline execution phase
    logger.debug(f"Diagram loaded from {source} ({len(diagram)} chars).")
    try:
        result = run_pipeline(clean_conf, diagram, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        return _report_interrupt()
    except Exception as e:
        msg = i18n.t("cli.errors.pipeline_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# INPUT AND CONFIGURATION HELPERS
# -----------------------------------------------------------------------------

def _read_diagram(args: Any) -> str:
    """Load the diagram from --file, the positional argument, or stdin."""
    if args.diagram_file and args.diagram_file != "-":
        return read_text_file(args.diagram_file)
    if args.diagram is not None and not args.diagram_file:
        return args.diagram
    return strip_bom(sys.stdin.read())


def _report_interrupt() -> int:
    """Report a user interrupt and return the conventional exit code."""
    msg = i18n.t("cli.status.interrupted")
    logger.warning(msg)
    print(msg, file=sys.stderr)
    return 130


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """
    Format and print the execution result to the standard output.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        print(i18n.t("cli.status.dry_run"))
        print("\n".join(result.tree_lines))
    else:
        print(i18n.t("cli.status.success"))

    print(i18n.t("cli.status.root", path=result.root_path))
    print(i18n.t("cli.status.counts", directories=result.directories, files=result.files))

    if result.warnings:
        print(i18n.t("cli.status.warnings", count=len(result.warnings)))
        for w in result.warnings:
            print(f"  - {w}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
