from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treeforge.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeforge CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeforge",
        description=i18n.t("app.description"),
    )

    # --- Diagram Source ---
    p.add_argument(
        "diagram",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.diagram"),
    )
    p.add_argument(
        "-f", "--file",
        dest="diagram_file",
        default=None,
        help=i18n.t("cli.args.file"),
    )

    # --- Destination ---
    p.add_argument(
        "-o", "--output-base",
        dest="output_base_dir",
        default=None,
        help=i18n.t("cli.args.output_base"),
    )

    # --- Parsing and Preview ---
    p.add_argument("--strict", action="store_true", help=i18n.t("cli.args.strict"))
    p.add_argument("--print-tree", action="store_true", help=i18n.t("cli.args.print_tree"))

    # --- Runtime Constraints ---
    p.add_argument("--dry-run", action="store_true", help=i18n.t("cli.args.dry_run"))

    # --- Configuration and Diagnostics ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Flags that were not given map to None (or are omitted) so that they
    never override persisted values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["output_base_dir"] = args.output_base_dir

    if args.strict:
        overrides["strict_nesting"] = True
    if args.print_tree:
        overrides["print_tree"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
