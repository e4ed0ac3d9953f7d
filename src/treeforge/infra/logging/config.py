from __future__ import annotations

"""
Logging settings for the treeforge CLI.

The CLI builds one LoggingConfig per run from the validated `log_level`
and `save_log` keys (or `--debug` / `--log-file`). Console records go to
stderr so that `--json` output on stdout stays machine readable.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Level names understood by configure_logging
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where and how much a scaffolding run logs.

    At DEBUG level every created entry is logged ([MKDIR] / [TOUCH]), so
    large diagrams can fill a log file quickly; rotation keeps it bounded.

    Attributes:
        level: Level name, e.g. "INFO" or "DEBUG". Unknown names fall back to INFO.
        console: Write records to stderr.
        log_file: Rotating log file path (`--log-file` or the default log path).
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated log files kept next to the active one.
        console_fmt: Record format on stderr.
        file_fmt: Record format in the log file.
        datefmt: Timestamp format in the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
