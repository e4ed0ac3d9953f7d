from __future__ import annotations

"""
Domain Error Types.

Failures raised by the parsing and materialization services. Interface
layers convert them into result objects or exit codes.
"""

from typing import Optional


class TreeParseError(ValueError):
    """
    Raised when a diagram cannot produce a usable tree.

    Attributes:
        line_no: 1-based line number of the offending line, when known.
    """

    def __init__(self, message: str, line_no: Optional[int] = None):
        if line_no is not None:
            message = f"Line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


class MaterializationError(OSError):
    """
    Raised when a tree entry cannot be created on disk.

    Attributes:
        path: Filesystem path whose creation was attempted.
        action: Kind of entry involved ('directory', 'file' or 'name').
    """

    def __init__(self, message: str, path: str, action: str, cause: Optional[Exception] = None):
        errno_value = getattr(cause, "errno", None)
        detail = f"{message}: {path}"
        if cause is not None:
            detail = f"{detail} ({getattr(cause, 'strerror', None) or cause})"
        super().__init__(errno_value, detail)
        self.path = path
        self.action = action

    def __str__(self) -> str:
        return str(self.strerror)
