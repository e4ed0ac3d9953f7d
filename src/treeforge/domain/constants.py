from __future__ import annotations

"""
Domain Constants.

Centralizes the diagram glyph vocabulary, filesystem defaults and
configuration versioning.
"""

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# DIAGRAM GLYPHS
# -----------------------------------------------------------------------------
VERTICAL_BAR = "│"
BRANCH_MARKER = "├── "
LAST_BRANCH_MARKER = "└── "
INDENT_BLOCK = "    "
CONTINUATION_BLOCK = VERTICAL_BAR + "   "
PATH_SEPARATOR = "/"

# GNU tree pads continuation columns with U+00A0 in UTF-8 locales
NO_BREAK_SPACE = "\u00a0"

# -----------------------------------------------------------------------------
# MATERIALIZATION DEFAULTS
# -----------------------------------------------------------------------------
DIRECTORY_MODE = 0o755
