from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared diagram fixtures used across unit and integration tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_DIAGRAM = """project/
├── README.md
├── src/
│   ├── index.ts
│   └── utils/
│       └── date.ts
└── .gitignore"""


@pytest.fixture
def sample_diagram() -> str:
    """
    Return the reference project diagram.

    Structure: 7 entries, 3 directories (project, src, utils) and
    4 files (README.md, index.ts, date.ts, .gitignore).
    """
    return SAMPLE_DIAGRAM


@pytest.fixture
def mock_config_dict(tmp_path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'treeforge.domain.config', with the
    destination pointing at the test's temporary directory.
    """
    return {
        "output_base_dir": str(tmp_path),
        "strict_nesting": False,
        "print_tree": False,
        "save_log": False,
        "log_level": "INFO",
    }
