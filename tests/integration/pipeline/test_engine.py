from __future__ import annotations

"""
Integration tests for the Pipeline Engine.

Runs the full parse → render → materialize flow against a temporary
destination and checks the PipelineResult contract for success, dry-run
and each failure mode.
"""

import logging
import os
from pathlib import Path

from treeforge.core.pipeline.engine import run_pipeline


def test_pipeline_creates_structure(tmp_path: Path, mock_config_dict, sample_diagram: str) -> None:
    result = run_pipeline(mock_config_dict, sample_diagram)

    assert result.ok is True, result.error
    assert result.root_name == "project"
    assert result.root_path == os.path.join(str(tmp_path), "project")
    assert result.directories == 3
    assert result.files == 4
    assert len(result.created_paths) == 7
    assert result.tree_lines == sample_diagram.splitlines()
    assert result.summary["entries"] == 7
    assert (tmp_path / "project" / "src" / "utils" / "date.ts").is_file()


def test_pipeline_dry_run(tmp_path: Path, mock_config_dict, sample_diagram: str) -> None:
    result = run_pipeline(mock_config_dict, sample_diagram, dry_run=True)

    assert result.ok is True
    assert result.dry_run is True
    assert result.summary["dry_run"] is True
    assert not (tmp_path / "project").exists()


def test_pipeline_reports_parse_errors(mock_config_dict) -> None:
    result = run_pipeline(mock_config_dict, "")

    assert result.ok is False
    assert result.error.startswith("Invalid diagram")
    assert result.created_paths == []


def test_pipeline_strict_nesting(mock_config_dict) -> None:
    diagram = "root/\n├── a.txt\n│   │   └── orphan.txt"

    lenient = run_pipeline(mock_config_dict, diagram, dry_run=True)
    assert lenient.ok is True
    assert len(lenient.warnings) == 1

    mock_config_dict["strict_nesting"] = True
    strict = run_pipeline(mock_config_dict, diagram, dry_run=True)
    assert strict.ok is False
    assert strict.strict_nesting is True
    assert "Line 3" in strict.error


def test_pipeline_reports_materialization_failure(tmp_path: Path, mock_config_dict, sample_diagram: str) -> None:
    (tmp_path / "project").write_text("not a directory", encoding="utf-8")

    result = run_pipeline(mock_config_dict, sample_diagram)

    assert result.ok is False
    assert result.root_name == "project"
    assert result.failed_path == os.path.join(str(tmp_path), "project")
    assert result.summary["failed_action"] == "directory"


def test_pipeline_logs_preview(caplog, mock_config_dict, sample_diagram: str) -> None:
    mock_config_dict["print_tree"] = True

    with caplog.at_level(logging.INFO, logger="treeforge"):
        run_pipeline(mock_config_dict, sample_diagram, dry_run=True)

    assert "Tree Preview" in caplog.text
    assert "│       └── date.ts" in caplog.text


def test_pipeline_accepts_missing_config(tmp_path: Path, monkeypatch, sample_diagram: str) -> None:
    monkeypatch.chdir(tmp_path)

    result = run_pipeline(None, sample_diagram)

    assert result.ok is True
    assert (tmp_path / "project" / "README.md").is_file()


def test_pipeline_rejects_null_byte_names(tmp_path: Path, mock_config_dict) -> None:
    result = run_pipeline(mock_config_dict, "root/\n└── a\x00b.txt")

    assert result.ok is False
    assert result.summary["failed_action"] == "name"
    assert result.failed_path == os.path.join(str(tmp_path), "root", "a\x00b.txt")


def test_pipeline_handles_deep_nesting(mock_config_dict) -> None:
    lines = ["root/"] + ["    " * d + f"└── d{d}/" for d in range(1200)]
    mock_config_dict["print_tree"] = True

    result = run_pipeline(mock_config_dict, "\n".join(lines), dry_run=True)

    assert result.ok is True, result.error
    assert result.directories == 1201
    assert result.tree_lines == lines
