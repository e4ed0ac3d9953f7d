from __future__ import annotations

"""
Unit tests for the Internationalization (i18n) helper.

Ensures the bundled locale loads and dot-notation resolution,
interpolation and fallbacks behave as expected.
"""

import json
from pathlib import Path

from treeforge.utils.i18n import I18n, i18n


def test_bundled_locale_is_loaded() -> None:
    assert i18n.is_loaded is True
    assert i18n.t("cli.status.dry_run").startswith("SIMULATION COMPLETE")


def test_i18n_resolution_logic(tmp_path: Path) -> None:
    dummy_content = {
        "test": {
            "hello": "Hello {name}!",
            "simple": "Simple Text",
        }
    }
    (tmp_path / "test_locale.json").write_text(json.dumps(dummy_content), encoding="utf-8")

    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("test_locale")

    assert service.t("test.simple") == "Simple Text"
    assert service.t("test.hello", name="World") == "Hello World!"
    assert service.t("missing.key") == "missing.key"
    assert service.t("missing.key", default="Fallback") == "Fallback"
    assert service.t("test.simple.deeper") == "test.simple.deeper"


def test_missing_locale_falls_back_to_keys(tmp_path: Path) -> None:
    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("xx")

    assert service.is_loaded is False
    assert service.t("cli.status.success") == "cli.status.success"


def test_bad_placeholders_return_raw_text(tmp_path: Path) -> None:
    (tmp_path / "t.json").write_text(json.dumps({"msg": "Path {path}"}), encoding="utf-8")

    service = I18n("en")
    service._locales_path = str(tmp_path)
    service.load_locale("t")

    assert service.t("msg", other="x") == "Path {path}"
