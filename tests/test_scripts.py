# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for locating the linter and driver scripts."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyjshint import scripts
from pyjshint.errors import ScriptNotFoundError
from pyjshint.scripts import ScriptSource, find_project_linter, load_driver_script, load_linter_script


def _install_project_linter(root: Path) -> Path:
    linter = root / "node_modules" / "jshint" / "dist" / "jshint.js"
    linter.parent.mkdir(parents=True)
    linter.write_text("var JSHINT = function () { return true; };\n", encoding="utf-8")
    return linter


def test_driver_script_is_bundled() -> None:
    driver = load_driver_script()
    assert driver.name == "/jshint-runner.js"
    assert "JSHINT(currentCode, jsHintOpts)" in driver.text


def test_custom_linter_path_wins(tmp_path: Path, fake_linter: Path) -> None:
    _install_project_linter(tmp_path)
    source = load_linter_script(fake_linter, search_root=tmp_path)
    assert source.name == str(fake_linter)
    assert "@malformed" in source.text


def test_missing_custom_linter_raises(tmp_path: Path) -> None:
    with pytest.raises(ScriptNotFoundError):
        load_linter_script(tmp_path / "missing.js")


def test_missing_custom_linter_is_an_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        ScriptSource.from_path(tmp_path / "missing.js")


def test_project_linter_found_from_nested_directory(tmp_path: Path) -> None:
    linter = _install_project_linter(tmp_path)
    nested = tmp_path / "src" / "app"
    nested.mkdir(parents=True)
    assert find_project_linter(nested) == linter.resolve()


def test_falls_back_to_project_linter(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(scripts, "LINTER_RESOURCE", "not-shipped.js")
    linter = _install_project_linter(tmp_path)

    source = load_linter_script(search_root=tmp_path)

    assert source.name == str(linter.resolve())


def test_no_linter_anywhere_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(scripts, "LINTER_RESOURCE", "not-shipped.js")
    with pytest.raises(ScriptNotFoundError, match="jshint"):
        load_linter_script(search_root=tmp_path)
