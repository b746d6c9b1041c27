# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyjshint.config import ConfigError, LintConfig, load_config, parse_option


def test_defaults_without_pyproject(tmp_path: Path) -> None:
    cfg = load_config(tmp_path)
    assert cfg == LintConfig()
    assert cfg.output == "plain"
    assert cfg.options == {}


def test_loads_tool_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[tool.pyjshint]
linter-script = "vendor/jshint.js"
output = "xml"

[tool.pyjshint.options]
eqeqeq = true
undef = false
""".strip(),
        encoding="utf-8",
    )

    cfg = load_config(tmp_path)

    assert cfg.linter_script == tmp_path / "vendor" / "jshint.js"
    assert cfg.output == "xml"
    assert cfg.options == {"eqeqeq": True, "undef": False}


def test_pyproject_without_section_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_config(tmp_path) == LintConfig()


def test_non_boolean_option_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.pyjshint.options]\nmaxlen = 80\n",
        encoding="utf-8",
    )
    with pytest.raises(ConfigError, match="maxlen"):
        load_config(tmp_path)


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.pyjshint]\njobs = 4\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="jobs"):
        load_config(tmp_path)


def test_invalid_toml_is_reported(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.pyjshint\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="not valid TOML"):
        load_config(tmp_path)


def test_explicit_config_file_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path, tmp_path / "missing.toml")


def test_merged_overrides_options_key_by_key() -> None:
    cfg = LintConfig(options={"eqeqeq": True, "undef": True})

    merged = cfg.merged({"options": {"undef": False}, "output": "json", "linter_script": None})

    assert merged.options == {"eqeqeq": True, "undef": False}
    assert merged.output == "json"
    assert merged.linter_script is None


def test_merged_rejects_unknown_format() -> None:
    with pytest.raises(ConfigError, match="output"):
        LintConfig().merged({"output": "checkstyle"})


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("eqeqeq", ("eqeqeq", True)),
        ("eqeqeq=true", ("eqeqeq", True)),
        ("eqeqeq=TRUE", ("eqeqeq", True)),
        ("eqeqeq=false", ("eqeqeq", False)),
        ("eqeqeq=yes", ("eqeqeq", False)),
    ],
)
def test_parse_option(raw: str, expected: tuple[str, bool]) -> None:
    assert parse_option(raw) == expected


def test_parse_option_requires_name() -> None:
    with pytest.raises(ConfigError):
        parse_option("=true")
