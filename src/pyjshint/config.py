# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loaders for pyjshint."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "pyjshint"

OutputFormatLiteral = Literal["plain", "xml", "json"]


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LintConfig(BaseModel):
    """Settings controlling a lint run."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    linter_script: Path | None = None
    options: dict[str, StrictBool] = Field(default_factory=dict)
    output: OutputFormatLiteral = "plain"
    output_path: Path | None = None

    def merged(self, overrides: Mapping[str, Any]) -> LintConfig:
        """Return a copy with ``overrides`` applied; option maps are merged key by key.

        Args:
            overrides: Field values to apply. ``None`` values are ignored.

        Returns:
            LintConfig: Updated configuration.

        Raises:
            ConfigError: If an override fails validation.
        """

        data = self.model_dump()
        for key, value in overrides.items():
            if value is None:
                continue
            if key == "options":
                data["options"] = {**data["options"], **value}
            else:
                data[key] = value
        return _validate(data, source="overrides")


def _validate(data: Mapping[str, Any], *, source: str) -> LintConfig:
    try:
        return LintConfig.model_validate(data)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration in {source}: {details}") from exc


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Configuration at {path} is not valid TOML: {exc}") from exc


def load_config(root: Path | None = None, path: Path | None = None) -> LintConfig:
    """Load settings from ``[tool.pyjshint]`` in a TOML document.

    An explicit ``path`` must exist. Otherwise ``pyproject.toml`` under
    ``root`` (default: the working directory) is consulted when present.
    A relative ``linter_script`` resolves against the document's directory.

    Args:
        root: Project directory searched for ``pyproject.toml``.
        path: Explicit TOML document to read.

    Returns:
        LintConfig: Loaded configuration, or defaults when no document applies.

    Raises:
        ConfigError: If the document is missing, malformed or invalid.
    """

    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Configuration file {path} does not exist")
        document = path
    else:
        document = (root or Path.cwd()) / PYPROJECT_FILENAME
        if not document.is_file():
            return LintConfig()

    data = _read_toml(document)
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return LintConfig()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return LintConfig()
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {document} must be a table")

    payload = {key.replace("-", "_"): value for key, value in section.items()}
    script = payload.get("linter_script")
    if isinstance(script, str):
        candidate = Path(script).expanduser()
        payload["linter_script"] = candidate if candidate.is_absolute() else document.parent / candidate
    return _validate(payload, source=str(document))


def parse_option(raw: str) -> tuple[str, bool]:
    """Parse a ``NAME`` or ``NAME=VALUE`` command-line option.

    Only a case-insensitive ``true`` enables an option given with a value;
    a bare ``NAME`` enables it.

    Args:
        raw: Option token supplied on the command line.

    Returns:
        tuple[str, bool]: Option name and value.

    Raises:
        ConfigError: If the option name is empty.
    """

    name, separator, value = raw.partition("=")
    name = name.strip()
    if not name:
        raise ConfigError(f"Invalid option '{raw}': expected NAME or NAME=true|false")
    if not separator:
        return name, True
    return name, value.strip().lower() == "true"


__all__ = [
    "ConfigError",
    "LintConfig",
    "OutputFormatLiteral",
    "load_config",
    "parse_option",
]
