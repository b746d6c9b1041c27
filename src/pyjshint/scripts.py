# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate and read the linter and driver script sources."""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict

from .errors import ScriptNotFoundError

RESOURCE_PACKAGE: Final[str] = "pyjshint.resources"
LINTER_RESOURCE: Final[str] = "jshint.js"
DRIVER_RESOURCE: Final[str] = "jshint-runner.js"
NODE_MODULES_LINTER: Final[Path] = Path("node_modules") / "jshint" / "dist" / "jshint.js"


class ScriptSource(BaseModel):
    """JavaScript source text paired with the name used in error messages."""

    model_config = ConfigDict(frozen=True)

    name: str
    text: str

    @classmethod
    def from_path(cls, path: Path) -> ScriptSource:
        """Read a script from the filesystem.

        Args:
            path: Location of the script file.

        Returns:
            ScriptSource: Script text named after ``path``.

        Raises:
            ScriptNotFoundError: If ``path`` does not exist.
            OSError: If the file exists but cannot be read.
        """

        if not path.is_file():
            raise ScriptNotFoundError(f"Script source {path} does not exist")
        return cls(name=str(path), text=path.read_text(encoding="utf-8"))

    @classmethod
    def from_resource(cls, resource: str) -> ScriptSource:
        """Read a script bundled inside the package.

        Args:
            resource: File name under :data:`RESOURCE_PACKAGE`.

        Returns:
            ScriptSource: Script text named after ``resource``.

        Raises:
            ScriptNotFoundError: If the distribution does not ship ``resource``.
        """

        candidate = resources.files(RESOURCE_PACKAGE).joinpath(resource)
        if not candidate.is_file():
            raise ScriptNotFoundError(f"Bundled script {resource} is not available")
        return cls(name=f"/{resource}", text=candidate.read_text(encoding="utf-8"))


def load_driver_script() -> ScriptSource:
    """Return the bundled driver that wires globals into the linter entry point."""

    return ScriptSource.from_resource(DRIVER_RESOURCE)


def find_project_linter(start: Path | None = None) -> Path | None:
    """Return a project-installed ``jshint.js`` found walking up from ``start``.

    Args:
        start: Directory to begin the search from; defaults to the working directory.

    Returns:
        Path | None: Location of ``node_modules/jshint/dist/jshint.js`` when present.
    """

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / NODE_MODULES_LINTER
        if candidate.is_file():
            return candidate
    return None


def load_linter_script(path: Path | str | None = None, *, search_root: Path | None = None) -> ScriptSource:
    """Return the linter script source.

    A caller supplied ``path`` always wins and must exist. Otherwise the
    bundled resource is used when the distribution ships one, followed by a
    project ``node_modules`` installation.

    Args:
        path: Optional custom linter script location.
        search_root: Directory used to look for a project installation.

    Returns:
        ScriptSource: Linter script text.

    Raises:
        ScriptNotFoundError: If no linter script can be located.
    """

    if path is not None:
        return ScriptSource.from_path(Path(path).expanduser())
    try:
        return ScriptSource.from_resource(LINTER_RESOURCE)
    except ScriptNotFoundError:
        project_linter = find_project_linter(search_root)
        if project_linter is None:
            raise ScriptNotFoundError(
                "No JSHint source found: pass a linter script path or install the "
                "'jshint' npm package into the project",
            ) from None
        return ScriptSource.from_path(project_linter)


__all__ = [
    "DRIVER_RESOURCE",
    "LINTER_RESOURCE",
    "ScriptSource",
    "find_project_linter",
    "load_driver_script",
    "load_linter_script",
]
