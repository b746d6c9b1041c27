# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run JSHint through an embedded JavaScript interpreter."""

from __future__ import annotations

from importlib import metadata

from .errors import (
    EvaluationError,
    MalformedDiagnosticError,
    ScriptLoadError,
    ScriptNotFoundError,
    SessionStateError,
    SourceDecodeError,
)
from .models import Diagnostic, FileResult, Report
from .runner import JSHintRunner, lint
from .session import InterpreterSession

__all__ = [
    "Diagnostic",
    "EvaluationError",
    "FileResult",
    "InterpreterSession",
    "JSHintRunner",
    "MalformedDiagnosticError",
    "Report",
    "ScriptLoadError",
    "ScriptNotFoundError",
    "SessionStateError",
    "SourceDecodeError",
    "__version__",
    "lint",
]

try:
    __version__ = metadata.version("pyjshint")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
