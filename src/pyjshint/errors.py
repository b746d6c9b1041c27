# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while embedding and driving the linter script."""

from __future__ import annotations


class ScriptNotFoundError(FileNotFoundError):
    """Raised when the linter or driver script source cannot be located."""


class ScriptLoadError(RuntimeError):
    """Raised when the linter or driver script fails to parse or evaluate."""


class EvaluationError(RuntimeError):
    """Raised when the interpreter faults while linting a file or reading results."""


class SourceDecodeError(OSError):
    """Raised when an input file cannot be decoded as UTF-8 source text."""


class MalformedDiagnosticError(ValueError):
    """Raised when a single error record returned by the linter has an unexpected shape."""


class SessionStateError(RuntimeError):
    """Raised when interpreter session operations are invoked out of order."""


__all__ = [
    "EvaluationError",
    "MalformedDiagnosticError",
    "ScriptLoadError",
    "ScriptNotFoundError",
    "SessionStateError",
    "SourceDecodeError",
]
