# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plain text reporter and the message helpers shared with the runner."""

from __future__ import annotations

from ..models import Diagnostic, Report


def issue_message(diagnostic: Diagnostic) -> str:
    """Return the one-line description of ``diagnostic``."""

    return (
        f"{diagnostic.reason} (evidence: {diagnostic.evidence}) "
        f"at line {diagnostic.line}, character {diagnostic.character}"
    )


def file_failure_message(file: str) -> str:
    """Return the line announcing that ``file`` has issues."""

    return f"Errors in {file}"


def success_message(num_files: int) -> str:
    """Return the summary line for a run without diagnostics."""

    return f"Lint Free! {num_files} file(s) checked"


def failure_message(total_errors: int) -> str:
    """Return the summary line for a run with diagnostics."""

    return f"JSHint found {total_errors} error(s)"


def summary_message(report: Report) -> str:
    """Return the success or failure summary matching ``report``."""

    if report.total_error_count:
        return failure_message(report.total_error_count)
    return success_message(report.file_count)


class PlainReporter:
    """Render one line per diagnostic followed by a summary line."""

    name = "plain"

    def render(self, report: Report) -> str:
        lines: list[str] = []
        for result in report.failed_results:
            lines.append(file_failure_message(result.file))
            lines.extend(issue_message(diagnostic) for diagnostic in result.diagnostics)
        lines.append(summary_message(report))
        return "\n".join(lines)


__all__ = [
    "PlainReporter",
    "failure_message",
    "file_failure_message",
    "issue_message",
    "success_message",
    "summary_message",
]
