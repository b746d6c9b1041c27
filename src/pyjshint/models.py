# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models describing lint diagnostics and run reports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Diagnostic(BaseModel):
    """Single issue reported by the linter script for one file."""

    model_config = ConfigDict(frozen=True)

    reason: str = Field(min_length=1)
    evidence: str
    line: int = Field(ge=1)
    character: int = Field(ge=1)

    @field_validator("evidence")
    @classmethod
    def _trim_evidence(cls, value: str) -> str:
        """Strip the whitespace surrounding the implicated source line."""
        return value.strip()


class FileResult(BaseModel):
    """Diagnostics produced for a single input file."""

    model_config = ConfigDict(frozen=True)

    file: str
    diagnostics: tuple[Diagnostic, ...] = Field(default_factory=tuple)

    @property
    def has_errors(self) -> bool:
        """Return ``True`` when the linter reported at least one diagnostic."""
        return bool(self.diagnostics)

    @classmethod
    def from_diagnostics(cls, file: str, diagnostics: Iterable[Diagnostic]) -> FileResult:
        """Build a result from diagnostics collected in linter order.

        Args:
            file: Display identity of the linted file.
            diagnostics: Diagnostics in the order the linter produced them.

        Returns:
            FileResult: Immutable result bundling ``file`` and ``diagnostics``.
        """

        return cls(file=file, diagnostics=tuple(diagnostics))


class Report(BaseModel):
    """Aggregate result for a full lint run."""

    expected_file_count: int = Field(ge=0)
    results: list[FileResult] = Field(default_factory=list)

    def add_result(self, result: FileResult) -> None:
        """Append ``result`` preserving input order.

        Args:
            result: File result produced for the next processed file.

        Raises:
            ValueError: If the report already holds ``expected_file_count`` results.
        """

        if len(self.results) >= self.expected_file_count:
            raise ValueError(
                f"Report expects {self.expected_file_count} file(s); refusing to add {result.file}",
            )
        self.results.append(result)

    @property
    def file_count(self) -> int:
        """Return the number of files processed so far."""
        return len(self.results)

    @property
    def total_error_count(self) -> int:
        """Return the number of diagnostics across every processed file."""
        return sum(len(result.diagnostics) for result in self.results)

    @property
    def failed_results(self) -> Sequence[FileResult]:
        """Return the results that carry at least one diagnostic."""
        return [result for result in self.results if result.has_errors]


__all__ = ["Diagnostic", "FileResult", "Report"]
