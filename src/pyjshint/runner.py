# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High level orchestration for linting files with the embedded JSHint script."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

from .engine import EngineFactory, default_engine_factory
from .errors import MalformedDiagnosticError, SourceDecodeError
from .logging import LintLogger
from .models import Diagnostic, FileResult, Report
from .reporting.plain import file_failure_message, issue_message
from .scripts import load_driver_script, load_linter_script
from .session import InterpreterSession


class JSHintRunner:
    """Lint files sequentially through one interpreter session per run."""

    def __init__(
        self,
        linter_script: Path | str | None = None,
        *,
        logger: LintLogger | None = None,
        engine_factory: EngineFactory = default_engine_factory,
    ) -> None:
        """Create a runner.

        Args:
            linter_script: Custom JSHint source file. When ``None`` the bundled
                or project-installed copy is used.
            logger: Optional sink for progress and recoverable problems. When
                omitted the runner is silent.
            engine_factory: Factory returning a fresh script engine per run.
        """

        self._linter_script = linter_script
        self._logger = logger
        self._engine_factory = engine_factory

    def lint(self, files: Sequence[str | Path], options: Mapping[str, bool] | None = None) -> Report:
        """Run JSHint over ``files`` in order.

        Args:
            files: Paths to lint; existence is checked by the caller.
            options: JSHint option names mapped to boolean values.

        Returns:
            Report: One :class:`FileResult` per input file, in input order.

        Raises:
            ScriptNotFoundError: If the linter or driver script cannot be located.
            ScriptLoadError: If a script fails to parse or evaluate.
            EvaluationError: If the interpreter faults while linting a file.
            OSError: If an input file cannot be read; undecodable files raise
                :class:`SourceDecodeError`.
        """

        report = Report(expected_file_count=len(files))
        with InterpreterSession.initialize(
            load_linter_script(self._linter_script),
            load_driver_script(),
            engine_factory=self._engine_factory,
        ) as session:
            session.set_options(options or {})
            for file in files:
                name = str(file)
                session.set_current_file(name, _read_source(Path(file)))
                session.reset_error_collection()
                session.evaluate_runner_script()
                report.add_result(FileResult.from_diagnostics(name, self._collect(session, name)))

        return report

    def _collect(self, session: InterpreterSession, name: str) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, record in enumerate(session.read_error_collection()):
            try:
                diagnostics.append(session.to_diagnostic(record))
            except MalformedDiagnosticError as exc:
                self._error(f"Skipping malformed error #{index + 1} reported for {name}: {exc}")
        if diagnostics:
            self._log(file_failure_message(name))
            for diagnostic in diagnostics:
                self._log(issue_message(diagnostic))
        return diagnostics

    def _log(self, message: str) -> None:
        if self._logger is not None:
            self._logger.log(message)

    def _error(self, message: str) -> None:
        if self._logger is not None:
            self._logger.error(message)


def _read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SourceDecodeError(
            f"Cannot read {path}: not valid UTF-8 ({exc.reason} at byte {exc.start})",
        ) from exc


def lint(
    files: Sequence[str | Path],
    options: Mapping[str, bool] | None = None,
    *,
    linter_script: Path | str | None = None,
    logger: LintLogger | None = None,
) -> Report:
    """Lint ``files`` with a one-off :class:`JSHintRunner`."""

    return JSHintRunner(linter_script, logger=logger).lint(files, options)


__all__ = ["JSHintRunner", "lint"]
