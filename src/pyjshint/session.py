# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interpreter session hosting the linter script across a lint run.

A session loads the linter script once and then lints files one at a time
against the same global scope. Only the mutable bindings change between
files, in a fixed order enforced by :class:`SessionState`::

    IDLE -> FILE_BOUND -> EVALUATED -> READ -> FILE_BOUND -> ...

Every value read back from the interpreter is coerced here so dynamic types
never leak into the runner or the data model.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from types import TracebackType
from typing import Final

from pydantic import ValidationError

from .engine import EngineFactory, JsonValue, ScriptEngine, default_engine_factory
from .errors import EvaluationError, MalformedDiagnosticError, ScriptLoadError, SessionStateError
from .models import Diagnostic
from .scripts import ScriptSource

CURRENT_FILE_GLOBAL: Final[str] = "currentFile"
CURRENT_CODE_GLOBAL: Final[str] = "currentCode"
OPTIONS_GLOBAL: Final[str] = "jsHintOpts"
ERRORS_GLOBAL: Final[str] = "errors"
LINTER_ENTRY_POINT: Final[str] = "JSHINT"
DRIVER_GLOBAL: Final[str] = "__pyjshintDriver"

# JSHint is told which environment globals the linted code may assume.
PLATFORM_OPTION: Final[str] = "rhino"


class SessionState(str, Enum):
    """Lifecycle of the per-file bindings held by a session."""

    IDLE = "idle"
    FILE_BOUND = "file_bound"
    EVALUATED = "evaluated"
    READ = "read"


class InterpreterSession:
    """Own one embedded interpreter scope with the linter script loaded."""

    def __init__(self, engine: ScriptEngine) -> None:
        """Wrap an engine that already holds the linter and compiled driver.

        Use :meth:`initialize` to build a session from script sources.

        Args:
            engine: Script engine exclusively owned by this session.
        """

        self._engine = engine
        self._state = SessionState.IDLE
        self._options_bound = False
        self._errors_reset = False
        self._current_file: str | None = None

    @classmethod
    def initialize(
        cls,
        linter: ScriptSource,
        driver: ScriptSource,
        *,
        engine_factory: EngineFactory = default_engine_factory,
    ) -> InterpreterSession:
        """Create a session with the linter loaded and the driver compiled.

        Args:
            linter: Linter script exposing the ``JSHINT`` entry point.
            driver: Driver script run once per file.
            engine_factory: Factory returning a fresh, isolated engine.

        Returns:
            InterpreterSession: Session in the ``IDLE`` state.

        Raises:
            ScriptLoadError: If either script fails to parse or evaluate, or the
                linter does not define its entry point.
        """

        engine = engine_factory()
        try:
            engine.load_script(linter.name, linter.text)
            entry_type = engine.evaluate(f"typeof {LINTER_ENTRY_POINT}")
            if entry_type != "function":
                raise ScriptLoadError(f"{linter.name} does not define a {LINTER_ENTRY_POINT} function")
            engine.load_script(driver.name, f"globalThis.{DRIVER_GLOBAL} = function () {{\n{driver.text}\n}};")
            engine.bind_global(CURRENT_FILE_GLOBAL, "")
            engine.bind_global(CURRENT_CODE_GLOBAL, "")
        except EvaluationError as exc:
            engine.close()
            raise ScriptLoadError(f"Failed to load script: {exc}") from exc
        except BaseException:
            engine.close()
            raise
        return cls(engine)

    def close(self) -> None:
        """Release the interpreter owned by this session."""
        self._engine.close()

    def __enter__(self) -> InterpreterSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def state(self) -> SessionState:
        """Return the current lifecycle state."""
        return self._state

    @property
    def current_file(self) -> str | None:
        """Return the file most recently bound with :meth:`set_current_file`."""
        return self._current_file

    def set_options(self, options: Mapping[str, bool]) -> None:
        """Bind the linter options object for the rest of the session.

        The platform flag is injected first so an explicit caller value wins.

        Args:
            options: Option names mapped to boolean values, forwarded opaquely.

        Raises:
            SessionStateError: If options were already bound.
        """

        if self._options_bound:
            raise SessionStateError("Linter options are bound once per session")
        payload: dict[str, bool] = {PLATFORM_OPTION: True}
        for name, value in options.items():
            payload[str(name)] = bool(value)
        self._engine.bind_global(OPTIONS_GLOBAL, payload)
        self._options_bound = True

    def set_current_file(self, name: str, content: str) -> None:
        """Bind the file identity and source text the driver lints next.

        Args:
            name: File identity exposed as ``currentFile``.
            content: Source text exposed as ``currentCode``.
        """

        self._engine.bind_global(CURRENT_FILE_GLOBAL, name)
        self._engine.bind_global(CURRENT_CODE_GLOBAL, content)
        self._current_file = name
        self._errors_reset = False
        self._state = SessionState.FILE_BOUND

    def reset_error_collection(self) -> None:
        """Rebind an empty error collection for the currently bound file.

        Raises:
            SessionStateError: If no file is bound for this cycle.
        """

        if self._state is not SessionState.FILE_BOUND:
            raise SessionStateError("Bind a file before resetting the error collection")
        self._engine.bind_global(ERRORS_GLOBAL, [])
        self._errors_reset = True

    def evaluate_runner_script(self) -> None:
        """Run the driver script against the bound file, code and options.

        Raises:
            SessionStateError: If options, file or error collection are not ready.
            EvaluationError: If the interpreter faults while linting.
        """

        if not self._options_bound:
            raise SessionStateError("Bind linter options before evaluating")
        if self._state is not SessionState.FILE_BOUND or not self._errors_reset:
            raise SessionStateError("Bind a file and reset the error collection before evaluating")
        self._engine.evaluate(f"{DRIVER_GLOBAL}();")
        self._state = SessionState.EVALUATED

    def read_error_collection(self) -> list[JsonValue]:
        """Return the error records collected for the current file.

        Returns:
            list[JsonValue]: Decoded records in linter order; shapes are unchecked.

        Raises:
            SessionStateError: If the driver has not run for the current file.
            EvaluationError: If the collection is no longer an array.
        """

        if self._state not in (SessionState.EVALUATED, SessionState.READ):
            raise SessionStateError("Evaluate the driver before reading errors")
        records = self._engine.read_global(ERRORS_GLOBAL)
        if not isinstance(records, list):
            raise EvaluationError(
                f"Expected '{ERRORS_GLOBAL}' to be an array, got {_describe(records)}",
            )
        self._state = SessionState.READ
        return records

    @staticmethod
    def to_diagnostic(record: JsonValue) -> Diagnostic:
        """Convert one dynamic error record into a :class:`Diagnostic`.

        Args:
            record: Decoded error record read from the interpreter.

        Returns:
            Diagnostic: Validated diagnostic.

        Raises:
            MalformedDiagnosticError: If a field is missing, mistyped or out of range.
        """

        if not isinstance(record, Mapping):
            raise MalformedDiagnosticError(f"Expected an error object, got {_describe(record)}")
        reason = _string_field(record, "reason")
        evidence = _string_field(record, "evidence")
        line = _integer_field(record, "line")
        character = _integer_field(record, "character")
        try:
            return Diagnostic(reason=reason, evidence=evidence, line=line, character=character)
        except ValidationError as exc:
            raise MalformedDiagnosticError(f"Invalid error record: {exc.errors()[0]['msg']}") from exc


def _string_field(record: Mapping[str, JsonValue], key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise MalformedDiagnosticError(f"Field '{key}' must be a string, got {_describe(value)}")
    return value


def _integer_field(record: Mapping[str, JsonValue], key: str) -> int:
    value = record.get(key)
    # bool is an int subclass but never a valid position
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedDiagnosticError(f"Field '{key}' must be a number, got {_describe(value)}")
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise MalformedDiagnosticError(f"Field '{key}' must be a whole number, got {value!r}")
        return int(value)
    return value


def _describe(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


__all__ = [
    "CURRENT_CODE_GLOBAL",
    "CURRENT_FILE_GLOBAL",
    "ERRORS_GLOBAL",
    "OPTIONS_GLOBAL",
    "PLATFORM_OPTION",
    "InterpreterSession",
    "SessionState",
]
