# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the interpreter session lifecycle and record coercion."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyjshint.errors import EvaluationError, MalformedDiagnosticError, ScriptLoadError, SessionStateError
from pyjshint.scripts import ScriptSource, load_driver_script
from pyjshint.session import InterpreterSession, SessionState

_FIXTURES = Path(__file__).resolve().parent / "fixtures"


def _session(linter: str = "fake_jshint.js") -> InterpreterSession:
    return InterpreterSession.initialize(
        ScriptSource.from_path(_FIXTURES / linter),
        load_driver_script(),
    )


def _lint(session: InterpreterSession, name: str, code: str) -> list[object]:
    session.set_current_file(name, code)
    session.reset_error_collection()
    session.evaluate_runner_script()
    return session.read_error_collection()


def test_session_walks_through_states() -> None:
    session = _session()
    assert session.state is SessionState.IDLE
    session.set_options({})
    session.set_current_file("a.js", "var a = 1;\n")
    assert session.state is SessionState.FILE_BOUND
    assert session.current_file == "a.js"
    session.reset_error_collection()
    session.evaluate_runner_script()
    assert session.state is SessionState.EVALUATED
    assert session.read_error_collection() == []
    assert session.state is SessionState.READ


def test_error_collection_is_reset_between_files() -> None:
    session = _session()
    session.set_options({})

    first = _lint(session, "a.js", "debugger;\n")
    second = _lint(session, "b.js", "var b = 2;\n")

    assert len(first) == 1
    assert second == []


def test_options_reach_the_linter_with_platform_flag() -> None:
    session = _session()
    session.set_options({"eqeqeq": True})

    records = _lint(session, "a.js", "if (a == b) {}\n// @platform\n")

    reasons = [record["reason"] for record in records]  # type: ignore[index]
    assert reasons == ["Expected '===' and instead saw '=='.", "Platform flag is set"]


def test_caller_can_override_platform_flag() -> None:
    session = _session()
    session.set_options({"rhino": False})
    assert _lint(session, "a.js", "// @platform\n") == []


def test_options_are_bound_once() -> None:
    session = _session()
    session.set_options({})
    with pytest.raises(SessionStateError):
        session.set_options({"eqeqeq": True})


def test_evaluate_requires_reset_collection() -> None:
    session = _session()
    session.set_options({})
    session.set_current_file("a.js", "debugger;\n")
    with pytest.raises(SessionStateError):
        session.evaluate_runner_script()


def test_evaluate_requires_options() -> None:
    session = _session()
    session.set_current_file("a.js", "var a;\n")
    session.reset_error_collection()
    with pytest.raises(SessionStateError):
        session.evaluate_runner_script()


def test_read_requires_evaluation() -> None:
    session = _session()
    session.set_options({})
    session.set_current_file("a.js", "var a;\n")
    session.reset_error_collection()
    with pytest.raises(SessionStateError):
        session.read_error_collection()


def test_reset_requires_bound_file() -> None:
    with pytest.raises(SessionStateError):
        _session().reset_error_collection()


def test_linter_fault_raises_evaluation_error() -> None:
    session = _session()
    session.set_options({})
    session.set_current_file("a.js", "// @crash\n")
    session.reset_error_collection()
    with pytest.raises(EvaluationError, match="linter crashed"):
        session.evaluate_runner_script()


def test_unparseable_linter_raises_script_load_error() -> None:
    with pytest.raises(ScriptLoadError):
        _session("broken_jshint.js")


def test_linter_without_entry_point_raises_script_load_error() -> None:
    with pytest.raises(ScriptLoadError, match="JSHINT"):
        _session("no_entry_point.js")


def test_unparseable_driver_raises_script_load_error() -> None:
    with pytest.raises(ScriptLoadError):
        InterpreterSession.initialize(
            ScriptSource.from_path(_FIXTURES / "fake_jshint.js"),
            ScriptSource(name="driver.js", text="errors.push(;"),
        )


def test_non_array_collection_raises_evaluation_error() -> None:
    session = InterpreterSession.initialize(
        ScriptSource.from_path(_FIXTURES / "fake_jshint.js"),
        ScriptSource(name="driver.js", text="errors = 'not an array';"),
    )
    session.set_options({})
    with pytest.raises(EvaluationError, match="array"):
        _lint(session, "a.js", "var a;\n")


def test_to_diagnostic_accepts_whole_floats() -> None:
    diag = InterpreterSession.to_diagnostic(
        {"reason": "Missing semicolon.", "evidence": "  var a = 1  ", "line": 2.0, "character": 12, "code": "W033"},
    )
    assert (diag.line, diag.character, diag.evidence) == (2, 12, "var a = 1")


@pytest.mark.parametrize(
    "record",
    [
        None,
        "Missing semicolon.",
        {"evidence": "x", "line": 1, "character": 1},
        {"reason": "r", "line": 1, "character": 1},
        {"reason": "r", "evidence": "x", "character": 1},
        {"reason": "r", "evidence": "x", "line": "1", "character": 1},
        {"reason": "r", "evidence": "x", "line": 1, "character": True},
        {"reason": "r", "evidence": "x", "line": 1.5, "character": 1},
        {"reason": "r", "evidence": None, "line": 1, "character": 1},
        {"reason": "", "evidence": "x", "line": 1, "character": 1},
        {"reason": "r", "evidence": "x", "line": 0, "character": 1},
    ],
)
def test_to_diagnostic_rejects_malformed_records(record: object) -> None:
    with pytest.raises(MalformedDiagnosticError):
        InterpreterSession.to_diagnostic(record)
