# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Script engine capability backed by an embedded V8 interpreter.

Values cross the interpreter boundary as JSON. Bindings are encoded with
:func:`json.dumps` (a JSON document is a valid JavaScript expression) and
globals are read back through ``JSON.stringify`` so callers only ever see
plain Python values: ``dict``, ``list``, ``str``, ``int``/``float``,
``bool`` and ``None``.
"""

from __future__ import annotations

import json
from abc import abstractmethod
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from py_mini_racer import MiniRacer
from py_mini_racer._exc import MiniRacerBaseException

from .errors import EvaluationError

JsonValue = object


@runtime_checkable
class ScriptEngine(Protocol):
    """Protocol describing the narrow interpreter surface used by sessions."""

    @abstractmethod
    def load_script(self, name: str, source: str) -> None:
        """Evaluate ``source`` into the engine's global scope.

        Args:
            name: Display name of the script used in error messages.
            source: JavaScript source text.
        """

    @abstractmethod
    def bind_global(self, name: str, value: JsonValue) -> None:
        """Bind ``value`` under the global ``name``, replacing any previous binding.

        Args:
            name: Global identifier to assign.
            value: JSON-compatible Python value.
        """

    @abstractmethod
    def evaluate(self, source: str) -> JsonValue:
        """Evaluate ``source`` and return its primitive completion value.

        Args:
            source: JavaScript source text.

        Returns:
            JsonValue: Completion value of the script.
        """

    @abstractmethod
    def read_global(self, name: str) -> JsonValue:
        """Return the JSON-decoded value bound under the global ``name``.

        Args:
            name: Global identifier to read.

        Returns:
            JsonValue: Decoded value, or ``None`` when the binding is undefined.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the interpreter; the engine must not be used afterwards."""


EngineFactory = Callable[[], ScriptEngine]


class MiniRacerEngine(ScriptEngine):
    """Run scripts inside a dedicated :class:`py_mini_racer.MiniRacer` context."""

    def __init__(self, context: MiniRacer | None = None) -> None:
        self._ctx = context if context is not None else MiniRacer()

    def load_script(self, name: str, source: str) -> None:
        self._run(source, label=name)

    def bind_global(self, name: str, value: JsonValue) -> None:
        try:
            literal = json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise EvaluationError(f"Cannot marshal value for global '{name}': {exc}") from exc
        self._run(f"globalThis[{json.dumps(name)}] = {literal};", label=f"bind {name}")

    def evaluate(self, source: str) -> JsonValue:
        return self._run(source, label="<eval>")

    def read_global(self, name: str) -> JsonValue:
        payload = self._run(f"JSON.stringify(globalThis[{json.dumps(name)}])", label=f"read {name}")
        if not isinstance(payload, str):
            return None
        try:
            return json.loads(payload)
        except json.JSONDecodeError as exc:
            raise EvaluationError(f"Global '{name}' did not serialise to JSON: {exc}") from exc

    def close(self) -> None:
        self._ctx.close()

    def _run(self, source: str, *, label: str) -> JsonValue:
        try:
            return self._ctx.eval(source)
        except MiniRacerBaseException as exc:
            raise EvaluationError(f"{label}: {exc}") from exc


def default_engine_factory() -> ScriptEngine:
    """Return a fresh, isolated :class:`MiniRacerEngine`."""

    return MiniRacerEngine()


__all__ = [
    "EngineFactory",
    "JsonValue",
    "MiniRacerEngine",
    "ScriptEngine",
    "default_engine_factory",
]
