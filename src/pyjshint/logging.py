# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from rich.text import Text

from .console import detect_tty, get_console_manager

LOG_PREFIX = "[jshint] "


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
    stderr: bool = False,
) -> None:
    color_enabled = detect_tty(stderr=stderr) if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=stderr)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None, stderr: bool = False) -> None:
    """Emit an informational message."""

    _print_line(
        f"{emoji('ℹ️ ', use_emoji)}{msg}",
        style="cyan",
        use_emoji=use_emoji,
        use_color=use_color,
        stderr=stderr,
    )


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None, stderr: bool = False) -> None:
    """Emit a success message."""

    _print_line(
        f"{emoji('✅ ', use_emoji)}{msg}",
        style="green",
        use_emoji=use_emoji,
        use_color=use_color,
        stderr=stderr,
    )


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message to standard error."""

    _print_line(
        f"{emoji('⚠️ ', use_emoji)}{msg}",
        style="yellow",
        use_emoji=use_emoji,
        use_color=use_color,
        stderr=True,
    )


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message to standard error."""

    _print_line(
        f"{emoji('❌ ', use_emoji)}{msg}",
        style="red",
        use_emoji=use_emoji,
        use_color=use_color,
        stderr=True,
    )


@runtime_checkable
class LintLogger(Protocol):
    """Protocol describing the progress sink injected into the runner."""

    @abstractmethod
    def log(self, message: str) -> None:
        """Record an informational progress ``message``.

        Args:
            message: Text describing lint progress or an individual issue.
        """

    @abstractmethod
    def error(self, message: str) -> None:
        """Record a problem the run recovered from.

        Args:
            message: Text describing the problem.
        """


@dataclass(slots=True)
class ConsoleLintLogger:
    """Adapter around the console helpers honouring CLI presentation flags."""

    use_emoji: bool = True
    use_color: bool | None = None
    verbose: bool = False

    def log(self, message: str) -> None:
        """Print ``message`` to standard error when verbose output is enabled.

        Args:
            message: Text describing lint progress.
        """

        if self.verbose:
            info(f"{LOG_PREFIX}{message}", use_emoji=False, use_color=self.use_color, stderr=True)

    def error(self, message: str) -> None:
        """Print ``message`` to standard error.

        Args:
            message: Text describing the problem.
        """

        warn(f"{LOG_PREFIX}{message}", use_emoji=self.use_emoji, use_color=self.use_color)


__all__ = [
    "ConsoleLintLogger",
    "LintLogger",
    "emoji",
    "fail",
    "info",
    "ok",
    "warn",
]
