# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporter protocol and helpers shared by every output format."""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..models import Report


@runtime_checkable
class Reporter(Protocol):
    """Render a :class:`Report` as formatted text."""

    name: str

    @abstractmethod
    def render(self, report: Report) -> str:
        """Return ``report`` rendered in the reporter's format.

        Args:
            report: Fully populated lint report.

        Returns:
            str: Rendered document.
        """


def write_report(report: Report, reporter: Reporter, path: Path) -> None:
    """Render ``report`` with ``reporter`` and write it to ``path``."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(reporter.render(report), encoding="utf-8")


__all__ = ["Reporter", "write_report"]
