# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render lint reports as plain text, XML or JSON."""

from __future__ import annotations

from typing import Final

from .base import Reporter, write_report
from .plain import PlainReporter
from .structured import JsonReporter, XmlReporter

REPORTERS: Final[dict[str, type[Reporter]]] = {
    PlainReporter.name: PlainReporter,
    XmlReporter.name: XmlReporter,
    JsonReporter.name: JsonReporter,
}


def get_reporter(name: str) -> Reporter:
    """Return a reporter instance for the output format ``name``.

    Args:
        name: Output format identifier (``plain``, ``xml`` or ``json``).

    Returns:
        Reporter: Reporter rendering the requested format.

    Raises:
        ValueError: If ``name`` is not a known output format.
    """

    try:
        reporter_cls = REPORTERS[name]
    except KeyError:
        known = ", ".join(sorted(REPORTERS))
        raise ValueError(f"Unknown report format '{name}' (expected one of: {known})") from None
    return reporter_cls()


__all__ = [
    "REPORTERS",
    "JsonReporter",
    "PlainReporter",
    "Reporter",
    "XmlReporter",
    "get_reporter",
    "write_report",
]
