# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Allow ``python -m pyjshint`` to behave like the CLI entry point."""

from .cli import app

if __name__ == "__main__":  # pragma: no cover
    app(prog_name="pyjshint")
