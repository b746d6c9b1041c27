# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry point for running JSHint over JavaScript files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import typer

from .config import ConfigError, LintConfig, load_config, parse_option
from .errors import EvaluationError, ScriptLoadError
from .logging import ConsoleLintLogger, fail, info, ok
from .models import Report
from .reporting import get_reporter, write_report
from .reporting.plain import summary_message
from .runner import JSHintRunner

app = typer.Typer(
    help="Run JSHint through an embedded JavaScript interpreter.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main() -> None:
    """Run JSHint through an embedded JavaScript interpreter."""


@app.command("lint")
def lint_command(
    files: list[Path] = typer.Argument(..., metavar="FILES...", help="JavaScript files to lint."),
    output: str | None = typer.Option(None, "--format", "-f", help="Report format: plain, xml or json."),
    output_path: Path | None = typer.Option(None, "--out", "-o", help="Write the report to this file."),
    linter_script: Path | None = typer.Option(None, "--linter-script", help="Custom jshint.js source."),
    option: list[str] | None = typer.Option(
        None,
        "--option",
        "-O",
        help="JSHint option as NAME or NAME=true|false (repeatable).",
    ),
    config_path: Path | None = typer.Option(None, "--config", help="TOML file holding a [tool.pyjshint] table."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every issue while linting."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji in status messages."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured status messages."),
) -> None:
    """Lint FILES and print the report; exits 1 when JSHint reports errors."""
    use_emoji = not no_emoji
    logger = ConsoleLintLogger(use_emoji=use_emoji, use_color=False if no_color else None, verbose=verbose)
    cfg = _build_config(option or [], linter_script, output, output_path, config_path)

    targets = _resolve_targets(files, logger)
    info(f"Running JSHint on {len(targets)} file(s)", use_emoji=use_emoji, use_color=logger.use_color, stderr=True)

    runner = JSHintRunner(cfg.linter_script, logger=logger)
    try:
        report = runner.lint(targets, cfg.options)
    except (OSError, ScriptLoadError, EvaluationError) as exc:
        fail(f"JSHint run failed: {exc}", use_emoji=use_emoji, use_color=logger.use_color)
        raise typer.Exit(code=2) from exc

    _emit_report(report, cfg, logger)
    raise typer.Exit(code=1 if report.total_error_count else 0)


def _build_config(
    raw_options: Sequence[str],
    linter_script: Path | None,
    output: str | None,
    output_path: Path | None,
    config_path: Path | None,
) -> LintConfig:
    try:
        options = dict(parse_option(raw) for raw in raw_options)
        return load_config(Path.cwd(), config_path).merged(
            {
                "linter_script": linter_script,
                "output": output,
                "output_path": output_path,
                "options": options,
            },
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _resolve_targets(files: Sequence[Path], logger: ConsoleLintLogger) -> list[str]:
    cwd = Path.cwd()
    targets: list[str] = []
    for file in files:
        candidate = (cwd / file.expanduser()).absolute()
        if candidate.exists():
            targets.append(str(candidate))
        else:
            logger.error(f"Couldn't find {candidate}")
    return targets


def _emit_report(report: Report, cfg: LintConfig, logger: ConsoleLintLogger) -> None:
    reporter = get_reporter(cfg.output)
    if cfg.output_path is not None:
        write_report(report, reporter, cfg.output_path)
        ok(f"Report written to {cfg.output_path}", use_emoji=logger.use_emoji, use_color=logger.use_color, stderr=True)
    else:
        typer.echo(reporter.render(report))

    # the plain report already ends with the summary line
    if cfg.output_path is None and reporter.name == "plain":
        return
    if report.total_error_count:
        fail(summary_message(report), use_emoji=logger.use_emoji, use_color=logger.use_color)
    else:
        ok(summary_message(report), use_emoji=logger.use_emoji, use_color=logger.use_color, stderr=True)


__all__ = ["app", "lint_command", "main"]
