# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, conversion driver)."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

import typer

from ..config.loader import SettingsLoader, SettingsLoadResult
from ..config.models import ConfigError
from ..converters import ConversionReport, load_converter
from ..core.errors import ConversionError
from ..core.logging import configure_debug_logging
from ..core.logging import fail as core_fail
from ..core.logging import ok as core_ok
from ..core.logging import warn as core_warn

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_WARNINGS: Final[int] = 2
STDIN_MARKER: Final[str] = "-"


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = EXIT_FAILURE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI preferences."""

    use_emoji: bool
    quiet: bool = False

    def fail(self, message: str) -> None:
        """Log a failure message; failures are shown even when quiet."""

        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        if not self.quiet:
            core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Log a success message."""

        if not self.quiet:
            core_ok(message, use_emoji=self.use_emoji)


def build_cli_logger(*, emoji: bool, quiet: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` configured for the provided preferences."""

    return CLILogger(use_emoji=emoji, quiet=quiet)


@dataclass(frozen=True, slots=True)
class ConversionOptions:
    """Options every conversion command accepts."""

    input_path: Path | None = None
    output: Path | None = None
    base_dir: str | None = None
    tool_version: str | None = None
    compact: bool = False
    strict: bool = False
    config_file: Path | None = None
    emoji: bool = True
    quiet: bool = False
    debug: bool = False


def load_settings(
    config_file: Path | None,
    overrides: Mapping[str, Any] | None = None,
    *,
    root: Path | None = None,
) -> SettingsLoadResult:
    """Resolve layered settings for the current project.

    Raises:
        CLIError: If any configuration layer is invalid.
    """

    loader = SettingsLoader.for_root(root or Path.cwd(), config_file=config_file, overrides=overrides)
    try:
        return loader.load_with_trace()
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def read_input(path: Path | None) -> str:
    """Return the tool output stored at ``path`` or piped on standard input.

    Raises:
        CLIError: If the file cannot be read.
    """

    if path is None or str(path) == STDIN_MARKER:
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CLIError(f"Unable to read {path}: {exc}") from exc


def write_output(document: str, path: Path | None) -> None:
    """Write ``document`` to ``path`` or standard output.

    Raises:
        CLIError: If the file cannot be written.
    """

    if path is None:
        typer.echo(document)
        return
    try:
        path.write_text(f"{document}\n", encoding="utf-8")
    except OSError as exc:
        raise CLIError(f"Unable to write {path}: {exc}") from exc


def run_conversion(tool: str, options: ConversionOptions, *, overrides: Mapping[str, Any] | None = None) -> None:
    """Convert one tool's output end to end and exit with the matching status.

    Args:
        tool: Converter name registered in :mod:`pysarif.converters`.
        options: Parsed common command options.
        overrides: Tool-specific settings given on the command line.

    Raises:
        typer.Exit: With status ``1`` on failure or ``2`` for ``--strict``
            runs that produced warnings.
    """

    logger = build_cli_logger(emoji=options.emoji, quiet=options.quiet)
    configure_debug_logging(enabled=options.debug)
    try:
        settings = load_settings(options.config_file, {"base_dir": options.base_dir, **(overrides or {})}).settings
        text = read_input(options.input_path)
        converter = load_converter(tool)(settings=settings, tool_version=options.tool_version)
        report: ConversionReport = converter.convert(text)
        write_output(report.to_json(indent=None if options.compact else settings.indent), options.output)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except ConversionError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc

    for warning in report.warnings:
        logger.warn(warning.describe())
    if options.output is not None:
        logger.ok(f"Wrote {len(report.results)} {tool} result(s) to {options.output}")
    if options.strict and report.warnings:
        raise typer.Exit(code=EXIT_WARNINGS)


__all__ = [
    "EXIT_FAILURE",
    "EXIT_OK",
    "EXIT_WARNINGS",
    "CLIError",
    "CLILogger",
    "ConversionOptions",
    "build_cli_logger",
    "load_settings",
    "read_input",
    "run_conversion",
    "write_output",
]
