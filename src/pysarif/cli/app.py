# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the conversion commands."""

from __future__ import annotations

from typing import Annotated

import typer

from .. import __version__
from .commands import register_commands
from .typer_ext import create_typer

app = create_typer(name="pysarif", help="Convert static-analysis tool output to SARIF 2.1.0.", no_args_is_help=True)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"pysarif {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_print_version, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Convert static-analysis tool output to SARIF 2.1.0."""


register_commands(app)


def main() -> None:
    """Run the ``pysarif`` application."""

    app()


__all__ = ["app", "main"]
