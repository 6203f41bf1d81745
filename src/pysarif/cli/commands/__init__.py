# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command registration for the ``pysarif`` application."""

from __future__ import annotations

import typer

from .clang_tidy import convert_clang_tidy
from .clippy import convert_clippy
from .config import show_config
from .hadolint import convert_hadolint
from .shellcheck import convert_shellcheck

CONVERSION_COMMANDS = {
    "clippy": convert_clippy,
    "hadolint": convert_hadolint,
    "shellcheck": convert_shellcheck,
    "clang-tidy": convert_clang_tidy,
}


def register_commands(app: typer.Typer) -> None:
    """Register every conversion command and ``config`` on ``app``."""

    for name, command in CONVERSION_COMMANDS.items():
        app.command(name=name)(command)
    app.command(name="config")(show_config)


__all__ = ["CONVERSION_COMMANDS", "register_commands"]
