# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Single-command applications behind the ``<tool>-sarif`` console scripts."""

from __future__ import annotations

from collections.abc import Callable

from .commands import CONVERSION_COMMANDS
from .typer_ext import SortedTyper, create_typer


def build_standalone(tool: str) -> SortedTyper:
    """Return an application whose only command converts ``tool`` output."""

    command = CONVERSION_COMMANDS[tool]
    app = create_typer(name=f"{tool}-sarif", help=command.__doc__)
    app.command(name=tool)(command)
    return app


def _runner(tool: str) -> Callable[[], None]:
    def _run() -> None:
        build_standalone(tool)()

    return _run


clippy_main = _runner("clippy")
hadolint_main = _runner("hadolint")
shellcheck_main = _runner("shellcheck")
clang_tidy_main = _runner("clang-tidy")


__all__ = [
    "build_standalone",
    "clang_tidy_main",
    "clippy_main",
    "hadolint_main",
    "shellcheck_main",
]
