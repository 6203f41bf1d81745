# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer parameter declarations shared by the conversion commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..config.models import ContinuationPolicy, NotePolicy

INPUT_ARGUMENT = Annotated[
    Path | None,
    typer.Argument(
        metavar="INPUT",
        help="Tool output to convert. Use '-' or omit to read standard input.",
        show_default=False,
    ),
]
OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write SARIF to this file instead of standard output."),
]
BASE_DIR_OPTION = Annotated[
    str | None,
    typer.Option("--base-dir", help="Directory that artifact URIs are made relative to."),
]
TOOL_VERSION_OPTION = Annotated[
    str | None,
    typer.Option("--tool-version", help="Version of the tool recorded in the SARIF driver."),
]
COMPACT_OPTION = Annotated[bool, typer.Option("--compact", help="Emit compact JSON without indentation.")]
STRICT_OPTION = Annotated[bool, typer.Option("--strict", help="Exit with status 2 when records were skipped.")]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", help="Explicit settings file layered over project configuration."),
]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in console messages.")]
QUIET_OPTION = Annotated[bool, typer.Option("--quiet", "-q", help="Suppress console messages.")]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Log conversion details to standard error.")]
CARGO_METADATA_OPTION = Annotated[
    bool,
    typer.Option("--cargo-metadata", help="Resolve the workspace root with 'cargo metadata' to relativise paths."),
]
DEFAULT_FILE_OPTION = Annotated[
    str | None,
    typer.Option("--default-file", help="File name used when hadolint read from standard input."),
]
NOTES_OPTION = Annotated[
    NotePolicy | None,
    typer.Option("--notes", help="Report notes as standalone results or as related locations.", case_sensitive=False),
]
CONTINUATION_OPTION = Annotated[
    ContinuationPolicy | None,
    typer.Option(
        "--continuation",
        help="Where source and caret lines under a diagnostic go.",
        case_sensitive=False,
    ),
]

__all__ = [
    "BASE_DIR_OPTION",
    "CARGO_METADATA_OPTION",
    "COMPACT_OPTION",
    "CONFIG_OPTION",
    "CONTINUATION_OPTION",
    "DEBUG_OPTION",
    "DEFAULT_FILE_OPTION",
    "EMOJI_OPTION",
    "INPUT_ARGUMENT",
    "NOTES_OPTION",
    "OUTPUT_OPTION",
    "QUIET_OPTION",
    "STRICT_OPTION",
    "TOOL_VERSION_OPTION",
]
