# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``config``: show the resolved conversion settings and where they came from."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from ..options import CONFIG_OPTION, EMOJI_OPTION
from ..shared import CLIError, build_cli_logger, load_settings

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Project root searched for pyproject.toml and .pysarif.toml."),
]


def show_config(
    config: CONFIG_OPTION = None,
    root: ROOT_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print the effective settings as JSON together with their sources."""

    logger = build_cli_logger(emoji=emoji)
    try:
        result = load_settings(config, root=root)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    payload = {
        "settings": result.settings.model_dump(mode="json"),
        "sources": result.sources,
        "updates": [update.model_dump(mode="json") for update in result.updates],
    }
    typer.echo(json.dumps(payload, indent=2))
    for warning in result.warnings:
        logger.warn(warning)


__all__ = ["show_config"]
