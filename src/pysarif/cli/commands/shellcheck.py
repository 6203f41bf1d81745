# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``shellcheck``: Convert ``shellcheck -f json1`` or ``-f json`` output to SARIF."""

from __future__ import annotations

from ..options import (
    BASE_DIR_OPTION,
    COMPACT_OPTION,
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    INPUT_ARGUMENT,
    OUTPUT_OPTION,
    QUIET_OPTION,
    STRICT_OPTION,
    TOOL_VERSION_OPTION,
)
from ..shared import ConversionOptions, run_conversion


def convert_shellcheck(
    input_path: INPUT_ARGUMENT = None,
    output: OUTPUT_OPTION = None,
    base_dir: BASE_DIR_OPTION = None,
    tool_version: TOOL_VERSION_OPTION = None,
    compact: COMPACT_OPTION = False,
    strict: STRICT_OPTION = False,
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
    quiet: QUIET_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Convert ``shellcheck -f json1`` or ``-f json`` output to SARIF."""

    run_conversion(
        "shellcheck",
        ConversionOptions(
            input_path=input_path,
            output=output,
            base_dir=base_dir,
            tool_version=tool_version,
            compact=compact,
            strict=strict,
            config_file=config,
            emoji=emoji,
            quiet=quiet,
            debug=debug,
        ),
    )


__all__ = ["convert_shellcheck"]
