# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``clang-tidy``: Convert a clang-tidy text log to SARIF."""

from __future__ import annotations

from ..options import (
    BASE_DIR_OPTION,
    COMPACT_OPTION,
    CONFIG_OPTION,
    CONTINUATION_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    INPUT_ARGUMENT,
    NOTES_OPTION,
    OUTPUT_OPTION,
    QUIET_OPTION,
    STRICT_OPTION,
    TOOL_VERSION_OPTION,
)
from ..shared import ConversionOptions, run_conversion


def convert_clang_tidy(
    input_path: INPUT_ARGUMENT = None,
    output: OUTPUT_OPTION = None,
    base_dir: BASE_DIR_OPTION = None,
    tool_version: TOOL_VERSION_OPTION = None,
    notes: NOTES_OPTION = None,
    continuation: CONTINUATION_OPTION = None,
    compact: COMPACT_OPTION = False,
    strict: STRICT_OPTION = False,
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
    quiet: QUIET_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Convert a clang-tidy text log to SARIF."""

    run_conversion(
        "clang-tidy",
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
        overrides={"clang_tidy_notes": notes, "clang_tidy_continuation": continuation},
    )


__all__ = ["convert_clang_tidy"]
