# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final


class Level(str, Enum):
    """SARIF result levels every tool vocabulary is normalised onto."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


DEFAULT_LEVEL: Final[Level] = Level.WARNING

GENERIC_SEVERITY_MAP: Final[dict[str, Level]] = {
    "error": Level.ERROR,
    "fatal": Level.ERROR,
    "warning": Level.WARNING,
    "warn": Level.WARNING,
    "note": Level.NOTE,
    "info": Level.NOTE,
    "style": Level.NOTE,
    "help": Level.NOTE,
}


def map_severity(
    label: object,
    mapping: Mapping[str, Level] | None = None,
    default: Level = DEFAULT_LEVEL,
) -> Level:
    """Return the :class:`Level` for a tool-native severity ``label``.

    The lookup never fails: labels that are not strings, or that the tool
    vocabulary does not declare, resolve to ``default``. Tools regularly grow
    new levels and a conversion must keep going when they do.

    Args:
        label: Severity value exactly as the tool emitted it.
        mapping: Lower-case tool vocabulary. Defaults to
            :data:`GENERIC_SEVERITY_MAP`.
        default: Level returned for unknown labels.

    Returns:
        Level: Canonical SARIF level.
    """

    if not isinstance(label, str):
        return default
    vocabulary = GENERIC_SEVERITY_MAP if mapping is None else mapping
    return vocabulary.get(label.strip().lower(), default)


__all__ = [
    "DEFAULT_LEVEL",
    "GENERIC_SEVERITY_MAP",
    "Level",
    "map_severity",
]
