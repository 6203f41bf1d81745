# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core primitives shared by the SARIF model and every converter."""

from __future__ import annotations

from .errors import ConversionError, ConversionStage, ConversionWarning, RecordError, RuleReferenceError
from .severity import Level, map_severity

__all__ = [
    "ConversionError",
    "ConversionStage",
    "ConversionWarning",
    "Level",
    "RecordError",
    "RuleReferenceError",
    "map_severity",
]
