# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Conversion settings and their layered loader."""

from __future__ import annotations

from .loader import PROJECT_CONFIG_NAME, FieldUpdate, SettingsLoader, SettingsLoadResult
from .models import ConfigError, ContinuationPolicy, ConversionSettings, NotePolicy

__all__ = [
    "PROJECT_CONFIG_NAME",
    "ConfigError",
    "ContinuationPolicy",
    "ConversionSettings",
    "FieldUpdate",
    "NotePolicy",
    "SettingsLoadResult",
    "SettingsLoader",
]
