# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem path helpers that never touch the filesystem."""

from __future__ import annotations

from .paths import base_uri, is_absolute_path, normalize_path

__all__ = ["base_uri", "is_absolute_path", "normalize_path"]
