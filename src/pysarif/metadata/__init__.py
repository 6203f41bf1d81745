# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project metadata lookups used to anchor artifact paths."""

from __future__ import annotations

from .cargo import CargoMetadataResolver, WorkspaceResolver

__all__ = ["CargoMetadataResolver", "WorkspaceResolver"]
