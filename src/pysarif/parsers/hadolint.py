# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Records emitted by ``hadolint -f json``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HadolintRecord(BaseModel):
    """One hadolint finding.

    ``line`` is kept loose so the converter decides whether a position is
    usable; ``level`` is optional because older releases and hand-written
    payloads omit it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    code: str
    message: str
    line: int | str | None = None
    column: int | str | None = None
    file: str | None = None
    level: str | None = None


__all__ = ["HadolintRecord"]
