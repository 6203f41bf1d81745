# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings shared by every converter and the command line."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..sarif.builders import DEFAULT_URI_BASE_ID


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class NotePolicy(str, Enum):
    """How clang-tidy ``note`` lines that follow a diagnostic are reported."""

    STANDALONE = "standalone"
    RELATED = "related"


class ContinuationPolicy(str, Enum):
    """What happens to the source and caret lines printed under a clang-tidy header."""

    SNIPPET = "snippet"
    MESSAGE = "message"
    DISCARD = "discard"


class ConversionSettings(BaseModel):
    """Options controlling how tool output is mapped onto SARIF."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    base_dir: str | None = None
    uri_base_id: str = Field(default=DEFAULT_URI_BASE_ID, min_length=1)
    include_snippets: bool = True
    hadolint_default_file: str = Field(default="Dockerfile", min_length=1)
    clang_tidy_notes: NotePolicy = NotePolicy.STANDALONE
    clang_tidy_continuation: ContinuationPolicy = ContinuationPolicy.SNIPPET
    cargo_metadata: bool = False
    indent: int | None = Field(default=2, ge=0)

    @field_validator("base_dir", mode="before")
    @classmethod
    def _coerce_base_dir(cls, value: Any) -> str | None:
        """Return ``value`` as a string, treating blanks as unset.

        Args:
            value: Raw value from a configuration layer.

        Returns:
            str | None: Directory string or ``None``.
        """

        if value is None:
            return None
        if isinstance(value, Path):
            return value.as_posix()
        if isinstance(value, str):
            return value.strip() or None
        return value


__all__ = [
    "ConfigError",
    "ContinuationPolicy",
    "ConversionSettings",
    "NotePolicy",
]
