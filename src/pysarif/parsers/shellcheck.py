# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Records emitted by ``shellcheck -f json1`` and ``-f json``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field

from ..core.serialization import JsonValue


class ShellcheckRecord(BaseModel):
    """Base for shellcheck records using the tool's camelCase keys."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class ShellcheckReplacement(ShellcheckRecord):
    """Text edit proposed by shellcheck's auto-fix support."""

    line: int
    column: int
    end_line: int = Field(alias="endLine")
    end_column: int = Field(alias="endColumn")
    replacement: str
    precedence: int | None = None
    insertion_point: str | None = Field(default=None, alias="insertionPoint")


class ShellcheckFix(ShellcheckRecord):
    """Collection of replacements that resolve one comment."""

    replacements: list[ShellcheckReplacement] = Field(default_factory=list)


class ShellcheckComment(ShellcheckRecord):
    """One shellcheck finding."""

    file: str
    line: int
    column: int
    end_line: int | None = Field(default=None, alias="endLine")
    end_column: int | None = Field(default=None, alias="endColumn")
    level: str
    code: int
    message: str
    fix: ShellcheckFix | None = None

    @property
    def rule_id(self) -> str:
        """Return the wiki-style identifier, e.g. ``SC2086``."""

        return f"SC{self.code}"


def comment_items(items: list[JsonValue]) -> list[JsonValue]:
    """Return the comment entries from decoded ``json1`` or ``json`` output.

    ``json1`` wraps the comments in ``{"comments": [...]}`` whereas the legacy
    ``json`` format is a bare array. Any other value is passed through so the
    caller can report it as an invalid record.

    Args:
        items: Top-level values decoded from the tool output.

    Returns:
        list[JsonValue]: Individual comment payloads.
    """

    expanded: list[JsonValue] = []
    for item in items:
        if isinstance(item, Mapping) and "comments" in item:
            comments = item["comments"]
            if isinstance(comments, list):
                expanded.extend(cast(list[JsonValue], comments))
                continue
        expanded.append(item)
    return expanded


__all__ = [
    "ShellcheckComment",
    "ShellcheckFix",
    "ShellcheckReplacement",
    "comment_items",
]
