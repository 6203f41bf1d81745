# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert ``shellcheck -f json1`` / ``-f json`` output to SARIF."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..config.models import ConversionSettings
from ..core.serialization import JsonValue
from ..core.severity import Level, map_severity
from ..parsers.shellcheck import ShellcheckComment, ShellcheckFix, comment_items
from ..sarif.locations import UriContext, region_from
from ..sarif.models import ArtifactChange, ArtifactContent, Fix, Replacement
from .base import ConversionReport, JsonConverter, ResultSpec, RuleSpec

SHELLCHECK_INFORMATION_URI: Final[str] = "https://www.shellcheck.net"
SHELLCHECK_WIKI_URI: Final[str] = "https://www.shellcheck.net/wiki/{code}"

SHELLCHECK_SEVERITY_MAP: Final[dict[str, Level]] = {
    "error": Level.ERROR,
    "warning": Level.WARNING,
    "info": Level.NOTE,
    "style": Level.NOTE,
}


class ShellcheckConverter(JsonConverter[ShellcheckComment]):
    """Map shellcheck comments onto SARIF results."""

    tool_name = "shellcheck"
    information_uri = SHELLCHECK_INFORMATION_URI

    def expand_items(self, items: list[JsonValue]) -> list[JsonValue]:
        return comment_items(items)

    def parse_record(self, item: object) -> ShellcheckComment:
        if isinstance(item, ShellcheckComment):
            return item
        return ShellcheckComment.model_validate(item)

    def map_record(self, record: ShellcheckComment, context: UriContext) -> Sequence[ResultSpec]:
        region = region_from(
            record.line,
            record.column,
            end_line=record.end_line,
            end_column=record.end_column,
        )
        fix = _fix_from(record.fix, record.file, context) if record.fix is not None else None
        return [
            ResultSpec(
                rule=RuleSpec(
                    rule_id=record.rule_id,
                    short_description=record.message,
                    help_uri=SHELLCHECK_WIKI_URI.format(code=record.rule_id),
                ),
                level=map_severity(record.level, SHELLCHECK_SEVERITY_MAP),
                message=record.message,
                locations=[context.location(record.file, region)],
                fixes=[fix] if fix is not None else [],
            ),
        ]


def _fix_from(fix: ShellcheckFix, path: str, context: UriContext) -> Fix | None:
    if not fix.replacements:
        return None
    replacements = [
        Replacement(
            deleted_region=region_from(
                entry.line,
                entry.column,
                end_line=entry.end_line,
                end_column=entry.end_column,
            ),
            inserted_content=ArtifactContent(text=entry.replacement),
        )
        for entry in fix.replacements
    ]
    return Fix(artifact_changes=[ArtifactChange(artifact_location=context.artifact_location(path), replacements=replacements)])


def convert(
    text: str,
    *,
    settings: ConversionSettings | None = None,
    tool_version: str | None = None,
) -> ConversionReport:
    """Convert shellcheck JSON output held in ``text``."""

    return ShellcheckConverter(settings=settings, tool_version=tool_version).convert(text)


__all__ = [
    "SHELLCHECK_SEVERITY_MAP",
    "ShellcheckConverter",
    "convert",
]
