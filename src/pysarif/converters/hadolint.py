# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert ``hadolint -f json`` output to SARIF."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..config.models import ConversionSettings
from ..core.severity import Level, map_severity
from ..parsers.hadolint import HadolintRecord
from ..sarif.locations import UriContext, region_from
from .base import ConversionReport, JsonConverter, ResultSpec, RuleSpec

HADOLINT_INFORMATION_URI: Final[str] = "https://github.com/hadolint/hadolint"
HADOLINT_WIKI_URI: Final[str] = "https://github.com/hadolint/hadolint/wiki/{code}"
SHELLCHECK_WIKI_URI: Final[str] = "https://www.shellcheck.net/wiki/{code}"
STDIN_FILE: Final[str] = "-"

HADOLINT_SEVERITY_MAP: Final[dict[str, Level]] = {
    "error": Level.ERROR,
    "warning": Level.WARNING,
    "info": Level.NOTE,
    "style": Level.NOTE,
}

# Severity hadolint assigns to each rule when the output carries no level.
HADOLINT_DEFAULT_SEVERITY: Final[dict[str, str]] = {
    "DL3000": "error",
    "DL3001": "info",
    "DL3002": "warning",
    "DL3003": "warning",
    "DL3004": "error",
    "DL3006": "warning",
    "DL3007": "warning",
    "DL3008": "warning",
    "DL3009": "info",
    "DL3010": "info",
    "DL3011": "error",
    "DL3012": "error",
    "DL3013": "warning",
    "DL3014": "warning",
    "DL3015": "info",
    "DL3016": "warning",
    "DL3018": "warning",
    "DL3019": "info",
    "DL3020": "error",
    "DL3021": "error",
    "DL3022": "warning",
    "DL3023": "error",
    "DL3024": "error",
    "DL3025": "warning",
    "DL3026": "error",
    "DL3027": "warning",
    "DL3028": "warning",
    "DL3029": "warning",
    "DL3030": "warning",
    "DL3032": "warning",
    "DL3033": "warning",
    "DL3034": "warning",
    "DL3035": "warning",
    "DL3036": "warning",
    "DL3037": "warning",
    "DL3038": "warning",
    "DL3040": "warning",
    "DL3041": "warning",
    "DL3042": "warning",
    "DL3043": "error",
    "DL3044": "error",
    "DL3045": "warning",
    "DL3046": "warning",
    "DL3047": "info",
    "DL3048": "style",
    "DL3049": "info",
    "DL3050": "info",
    "DL3051": "warning",
    "DL3052": "warning",
    "DL3053": "warning",
    "DL3054": "warning",
    "DL3055": "warning",
    "DL3056": "warning",
    "DL3058": "warning",
    "DL3059": "info",
    "DL3060": "info",
    "DL3061": "error",
    "DL4000": "error",
    "DL4001": "warning",
    "DL4003": "warning",
    "DL4004": "error",
    "DL4005": "warning",
    "DL4006": "warning",
}


def default_level(code: str) -> Level | None:
    """Return the declared default level of ``code``, if hadolint declares one."""

    label = HADOLINT_DEFAULT_SEVERITY.get(code)
    return map_severity(label, HADOLINT_SEVERITY_MAP) if label is not None else None


def help_uri_for(code: str) -> str | None:
    """Return the wiki page documenting ``code``."""

    if code.startswith("DL"):
        return HADOLINT_WIKI_URI.format(code=code)
    if code.startswith("SC"):
        return SHELLCHECK_WIKI_URI.format(code=code)
    return None


class HadolintConverter(JsonConverter[HadolintRecord]):
    """Map hadolint findings onto SARIF results."""

    tool_name = "hadolint"
    information_uri = HADOLINT_INFORMATION_URI

    def parse_record(self, item: object) -> HadolintRecord:
        if isinstance(item, HadolintRecord):
            return item
        return HadolintRecord.model_validate(item)

    def map_record(self, record: HadolintRecord, context: UriContext) -> Sequence[ResultSpec]:
        code = record.code.strip()
        declared = default_level(code)
        if record.level and record.level.strip():
            level = map_severity(record.level, HADOLINT_SEVERITY_MAP)
        else:
            level = declared or Level.WARNING
        file = record.file.strip() if record.file else ""
        if not file or file == STDIN_FILE:
            file = self.settings.hadolint_default_file
        location = context.location(file, region_from(record.line, record.column))
        return [
            ResultSpec(
                rule=RuleSpec(
                    rule_id=code,
                    short_description=record.message,
                    default_level=declared,
                    help_uri=help_uri_for(code),
                ),
                level=level,
                message=record.message,
                locations=[location],
            ),
        ]


def convert(
    text: str,
    *,
    settings: ConversionSettings | None = None,
    tool_version: str | None = None,
) -> ConversionReport:
    """Convert hadolint JSON output held in ``text``."""

    return HadolintConverter(settings=settings, tool_version=tool_version).convert(text)


__all__ = [
    "HADOLINT_DEFAULT_SEVERITY",
    "HADOLINT_SEVERITY_MAP",
    "HadolintConverter",
    "convert",
    "default_level",
    "help_uri_for",
]
