# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert ``cargo clippy --message-format=json`` output to SARIF."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Final

from ..config.models import ConversionSettings
from ..core.errors import RecordError
from ..core.severity import Level, map_severity
from ..metadata.cargo import CargoMetadataResolver, WorkspaceResolver
from ..parsers.clippy import COMPILER_MESSAGE, CargoMessage, CompilerDiagnostic, DiagnosticSpan
from ..sarif.locations import UriContext, region_from
from ..sarif.models import ArtifactChange, ArtifactContent, Fix, Location, Message, Replacement
from .base import ConversionReport, JsonConverter, ResultSpec, RuleSpec

CLIPPY_INFORMATION_URI: Final[str] = "https://rust-lang.github.io/rust-clippy/"
CLIPPY_LINT_URI: Final[str] = "https://rust-lang.github.io/rust-clippy/master/index.html#{name}"
RUSTC_ERROR_URI: Final[str] = "https://doc.rust-lang.org/error_codes/{code}.html"
FALLBACK_RULE_ID: Final[str] = "rustc"
CLIPPY_PREFIX: Final[str] = "clippy::"

CLIPPY_SEVERITY_MAP: Final[dict[str, Level]] = {
    "error": Level.ERROR,
    "error: internal compiler error": Level.ERROR,
    "warning": Level.WARNING,
    "note": Level.NOTE,
    "help": Level.NOTE,
    "failure-note": Level.NOTE,
}

_RUSTC_ERROR_RE: Final[re.Pattern[str]] = re.compile(r"^E\d{4}$")
_FURTHER_INFO_RE: Final[re.Pattern[str]] = re.compile(r"for further information visit (?P<uri>https?://\S+)")


def help_uri_for(code: str) -> str | None:
    """Return the documentation page for a clippy lint or rustc error code."""

    if code.startswith(CLIPPY_PREFIX):
        return CLIPPY_LINT_URI.format(name=code.removeprefix(CLIPPY_PREFIX))
    if _RUSTC_ERROR_RE.match(code):
        return RUSTC_ERROR_URI.format(code=code)
    return None


class ClippyConverter(JsonConverter[CargoMessage]):
    """Map cargo ``compiler-message`` records onto SARIF results."""

    tool_name = "clippy"
    information_uri = CLIPPY_INFORMATION_URI

    def __init__(
        self,
        *,
        settings: ConversionSettings | None = None,
        tool_version: str | None = None,
        resolver: WorkspaceResolver | None = None,
    ) -> None:
        """Initialise the converter.

        Args:
            settings: Conversion settings; defaults apply when omitted.
            tool_version: Optional clippy version recorded on the driver.
            resolver: Optional workspace lookup. When omitted and
                ``settings.cargo_metadata`` is enabled, ``cargo metadata`` is used.
        """

        super().__init__(settings=settings, tool_version=tool_version)
        if resolver is None and self.settings.cargo_metadata:
            resolver = CargoMetadataResolver()
        self._resolver = resolver

    def parse_record(self, item: object) -> CargoMessage:
        if isinstance(item, CargoMessage):
            return item
        if isinstance(item, CompilerDiagnostic):
            return CargoMessage(reason=COMPILER_MESSAGE, message=item)
        if isinstance(item, Mapping) and "reason" not in item and "level" in item:
            return CargoMessage(reason=COMPILER_MESSAGE, message=CompilerDiagnostic.model_validate(item))
        return CargoMessage.model_validate(item)

    def accepts(self, record: CargoMessage) -> bool:
        """Skip cargo noise and rustc summaries such as ``N warnings emitted``."""

        diagnostic = record.message
        if not record.is_diagnostic or diagnostic is None:
            return False
        return diagnostic.code is not None or bool(diagnostic.spans)

    def uri_context(self, records: Sequence[CargoMessage]) -> UriContext:
        """Anchor paths at the configured base or at the resolved workspace root."""

        base_dir = self.settings.base_dir
        if base_dir is None and self._resolver is not None:
            manifest = next((record.manifest_path for record in records if record.manifest_path), None)
            if manifest is not None:
                base_dir = self._resolver(manifest)
        return UriContext(base_dir=base_dir, uri_base_id=self.settings.uri_base_id)

    def map_record(self, record: CargoMessage, context: UriContext) -> Sequence[ResultSpec]:
        diagnostic = record.message
        if diagnostic is None:
            raise RecordError("compiler message has no diagnostic")
        if not diagnostic.spans:
            raise RecordError("diagnostic has no spans")

        code = diagnostic.code.code.strip() if diagnostic.code is not None else ""
        rule_id = code or FALLBACK_RULE_ID
        explanation = diagnostic.code.explanation if diagnostic.code is not None else None
        locations = [self._span_location(span, context) for span in diagnostic.spans]

        related: list[Location] = []
        fixes: list[Fix] = []
        for child in diagnostic.children:
            for span in child.spans:
                related.append(self._span_location(span, context, message=span.label or child.message))
            if (fix := self._child_fix(child, context)) is not None:
                fixes.append(fix)

        return [
            ResultSpec(
                rule=RuleSpec(
                    rule_id=rule_id,
                    short_description=diagnostic.message,
                    full_description=explanation,
                    help_uri=help_uri_for(rule_id) or _further_information(diagnostic),
                ),
                level=map_severity(diagnostic.level, CLIPPY_SEVERITY_MAP),
                message=diagnostic.message,
                locations=locations,
                related_locations=related,
                fixes=fixes,
            ),
        ]

    def _span_location(self, span: DiagnosticSpan, context: UriContext, *, message: str | None = None) -> Location:
        region = region_from(
            span.line_start,
            span.column_start,
            end_line=span.line_end,
            end_column=span.column_end,
            snippet=span.snippet() if self.settings.include_snippets else None,
        )
        return context.location(span.file_name, region, message=message if message is not None else span.label)

    @staticmethod
    def _child_fix(child: CompilerDiagnostic, context: UriContext) -> Fix | None:
        changes: dict[str, list[Replacement]] = {}
        for span in child.spans:
            if span.suggested_replacement is None:
                continue
            replacement = Replacement(
                deleted_region=region_from(
                    span.line_start,
                    span.column_start,
                    end_line=span.line_end,
                    end_column=span.column_end,
                ),
                inserted_content=ArtifactContent(text=span.suggested_replacement),
            )
            changes.setdefault(span.file_name, []).append(replacement)
        if not changes:
            return None
        return Fix(
            description=Message(text=child.message) if child.message.strip() else None,
            artifact_changes=[
                ArtifactChange(artifact_location=context.artifact_location(path), replacements=replacements)
                for path, replacements in changes.items()
            ],
        )


def _further_information(diagnostic: CompilerDiagnostic) -> str | None:
    for child in diagnostic.children:
        if match := _FURTHER_INFO_RE.search(child.message):
            return match.group("uri")
    return None


def convert(
    text: str,
    *,
    settings: ConversionSettings | None = None,
    tool_version: str | None = None,
    resolver: WorkspaceResolver | None = None,
) -> ConversionReport:
    """Convert clippy JSON output held in ``text``."""

    return ClippyConverter(settings=settings, tool_version=tool_version, resolver=resolver).convert(text)


__all__ = [
    "CLIPPY_SEVERITY_MAP",
    "FALLBACK_RULE_ID",
    "ClippyConverter",
    "convert",
    "help_uri_for",
]
