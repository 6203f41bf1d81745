# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert plain-text clang-tidy logs to SARIF."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..config.models import ContinuationPolicy, ConversionSettings, NotePolicy
from ..core.errors import ConversionStage, RecordError
from ..core.severity import Level, map_severity
from ..parsers.clang_tidy import ClangTidyDiagnostic, ClangTidyParser
from ..sarif.locations import UriContext, region_from
from ..sarif.models import Location
from .base import ConversionReport, Converter, ResultSpec, RuleSpec, WarningLog

CLANG_TIDY_INFORMATION_URI: Final[str] = "https://clang.llvm.org/extra/clang-tidy/"
CLANG_TIDY_CHECK_URI: Final[str] = "https://clang.llvm.org/extra/clang-tidy/checks/{category}/{name}.html"
CLANG_DIAGNOSTIC_PREFIX: Final[str] = "clang-diagnostic-"
CLANG_ANALYZER_PREFIX: Final[str] = "clang-analyzer-"

CLANG_TIDY_SEVERITY_MAP: Final[dict[str, Level]] = {
    "fatal error": Level.ERROR,
    "error": Level.ERROR,
    "warning": Level.WARNING,
    "note": Level.NOTE,
    "remark": Level.NOTE,
}


def rule_id_for(diagnostic: ClangTidyDiagnostic) -> str:
    """Return the check name, or a synthetic id for compiler diagnostics without one."""

    if diagnostic.check:
        return diagnostic.check
    return f"{CLANG_DIAGNOSTIC_PREFIX}{diagnostic.severity.replace(' ', '-')}"


def help_uri_for(check: str) -> str | None:
    """Return the clang-tidy documentation page for ``check``.

    Compiler warnings (``-W...`` and ``clang-diagnostic-*``) are not documented
    per check and yield ``None``.
    """

    if check.startswith(("-W", CLANG_DIAGNOSTIC_PREFIX)):
        return None
    if check.startswith(CLANG_ANALYZER_PREFIX):
        category, name = "clang-analyzer", check.removeprefix(CLANG_ANALYZER_PREFIX)
    else:
        category, _, name = check.partition("-")
    if not category or not name:
        return None
    return CLANG_TIDY_CHECK_URI.format(category=category, name=name)


class ClangTidyConverter(Converter[ClangTidyDiagnostic]):
    """Parse clang-tidy text output and map the diagnostics onto SARIF results."""

    tool_name = "clang-tidy"
    information_uri = CLANG_TIDY_INFORMATION_URI

    def convert(self, text: str) -> ConversionReport:
        """Parse ``text`` line by line and convert the diagnostics found.

        Non-blank input without a single diagnostic header still converts to
        an empty run, but the report carries a warning about it.
        """

        parser = ClangTidyParser()
        for line in text.splitlines():
            parser.feed(line)
        diagnostics = parser.finish()
        log = WarningLog(self.tool_name)
        if text.strip() and not diagnostics:
            log.skip(
                f"no diagnostics found in {parser.discarded_lines} non-blank line(s) of input",
                stage=ConversionStage.PARSE,
            )
        return self._convert(diagnostics, log)

    def parse_record(self, item: object) -> ClangTidyDiagnostic:
        if isinstance(item, ClangTidyDiagnostic):
            return item
        raise RecordError(f"expected a parsed clang-tidy diagnostic, got {type(item).__name__}")

    def record_number(self, index: int, record: ClangTidyDiagnostic) -> int:
        return record.source_line

    def map_record(self, record: ClangTidyDiagnostic, context: UriContext) -> Sequence[ResultSpec]:
        rule = RuleSpec(
            rule_id=rule_id_for(record),
            short_description=record.message,
            help_uri=help_uri_for(record.check) if record.check else None,
        )
        message, snippet = self._continuation(record.message, record.continuation)
        primary_location = context.location(record.path, region_from(record.line, record.column, snippet=snippet))
        primary = ResultSpec(
            rule=rule,
            level=map_severity(record.severity, CLANG_TIDY_SEVERITY_MAP),
            message=message,
            locations=[primary_location],
        )

        note_locations: list[tuple[str, Location]] = []
        for note in record.notes:
            note_message, note_snippet = self._continuation(note.message, note.continuation)
            region = region_from(note.line, note.column, snippet=note_snippet)
            note_locations.append((note_message, context.location(note.path, region, message=note_message)))

        if self.settings.clang_tidy_notes is NotePolicy.RELATED:
            primary.related_locations = [location for _, location in note_locations]
            return [primary]

        specs = [primary]
        parent = context.location(record.path, region_from(record.line, record.column), message=record.message)
        for note_message, location in note_locations:
            specs.append(
                ResultSpec(
                    rule=rule,
                    level=Level.NOTE,
                    message=note_message,
                    locations=[Location(physical_location=location.physical_location)],
                    related_locations=[parent],
                ),
            )
        return specs

    def _continuation(self, message: str, lines: list[str]) -> tuple[str, str | None]:
        """Apply the continuation policy, returning the message and snippet."""

        if not lines:
            return message, None
        policy = self.settings.clang_tidy_continuation
        if policy is ContinuationPolicy.MESSAGE:
            return "\n".join([message, *lines]), None
        if policy is ContinuationPolicy.SNIPPET and self.settings.include_snippets:
            return message, "\n".join(lines)
        return message, None


def convert(
    text: str,
    *,
    settings: ConversionSettings | None = None,
    tool_version: str | None = None,
) -> ConversionReport:
    """Convert a clang-tidy log held in ``text``."""

    return ClangTidyConverter(settings=settings, tool_version=tool_version).convert(text)


__all__ = [
    "CLANG_TIDY_SEVERITY_MAP",
    "ClangTidyConverter",
    "convert",
    "help_uri_for",
    "rule_id_for",
]
