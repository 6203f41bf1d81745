# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the clang-tidy converter and its note and continuation policies."""

from __future__ import annotations

import pytest

from pysarif.config import ContinuationPolicy, ConversionSettings, NotePolicy
from pysarif.converters.clang_tidy import ClangTidyConverter, convert, help_uri_for, rule_id_for
from pysarif.core.errors import ConversionStage
from pysarif.core.severity import Level
from pysarif.parsers.clang_tidy import parse_clang_tidy

UNUSED_VARIABLE_LOG = (
    "foo.c:10:5: warning: unused variable 'x' [-Wunused-variable]\n"
    "foo.c:10:5: note: did you mean to use it?\n"
)


def test_note_becomes_standalone_result() -> None:
    report = convert(UNUSED_VARIABLE_LOG)

    assert len(report.document.runs) == 1
    warning, note = report.results
    assert warning.level is Level.WARNING
    assert warning.rule_id == "-Wunused-variable"
    assert warning.message.text == "unused variable 'x'"
    physical = warning.locations[0].physical_location
    assert physical is not None
    assert physical.artifact_location.uri == "foo.c"
    assert physical.region is not None
    assert (physical.region.start_line, physical.region.start_column) == (10, 5)

    assert note.level is Level.NOTE
    assert note.rule_id == "-Wunused-variable"
    assert note.message.text == "did you mean to use it?"
    assert note.related_locations is not None
    parent = note.related_locations[0]
    assert parent.physical_location == warning.locations[0].physical_location
    assert parent.message is not None
    assert parent.message.text == "unused variable 'x'"


def test_note_as_related_location() -> None:
    settings = ConversionSettings(clang_tidy_notes=NotePolicy.RELATED)

    report = ClangTidyConverter(settings=settings).convert(UNUSED_VARIABLE_LOG)

    assert len(report.results) == 1
    result = report.results[0]
    assert result.related_locations is not None
    related = result.related_locations[0]
    assert related.message is not None
    assert related.message.text == "did you mean to use it?"
    assert related.physical_location is not None
    assert related.physical_location.region is not None
    assert related.physical_location.region.start_line == 10


def test_compiler_warning_has_no_help_uri() -> None:
    rule = convert(UNUSED_VARIABLE_LOG).run.rule("-Wunused-variable")

    assert rule is not None
    assert rule.help_uri is None
    assert len(convert(UNUSED_VARIABLE_LOG).run.tool.driver.rules or []) == 1


def test_realistic_log(clang_tidy_log: str) -> None:
    report = convert(clang_tidy_log, settings=ConversionSettings(base_dir="/work"))

    assert [result.rule_id for result in report.results] == [
        "clang-analyzer-deadcode.DeadStores",
        "clang-analyzer-deadcode.DeadStores",
        "clang-diagnostic-error",
    ]
    assert [result.level for result in report.results] == [Level.WARNING, Level.NOTE, Level.ERROR]
    assert report.warnings == []

    artifact = report.results[2].locations[0].physical_location.artifact_location  # type: ignore[union-attr]
    assert artifact.uri == "src/util.c"
    assert artifact.uri_base_id == "SRCROOT"
    assert report.run.original_uri_base_ids is not None
    assert report.run.original_uri_base_ids["SRCROOT"].uri == "file:///work/"

    analyzer = report.run.rule("clang-analyzer-deadcode.DeadStores")
    assert analyzer is not None
    assert analyzer.help_uri == "https://clang.llvm.org/extra/clang-tidy/checks/clang-analyzer/deadcode.DeadStores.html"


def test_continuation_lines_become_snippet(clang_tidy_log: str) -> None:
    result = convert(clang_tidy_log).results[0]

    region = result.locations[0].physical_location.region  # type: ignore[union-attr]
    assert region is not None
    assert region.snippet is not None
    assert region.snippet.text == "   12 |   rc = compute();\n      |   ^    ~~~~~~~~~"
    assert result.message.text == "Value stored to 'rc' is never read"


def test_continuation_lines_appended_to_message(clang_tidy_log: str) -> None:
    settings = ConversionSettings(clang_tidy_continuation=ContinuationPolicy.MESSAGE)

    result = convert(clang_tidy_log, settings=settings).results[2]

    assert result.message.text.splitlines() == [
        "use of undeclared identifier 'y'",
        "    4 |   return y;",
        "      |          ^",
    ]
    assert result.locations[0].physical_location.region.snippet is None  # type: ignore[union-attr]


@pytest.mark.parametrize(
    "settings",
    [
        ConversionSettings(clang_tidy_continuation=ContinuationPolicy.DISCARD),
        ConversionSettings(include_snippets=False),
    ],
)
def test_continuation_lines_dropped(clang_tidy_log: str, settings: ConversionSettings) -> None:
    result = convert(clang_tidy_log, settings=settings).results[0]

    assert result.message.text == "Value stored to 'rc' is never read"
    assert result.locations[0].physical_location.region.snippet is None  # type: ignore[union-attr]


def test_input_without_diagnostics_warns() -> None:
    report = convert("Running without flags.\nnothing to see here\n")

    assert report.results == []
    assert len(report.warnings) == 1
    warning = report.warnings[0]
    assert warning.stage is ConversionStage.PARSE
    assert warning.record is None
    assert "2 non-blank line(s)" in warning.message


def test_empty_input_is_silent() -> None:
    report = convert("")

    assert report.results == []
    assert report.warnings == []


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("a.c:1:2: error: boom", "clang-diagnostic-error"),
        ("a.c:1:2: fatal error: 'x.h' file not found", "clang-diagnostic-fatal-error"),
        ("a.c:1:2: warning: w [bugprone-foo,-warnings-as-errors]", "bugprone-foo"),
    ],
)
def test_rule_identifier(line: str, expected: str) -> None:
    (diagnostic,) = parse_clang_tidy(line)

    assert rule_id_for(diagnostic) == expected


@pytest.mark.parametrize(
    ("check", "expected"),
    [
        ("readability-identifier-naming", "https://clang.llvm.org/extra/clang-tidy/checks/readability/identifier-naming.html"),
        ("cppcoreguidelines-avoid-magic-numbers", "https://clang.llvm.org/extra/clang-tidy/checks/cppcoreguidelines/avoid-magic-numbers.html"),
        ("clang-diagnostic-unused-variable", None),
        ("-Wshadow", None),
        ("standalone", None),
    ],
)
def test_help_uri_for(check: str, expected: str | None) -> None:
    assert help_uri_for(check) == expected


def test_orphan_note_is_reported_as_note() -> None:
    report = convert("a.c:3:1: note: expanded from macro 'X'\n")

    (result,) = report.results
    assert result.level is Level.NOTE
    assert result.rule_id == "clang-diagnostic-note"
    assert result.related_locations is None
