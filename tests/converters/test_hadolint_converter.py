# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the hadolint converter."""

from __future__ import annotations

import json

import pytest

from pysarif.config import ConversionSettings
from pysarif.converters.hadolint import HadolintConverter, convert, default_level, help_uri_for
from pysarif.core.errors import ConversionStage
from pysarif.core.severity import Level


def test_findings_become_results(hadolint_output: str) -> None:
    report = convert(hadolint_output)

    assert [result.rule_id for result in report.results] == ["DL3006", "SC2086"]
    assert [result.level for result in report.results] == [Level.WARNING, Level.NOTE]
    assert report.warnings == []

    physical = report.results[1].locations[0].physical_location
    assert physical is not None
    assert physical.artifact_location.uri == "Dockerfile"
    assert physical.region is not None
    assert (physical.region.start_line, physical.region.start_column) == (5, 1)


def test_missing_level_uses_declared_default() -> None:
    report = convert(json.dumps([{"code": "DL3006", "message": "Always tag", "line": 3}]))

    result = report.results[0]
    assert result.level is Level.WARNING
    rule = report.run.rule("DL3006")
    assert rule is not None
    assert rule.default_configuration is not None
    assert rule.default_configuration.level is Level.WARNING


def test_declared_info_default_maps_to_note() -> None:
    report = convert(json.dumps([{"code": "DL3009", "message": "Delete the apt-get lists", "line": 4}]))

    assert report.results[0].level is Level.NOTE


def test_unknown_code_without_level_is_warning() -> None:
    report = convert(json.dumps([{"code": "DL9999", "message": "Future rule", "line": 1}]))

    assert report.results[0].level is Level.WARNING
    rule = report.run.rule("DL9999")
    assert rule is not None
    assert rule.default_configuration is None


def test_explicit_level_wins_over_default() -> None:
    report = convert(json.dumps([{"code": "DL3006", "message": "Always tag", "line": 1, "level": "error"}]))

    assert report.results[0].level is Level.ERROR


def test_unknown_explicit_level_is_warning_even_for_error_rules() -> None:
    report = convert(json.dumps([{"code": "DL3000", "message": "Use absolute WORKDIR", "line": 1, "level": "fatal"}]))

    assert report.results[0].level is Level.WARNING


@pytest.mark.parametrize("file", [None, "-", "  "])
def test_stdin_findings_use_default_file(file: str | None) -> None:
    record = {"code": "DL3006", "message": "Always tag", "line": 1, "file": file}
    settings = ConversionSettings(hadolint_default_file="docker/Dockerfile.build")

    report = HadolintConverter(settings=settings).convert(json.dumps([record]))

    artifact = report.results[0].locations[0].physical_location.artifact_location  # type: ignore[union-attr]
    assert artifact.uri == "docker/Dockerfile.build"


def test_non_numeric_line_is_skipped() -> None:
    records = [
        {"code": "DL3006", "message": "Always tag", "line": "top"},
        {"code": "DL3007", "message": "Using latest", "line": 2},
    ]

    report = convert(json.dumps(records))

    assert [result.rule_id for result in report.results] == ["DL3007"]
    assert len(report.warnings) == 1
    assert report.warnings[0].record == 0
    assert report.warnings[0].stage is ConversionStage.MAP


def test_record_without_code_is_a_parse_warning() -> None:
    report = convert(json.dumps([{"message": "no code", "line": 1}]))

    assert report.results == []
    assert report.warnings[0].stage is ConversionStage.PARSE


def test_help_uris_point_at_wikis() -> None:
    assert help_uri_for("DL3006") == "https://github.com/hadolint/hadolint/wiki/DL3006"
    assert help_uri_for("SC2086") == "https://www.shellcheck.net/wiki/SC2086"
    assert help_uri_for("custom") is None


def test_default_level_lookup() -> None:
    assert default_level("DL3000") is Level.ERROR
    assert default_level("DL3048") is Level.NOTE
    assert default_level("nope") is None
