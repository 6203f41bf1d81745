# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for converter lookup and shared converter behaviour."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from pysarif.converters import CONVERTER_MODULES, load_converter
from pysarif.converters.clang_tidy import ClangTidyConverter
from pysarif.converters.clippy import ClippyConverter
from pysarif.converters.hadolint import HadolintConverter
from pysarif.converters.shellcheck import ShellcheckConverter
from pysarif.sarif import SarifLog


@pytest.mark.parametrize(
    ("tool", "expected"),
    [
        ("clippy", ClippyConverter),
        ("hadolint", HadolintConverter),
        ("shellcheck", ShellcheckConverter),
        ("clang-tidy", ClangTidyConverter),
    ],
)
def test_load_converter(tool: str, expected: type) -> None:
    converter = load_converter(tool)

    assert converter is expected
    assert converter.tool_name == tool


def test_unknown_tool_is_rejected() -> None:
    with pytest.raises(KeyError):
        load_converter("pylint")


def test_registry_covers_all_tools() -> None:
    assert set(CONVERTER_MODULES) == {"clippy", "hadolint", "shellcheck", "clang-tidy"}


@pytest.mark.parametrize("tool", sorted(CONVERTER_MODULES))
def test_empty_input_yields_empty_run(tool: str) -> None:
    report = load_converter(tool)().convert("")

    assert report.results == []
    assert report.warnings == []
    assert report.run.tool.driver.name == tool
    assert report.run.tool.driver.rules == []


def test_report_serialises_to_valid_sarif(hadolint_output: str) -> None:
    report = HadolintConverter(tool_version="2.12.0").convert(hadolint_output)

    text = report.to_json(indent=None)
    reparsed = SarifLog.from_json(text)

    assert '"$schema"' in text
    assert '"version":"2.1.0"' in text
    assert reparsed == report.document


def test_converters_can_run_concurrently(
    clippy_output: str,
    hadolint_output: str,
    shellcheck_json1: str,
    clang_tidy_log: str,
) -> None:
    jobs = [
        (ClippyConverter(), clippy_output),
        (HadolintConverter(), hadolint_output),
        (ShellcheckConverter(), shellcheck_json1),
        (ClangTidyConverter(), clang_tidy_log),
    ]
    expected = [converter.convert(text).to_json() for converter, text in jobs]

    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [pool.submit(converter.convert, text) for converter, text in jobs * 3]
        outputs = [future.result().to_json() for future in futures]

    assert outputs == expected * 3
