# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the JSON record models of the structured tools."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from pysarif.parsers.clippy import CargoMessage
from pysarif.parsers.hadolint import HadolintRecord
from pysarif.parsers.shellcheck import ShellcheckComment, comment_items


def test_cargo_message_parses_nested_diagnostic(make_clippy_message: Any) -> None:
    message = CargoMessage.model_validate(make_clippy_message())

    assert message.is_diagnostic
    assert message.manifest_path == "/work/demo/Cargo.toml"
    assert message.message is not None
    assert message.message.code is not None
    assert message.message.code.code == "clippy::needless_return"
    assert message.message.spans[0].snippet() == "    return x;"


def test_cargo_non_diagnostic_reason() -> None:
    message = CargoMessage.model_validate({"reason": "build-finished", "success": True})

    assert not message.is_diagnostic


def test_cargo_span_requires_numeric_positions(make_clippy_message: Any, make_clippy_span: Any) -> None:
    span = make_clippy_span()
    span["line_start"] = "three"

    with pytest.raises(ValidationError):
        CargoMessage.model_validate(make_clippy_message(spans=[span]))


def test_hadolint_record_optional_fields() -> None:
    record = HadolintRecord.model_validate({"code": "DL3006", "message": "Always tag", "line": 3})

    assert record.level is None
    assert record.file is None
    assert record.line == 3


def test_shellcheck_comment_aliases() -> None:
    comment = ShellcheckComment.model_validate(
        {"file": "a.sh", "line": 1, "endLine": 2, "column": 3, "endColumn": 4, "level": "style", "code": 2034, "message": "m"},
    )

    assert (comment.end_line, comment.end_column) == (2, 4)
    assert comment.rule_id == "SC2034"


def test_comment_items_unwraps_json1_and_passes_arrays_through() -> None:
    items = comment_items([{"comments": [{"code": 1}, {"code": 2}]}, {"code": 3}])

    assert items == [{"code": 1}, {"code": 2}, {"code": 3}]
