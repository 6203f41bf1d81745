# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for JSON payload decoding."""

from __future__ import annotations

import pytest

from pysarif.core.errors import ConversionError, ConversionStage
from pysarif.core.serialization import load_json_stream


def test_empty_input_yields_empty_stream() -> None:
    stream = load_json_stream("  \n", tool="demo")

    assert stream.items == []
    assert stream.invalid_lines == []


def test_array_is_flattened() -> None:
    stream = load_json_stream('[{"a": 1}, {"b": 2}]', tool="demo")

    assert stream.items == [{"a": 1}, {"b": 2}]
    assert not stream.line_oriented


def test_single_object_becomes_one_item() -> None:
    assert load_json_stream('{"comments": []}', tool="demo").items == [{"comments": []}]


def test_json_lines_record_bad_lines() -> None:
    stream = load_json_stream('{"a": 1}\nnot json\n\n{"b": 2}\n', tool="demo")

    assert stream.line_oriented
    assert stream.items == [{"a": 1}, {"b": 2}]
    assert stream.invalid_lines == [2]


def test_unparseable_input_is_fatal() -> None:
    with pytest.raises(ConversionError) as excinfo:
        load_json_stream("this is not json\nnor this", tool="demo")

    assert excinfo.value.stage is ConversionStage.PARSE
    assert excinfo.value.tool == "demo"
    assert "demo parse error" in str(excinfo.value)
