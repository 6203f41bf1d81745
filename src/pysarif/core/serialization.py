# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for decoding tool JSON payloads into plain Python structures."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TypeAlias

from .errors import ConversionError, ConversionStage

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"


@dataclass(slots=True)
class JsonStream:
    """Decoded JSON payload plus the line numbers that failed to decode.

    ``items`` holds the top-level values in document order. A single JSON
    array is flattened one level; any other single document becomes the only
    item. JSON-lines input yields one item per decodable line.
    """

    items: list[JsonValue] = field(default_factory=list)
    invalid_lines: list[int] = field(default_factory=list)
    line_oriented: bool = False


def load_json_stream(text: str, *, tool: str) -> JsonStream:
    """Decode ``text`` as a JSON document or, failing that, as JSON lines.

    Args:
        text: Raw tool output.
        tool: Tool name used in error reporting.

    Returns:
        JsonStream: Decoded payload. Empty input yields an empty stream.

    Raises:
        ConversionError: If no part of a non-empty input is valid JSON.
    """

    stripped = text.strip()
    if not stripped:
        return JsonStream()
    try:
        document: JsonValue = json.loads(stripped)
    except json.JSONDecodeError as exc:
        stream = _load_json_lines(text)
        if not stream.items:
            raise ConversionError(
                f"input is not valid JSON ({exc.msg} at line {exc.lineno})",
                stage=ConversionStage.PARSE,
                tool=tool,
            ) from exc
        return stream
    if isinstance(document, list):
        return JsonStream(items=list(document))
    return JsonStream(items=[document])


def _load_json_lines(text: str) -> JsonStream:
    stream = JsonStream(line_oriented=True)
    for number, raw_line in enumerate(text.splitlines(), start=1):
        trimmed = raw_line.strip()
        if not trimmed:
            continue
        try:
            stream.items.append(json.loads(trimmed))
        except json.JSONDecodeError:
            stream.invalid_lines.append(number)
    return stream


__all__ = [
    "JsonScalar",
    "JsonStream",
    "JsonValue",
    "load_json_stream",
]
