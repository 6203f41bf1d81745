# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures and sample tool output."""

from __future__ import annotations

import json
from typing import Any

import pytest


def json_lines(records: list[dict[str, Any]]) -> str:
    """Render ``records`` as newline-delimited JSON."""

    return "\n".join(json.dumps(record) for record in records) + "\n"


def clippy_span(
    *,
    file_name: str = "src/main.rs",
    line: int = 3,
    column_start: int = 5,
    column_end: int = 14,
    text: str = "    return x;",
    suggested_replacement: str | None = None,
    label: str | None = None,
) -> dict[str, Any]:
    return {
        "byte_start": 31,
        "byte_end": 40,
        "column_start": column_start,
        "column_end": column_end,
        "expansion": None,
        "file_name": file_name,
        "is_primary": True,
        "label": label,
        "line_start": line,
        "line_end": line,
        "suggested_replacement": suggested_replacement,
        "suggestion_applicability": "MachineApplicable" if suggested_replacement is not None else None,
        "text": [{"highlight_start": column_start, "highlight_end": column_end, "text": text}],
    }


def clippy_message(
    *,
    code: str | None = "clippy::needless_return",
    message: str = "unneeded `return` statement",
    level: str = "warning",
    spans: list[dict[str, Any]] | None = None,
    children: list[dict[str, Any]] | None = None,
    manifest_path: str = "/work/demo/Cargo.toml",
) -> dict[str, Any]:
    return {
        "reason": "compiler-message",
        "package_id": "demo 0.1.0 (path+file:///work/demo)",
        "manifest_path": manifest_path,
        "target": {"kind": ["bin"], "name": "demo", "src_path": "/work/demo/src/main.rs"},
        "message": {
            "$message_type": "diagnostic",
            "rendered": f"{level}: {message}\n",
            "children": children or [],
            "code": {"code": code, "explanation": None} if code is not None else None,
            "level": level,
            "message": message,
            "spans": [clippy_span()] if spans is None else spans,
        },
    }


@pytest.fixture
def clippy_output() -> str:
    """Return a realistic cargo message stream with one lint and noise records."""

    lint = clippy_message(
        children=[
            {
                "children": [],
                "code": None,
                "level": "note",
                "message": "`#[warn(clippy::needless_return)]` on by default",
                "rendered": None,
                "spans": [],
            },
            {
                "children": [],
                "code": None,
                "level": "help",
                "message": "remove `return`",
                "rendered": None,
                "spans": [clippy_span(suggested_replacement="x")],
            },
        ],
    )
    summary = clippy_message(code=None, message="1 warning emitted", spans=[])
    return json_lines(
        [
            {"reason": "compiler-artifact", "package_id": "demo 0.1.0", "manifest_path": "/work/demo/Cargo.toml"},
            lint,
            summary,
            {"reason": "build-finished", "success": True},
        ],
    )


@pytest.fixture
def hadolint_output() -> str:
    """Return hadolint JSON output with two findings."""

    return json.dumps(
        [
            {"code": "DL3006", "column": 1, "file": "Dockerfile", "level": "warning", "line": 1, "message": "Always tag the version of an image explicitly"},
            {"code": "SC2086", "column": 1, "file": "Dockerfile", "level": "info", "line": 5, "message": "Double quote to prevent globbing and word splitting."},
        ],
    )


@pytest.fixture
def shellcheck_json1() -> str:
    """Return ``shellcheck -f json1`` output with a fixable comment."""

    return json.dumps(
        {
            "comments": [
                {
                    "file": "deploy.sh",
                    "line": 4,
                    "endLine": 4,
                    "column": 6,
                    "endColumn": 10,
                    "level": "info",
                    "code": 2086,
                    "message": "Double quote to prevent globbing and word splitting.",
                    "fix": {
                        "replacements": [
                            {"column": 6, "endColumn": 6, "endLine": 4, "insertionPoint": "afterEnd", "line": 4, "precedence": 7, "replacement": "\""},
                            {"column": 10, "endColumn": 10, "endLine": 4, "insertionPoint": "beforeStart", "line": 4, "precedence": 7, "replacement": "\""},
                        ],
                    },
                },
                {
                    "file": "deploy.sh",
                    "line": 9,
                    "endLine": 9,
                    "column": 1,
                    "endColumn": 5,
                    "level": "error",
                    "code": 1089,
                    "message": "Parsing stopped here. Is this keyword correctly matched up?",
                    "fix": None,
                },
            ],
        },
    )


@pytest.fixture
def clang_tidy_log() -> str:
    """Return a clang-tidy log with banner noise, notes and a summary trailer."""

    return (
        "Running without flags.\n"
        "2 warnings generated.\n"
        "/work/src/main.c:12:3: warning: Value stored to 'rc' is never read [clang-analyzer-deadcode.DeadStores]\n"
        "   12 |   rc = compute();\n"
        "      |   ^    ~~~~~~~~~\n"
        "/work/src/main.c:12:3: note: Value stored to 'rc' is never read\n"
        "/work/src/util.c:4:10: error: use of undeclared identifier 'y' [clang-diagnostic-error]\n"
        "    4 |   return y;\n"
        "      |          ^\n"
        "Suppressed 11 warnings (11 in non-user code).\n"
        "Use -header-filter=.* to display errors from all non-system headers.\n"
    )


@pytest.fixture
def make_clippy_message() -> Any:
    """Return the factory building cargo ``compiler-message`` records."""

    return clippy_message


@pytest.fixture
def make_clippy_span() -> Any:
    """Return the factory building rustc diagnostic spans."""

    return clippy_span
