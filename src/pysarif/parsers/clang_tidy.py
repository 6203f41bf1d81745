# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line-oriented parser turning clang-tidy logs into diagnostic records.

clang-tidy prints one header line per diagnostic::

    src/foo.c:10:5: warning: unused variable 'x' [clang-diagnostic-unused-variable]

followed by the offending source line and a caret marker. ``note`` headers
that trail an error or warning elaborate on it. The parser is a two-state
machine so the grouping of continuation lines and notes can be exercised on
its own.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

LOGGER = logging.getLogger(__name__)

NOTE_SEVERITY: Final[str] = "note"
WARNINGS_AS_ERRORS: Final[str] = "-warnings-as-errors"

_HEADER_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<path>(?:[A-Za-z]:)?[^:\n]+?):(?P<line>\d+):(?P<column>\d+):\s+"
    r"(?P<severity>fatal error|error|warning|note|remark):\s*"
    r"(?P<message>.*?)"
    r"(?:\s+\[(?P<check>[^\[\]\s]+)\])?\s*$",
)
_TRAILER_RE: Final[re.Pattern[str]] = re.compile(
    r"^(?:"
    r"\d+ (?:warnings?|errors?)(?: and \d+ (?:warnings?|errors?))? generated\."
    r"|Suppressed \d+ warnings?"
    r"|Use -header-filter="
    r"|Error while processing "
    r"|Found compiler errors?"
    r")",
)


class ParserState(str, Enum):
    """States of the clang-tidy line parser."""

    IDLE = "idle"
    IN_DIAGNOSTIC = "in_diagnostic"


@dataclass(slots=True)
class ClangTidyNote:
    """A ``note`` line attached to the diagnostic preceding it."""

    path: str
    line: int
    column: int
    message: str
    source_line: int
    continuation: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ClangTidyDiagnostic:
    """One diagnostic header together with everything grouped under it."""

    path: str
    line: int
    column: int
    severity: str
    message: str
    check: str | None
    source_line: int
    continuation: list[str] = field(default_factory=list)
    notes: list[ClangTidyNote] = field(default_factory=list)

    @property
    def is_note(self) -> bool:
        """Return ``True`` for a note that had no parent to attach to."""

        return self.severity == NOTE_SEVERITY


@dataclass(frozen=True, slots=True)
class _Header:
    path: str
    line: int
    column: int
    severity: str
    message: str
    check: str | None


def normalize_check(raw: str | None) -> str | None:
    """Return the primary check name from a bracketed ``[a,b]`` list.

    Args:
        raw: Text between the brackets, e.g. ``bugprone-foo,-warnings-as-errors``.

    Returns:
        str | None: First listed check, or ``None`` when nothing usable remains.
    """

    if raw is None:
        return None
    for entry in raw.split(","):
        candidate = entry.strip()
        if candidate and candidate != WARNINGS_AS_ERRORS:
            return candidate
    return None


def match_header(line: str) -> _Header | None:
    """Return the parsed header when ``line`` starts a diagnostic."""

    match = _HEADER_RE.match(line)
    if match is None:
        return None
    return _Header(
        path=match.group("path").strip(),
        line=int(match.group("line")),
        column=int(match.group("column")),
        severity=match.group("severity"),
        message=match.group("message").strip(),
        check=normalize_check(match.group("check")),
    )


def is_trailer(line: str) -> bool:
    """Return ``True`` for compiler summary lines that close a diagnostic."""

    return bool(_TRAILER_RE.match(line.strip()))


class ClangTidyParser:
    """Incremental parser fed one line at a time."""

    def __init__(self) -> None:
        self._state = ParserState.IDLE
        self._current: ClangTidyDiagnostic | None = None
        self._diagnostics: list[ClangTidyDiagnostic] = []
        self._discarded = 0
        self._line_number = 0

    @property
    def state(self) -> ParserState:
        """Current parser state."""

        return self._state

    @property
    def discarded_lines(self) -> int:
        """Number of non-blank lines dropped while idle."""

        return self._discarded

    def feed(self, line: str) -> None:
        """Consume a single line of clang-tidy output.

        Args:
            line: Raw line; a trailing newline is ignored.
        """

        self._line_number += 1
        text = line.rstrip("\r\n")
        if is_trailer(text):
            self._flush()
            self._state = ParserState.IDLE
            return
        header = match_header(text)
        if header is not None:
            self._start(header)
            return
        if not text.strip():
            return
        if self._state is ParserState.IN_DIAGNOSTIC and self._current is not None:
            target = self._current.notes[-1] if self._current.notes else self._current
            target.continuation.append(text)
            return
        self._discarded += 1
        LOGGER.debug("discarding clang-tidy line %d outside a diagnostic", self._line_number)

    def finish(self) -> list[ClangTidyDiagnostic]:
        """Flush the buffered diagnostic and return every parsed record."""

        self._flush()
        self._state = ParserState.IDLE
        return list(self._diagnostics)

    def _start(self, header: _Header) -> None:
        current = self._current
        attach = (
            header.severity == NOTE_SEVERITY
            and self._state is ParserState.IN_DIAGNOSTIC
            and current is not None
            and not current.is_note
        )
        if attach and current is not None:
            current.notes.append(
                ClangTidyNote(
                    path=header.path,
                    line=header.line,
                    column=header.column,
                    message=header.message,
                    source_line=self._line_number,
                ),
            )
            return
        self._flush()
        self._current = ClangTidyDiagnostic(
            path=header.path,
            line=header.line,
            column=header.column,
            severity=header.severity,
            message=header.message,
            check=header.check,
            source_line=self._line_number,
        )
        self._state = ParserState.IN_DIAGNOSTIC

    def _flush(self) -> None:
        if self._current is not None:
            self._diagnostics.append(self._current)
            self._current = None


def parse_clang_tidy(lines: str | Iterable[str]) -> list[ClangTidyDiagnostic]:
    """Parse a complete clang-tidy log.

    Args:
        lines: Whole log text or an iterable of lines.

    Returns:
        list[ClangTidyDiagnostic]: Diagnostics in the order they appeared.
    """

    parser = ClangTidyParser()
    source = lines.splitlines() if isinstance(lines, str) else lines
    for line in source:
        parser.feed(line)
    return parser.finish()


__all__ = [
    "ClangTidyDiagnostic",
    "ClangTidyNote",
    "ClangTidyParser",
    "ParserState",
    "is_trailer",
    "match_header",
    "normalize_check",
    "parse_clang_tidy",
]
