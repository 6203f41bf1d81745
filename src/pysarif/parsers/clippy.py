# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Records emitted by ``cargo clippy --message-format=json``."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

COMPILER_MESSAGE: Final[str] = "compiler-message"


class ClippyRecord(BaseModel):
    """Base for clippy records; unknown keys are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class SpanText(ClippyRecord):
    """One source line quoted by a span."""

    text: str
    highlight_start: int | None = None
    highlight_end: int | None = None


class DiagnosticSpan(ClippyRecord):
    """Source span attached to a rustc diagnostic."""

    file_name: str
    line_start: int
    line_end: int
    column_start: int
    column_end: int
    is_primary: bool = False
    label: str | None = None
    text: list[SpanText] = Field(default_factory=list)
    suggested_replacement: str | None = None
    suggestion_applicability: str | None = None

    def snippet(self) -> str | None:
        """Return the quoted source lines joined by newlines, if any."""

        if not self.text:
            return None
        return "\n".join(entry.text for entry in self.text)


class DiagnosticCode(ClippyRecord):
    """Lint or error code with its optional long-form explanation."""

    code: str
    explanation: str | None = None


class CompilerDiagnostic(ClippyRecord):
    """A rustc/clippy diagnostic; ``children`` carry notes and suggestions."""

    message: str
    level: str
    code: DiagnosticCode | None = None
    spans: list[DiagnosticSpan] = Field(default_factory=list)
    children: list[CompilerDiagnostic] = Field(default_factory=list)
    rendered: str | None = None


class CargoMessage(ClippyRecord):
    """One line of cargo's JSON message stream."""

    reason: str
    package_id: str | None = None
    manifest_path: str | None = None
    message: CompilerDiagnostic | None = None

    @property
    def is_diagnostic(self) -> bool:
        """Return ``True`` when the line carries a compiler diagnostic."""

        return self.reason == COMPILER_MESSAGE and self.message is not None


__all__ = [
    "COMPILER_MESSAGE",
    "CargoMessage",
    "CompilerDiagnostic",
    "DiagnosticCode",
    "DiagnosticSpan",
    "SpanText",
]
