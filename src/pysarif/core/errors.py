# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error taxonomy shared by the SARIF builders and the converters."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ConversionStage(str, Enum):
    """Pipeline stage in which a failure or skip occurred."""

    PARSE = "parse"
    MAP = "map"
    BUILD = "build"


class ConversionError(RuntimeError):
    """Raised when a conversion cannot produce a document at all."""

    def __init__(self, message: str, *, stage: ConversionStage, tool: str | None = None) -> None:
        """Initialise the error with the failing stage.

        Args:
            message: Human-readable description of the failure.
            stage: Stage of the pipeline that failed.
            tool: Name of the tool whose output was being converted.
        """

        prefix = f"{tool} " if tool else ""
        super().__init__(f"{prefix}{stage.value} error: {message}")
        self.stage = stage
        self.tool = tool
        self.reason = message


class RecordError(ValueError):
    """Raised when a single diagnostic record cannot be mapped."""


class RuleReferenceError(KeyError):
    """Raised when a result references a rule the run does not declare."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(rule_id)
        self.rule_id = rule_id

    def __str__(self) -> str:
        return f"rule '{self.rule_id}' is not registered with the run"


class ConversionWarning(BaseModel):
    """Non-fatal issue reported alongside a successful conversion."""

    model_config = ConfigDict(frozen=True)

    tool: str
    stage: ConversionStage
    message: str
    record: int | None = None

    def describe(self) -> str:
        """Return a one-line rendering suitable for console output."""

        where = f" (record {self.record})" if self.record is not None else ""
        return f"{self.tool}: {self.message}{where}"


__all__ = [
    "ConversionError",
    "ConversionStage",
    "ConversionWarning",
    "RecordError",
    "RuleReferenceError",
]
