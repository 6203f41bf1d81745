# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed SARIF 2.1.0 object graph.

Only the portion of the schema the converters populate is modelled. Field
names follow Python conventions and serialise to the schema's camelCase
property names; ``None`` values are omitted on output. Every model is frozen,
so a document cannot change once it has been assembled.
"""

from __future__ import annotations

from typing import Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..core.severity import Level

SARIF_VERSION: Final[str] = "2.1.0"
SARIF_SCHEMA: Final[str] = "https://schemastore.azurewebsites.net/schemas/json/sarif-2.1.0.json"


class SarifModel(BaseModel):
    """Base class wiring camelCase aliases and immutability."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Message(SarifModel):
    """Plain-text message attached to a result or location."""

    text: str = Field(min_length=1)

    @field_validator("text")
    @classmethod
    def _require_visible_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message text must not be blank")
        return value


class MultiformatMessageString(SarifModel):
    """Rule description text."""

    text: str = Field(min_length=1)


class ArtifactContent(SarifModel):
    """Literal artifact text, used for snippets and replacement content."""

    text: str


class ArtifactLocation(SarifModel):
    """Reference to a file, optionally relative to a named base URI."""

    uri: str = Field(min_length=1)
    uri_base_id: str | None = None


class Region(SarifModel):
    """1-based line/column span within an artifact."""

    start_line: int = Field(ge=1)
    start_column: int | None = Field(default=None, ge=1)
    end_line: int | None = Field(default=None, ge=1)
    end_column: int | None = Field(default=None, ge=1)
    snippet: ArtifactContent | None = None

    @model_validator(mode="after")
    def _check_ordering(self) -> Region:
        """Reject regions whose end precedes their start."""

        if self.end_line is not None and self.end_line < self.start_line:
            raise ValueError("endLine must not precede startLine")
        same_line = self.end_line is None or self.end_line == self.start_line
        if (
            same_line
            and self.start_column is not None
            and self.end_column is not None
            and self.end_column < self.start_column
        ):
            raise ValueError("endColumn must not precede startColumn on a single-line region")
        return self


class PhysicalLocation(SarifModel):
    """Artifact plus the region inside it."""

    artifact_location: ArtifactLocation
    region: Region | None = None


class Location(SarifModel):
    """Result location; related locations also carry a message."""

    physical_location: PhysicalLocation | None = None
    message: Message | None = None

    @model_validator(mode="after")
    def _require_content(self) -> Location:
        if self.physical_location is None and self.message is None:
            raise ValueError("location requires a physicalLocation or a message")
        return self


class ReportingConfiguration(SarifModel):
    """Default configuration of a rule."""

    level: Level


class ReportingDescriptor(SarifModel):
    """A rule: the diagnostic category a result refers to by ``id``."""

    id: str = Field(min_length=1)
    name: str | None = None
    short_description: MultiformatMessageString
    full_description: MultiformatMessageString | None = None
    default_configuration: ReportingConfiguration | None = None
    help_uri: str | None = None
    properties: dict[str, Any] | None = None

    @field_validator("id")
    @classmethod
    def _require_identifier(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("rule id must not be blank")
        return value


class ToolComponent(SarifModel):
    """Analysis tool metadata and its rule catalogue."""

    name: str = Field(min_length=1)
    version: str | None = None
    information_uri: str | None = None
    rules: list[ReportingDescriptor] | None = None


class Tool(SarifModel):
    """Wrapper holding the driver component."""

    driver: ToolComponent


class Replacement(SarifModel):
    """Replace ``deleted_region`` with ``inserted_content``."""

    deleted_region: Region
    inserted_content: ArtifactContent | None = None


class ArtifactChange(SarifModel):
    """Edits applied to one artifact."""

    artifact_location: ArtifactLocation
    replacements: list[Replacement] = Field(min_length=1)


class Fix(SarifModel):
    """Suggested edit that resolves a result."""

    description: Message | None = None
    artifact_changes: list[ArtifactChange] = Field(min_length=1)


class Result(SarifModel):
    """A single finding."""

    rule_id: str = Field(min_length=1)
    rule_index: int | None = Field(default=None, ge=0)
    level: Level
    message: Message
    locations: list[Location] = Field(min_length=1)
    related_locations: list[Location] | None = None
    fixes: list[Fix] | None = None
    properties: dict[str, Any] | None = None


class Artifact(SarifModel):
    """An artifact referenced by the run's results."""

    location: ArtifactLocation


class Run(SarifModel):
    """One invocation of one analysis tool."""

    tool: Tool
    results: list[Result] = Field(default_factory=list)
    artifacts: list[Artifact] | None = None
    original_uri_base_ids: dict[str, ArtifactLocation] | None = None

    @model_validator(mode="after")
    def _check_rule_references(self) -> Run:
        """Ensure rules are unique and every result resolves to one of them."""

        rules = self.tool.driver.rules or []
        positions: dict[str, int] = {}
        for index, rule in enumerate(rules):
            if rule.id in positions:
                raise ValueError(f"duplicate rule id '{rule.id}'")
            positions[rule.id] = index
        for result in self.results:
            position = positions.get(result.rule_id)
            if position is None:
                raise ValueError(f"result references unknown rule '{result.rule_id}'")
            if result.rule_index is not None and result.rule_index != position:
                raise ValueError(f"ruleIndex {result.rule_index} does not match rule '{result.rule_id}'")
        return self

    def rule(self, rule_id: str) -> ReportingDescriptor | None:
        """Return the rule registered under ``rule_id`` if any."""

        for rule in self.tool.driver.rules or []:
            if rule.id == rule_id:
                return rule
        return None


class SarifLog(SarifModel):
    """Top-level SARIF document."""

    schema_uri: str = Field(default=SARIF_SCHEMA, alias="$schema")
    version: Literal["2.1.0"] = SARIF_VERSION
    runs: list[Run] = Field(min_length=1)

    def to_json(self, *, indent: int | None = 2) -> str:
        """Serialise the document using SARIF property names.

        Args:
            indent: Indentation width; ``None`` renders compact JSON.

        Returns:
            str: JSON text of the document.
        """

        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes) -> SarifLog:
        """Parse a SARIF document previously produced by :meth:`to_json`."""

        return cls.model_validate_json(text)


__all__ = [
    "SARIF_SCHEMA",
    "SARIF_VERSION",
    "Artifact",
    "ArtifactChange",
    "ArtifactContent",
    "ArtifactLocation",
    "Fix",
    "Location",
    "Message",
    "MultiformatMessageString",
    "PhysicalLocation",
    "Region",
    "Replacement",
    "ReportingConfiguration",
    "ReportingDescriptor",
    "Result",
    "Run",
    "SarifLog",
    "SarifModel",
    "Tool",
    "ToolComponent",
]
