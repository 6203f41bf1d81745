# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Incremental assembly of SARIF runs with rule deduplication."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Final

from pydantic import ValidationError

from ..core.errors import ConversionError, ConversionStage, RuleReferenceError
from ..core.severity import Level
from ..filesystem.paths import base_uri
from .models import (
    Artifact,
    ArtifactLocation,
    Fix,
    Location,
    Message,
    MultiformatMessageString,
    ReportingConfiguration,
    ReportingDescriptor,
    Result,
    Run,
    SarifLog,
    Tool,
    ToolComponent,
)

DEFAULT_URI_BASE_ID: Final[str] = "SRCROOT"
_SHORT_DESCRIPTION_LIMIT: Final[int] = 200


def _first_line(text: str, limit: int = _SHORT_DESCRIPTION_LIMIT) -> str:
    """Return the first non-blank line of ``text`` truncated to ``limit`` characters."""

    for line in text.splitlines():
        stripped = line.strip()
        if stripped:
            return stripped if len(stripped) <= limit else f"{stripped[: limit - 1]}…"
    return text.strip()


class RunBuilder:
    """Collect rules and results for one tool invocation.

    Rules are keyed by identifier and the first registration wins, so a tool
    that phrases the same check differently across occurrences still yields a
    single rule. Results may only reference registered rules.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        version: str | None = None,
        information_uri: str | None = None,
        base_dir: str | None = None,
        uri_base_id: str = DEFAULT_URI_BASE_ID,
    ) -> None:
        """Initialise the builder for ``tool_name``.

        Args:
            tool_name: Name of the analysis tool; must not be blank.
            version: Optional tool version string.
            information_uri: Optional homepage of the tool.
            base_dir: Directory relative artifact URIs are anchored at.
            uri_base_id: Symbolic name recorded for ``base_dir``.

        Raises:
            ConversionError: If ``tool_name`` is blank.
        """

        if not tool_name or not tool_name.strip():
            raise ConversionError("tool name is required", stage=ConversionStage.BUILD)
        self._tool_name = tool_name.strip()
        self._version = version or None
        self._information_uri = information_uri
        self._base_dir = base_dir
        self._uri_base_id = uri_base_id
        self._rules: dict[str, ReportingDescriptor] = {}
        self._results: list[Result] = []

    def has_rule(self, rule_id: str) -> bool:
        """Return ``True`` when ``rule_id`` is already registered."""

        return rule_id in self._rules

    def add_rule(
        self,
        rule_id: str,
        *,
        short_description: str,
        full_description: str | None = None,
        default_level: Level | None = None,
        help_uri: str | None = None,
        name: str | None = None,
    ) -> str:
        """Register a rule unless one with the same identifier exists.

        Args:
            rule_id: Stable rule identifier.
            short_description: Human-readable summary; only the first line is kept.
            full_description: Optional longer explanation.
            default_level: Optional default severity of the rule.
            help_uri: Optional documentation link.
            name: Optional display name.

        Returns:
            str: The registered identifier.

        Raises:
            pydantic.ValidationError: If ``rule_id`` or ``short_description`` is blank.
        """

        if rule_id in self._rules:
            return rule_id
        summary = _first_line(short_description) or rule_id
        rule = ReportingDescriptor(
            id=rule_id,
            name=name,
            short_description=MultiformatMessageString(text=summary),
            full_description=(
                MultiformatMessageString(text=full_description.strip())
                if full_description and full_description.strip()
                else None
            ),
            default_configuration=ReportingConfiguration(level=default_level) if default_level else None,
            help_uri=help_uri,
        )
        self._rules[rule.id] = rule
        return rule.id

    def add_result(
        self,
        *,
        rule_id: str,
        level: Level,
        message: str,
        locations: Sequence[Location],
        related_locations: Sequence[Location] | None = None,
        fixes: Sequence[Fix] | None = None,
        properties: Mapping[str, Any] | None = None,
    ) -> Result:
        """Append a result referencing an already registered rule.

        Args:
            rule_id: Identifier of a rule registered through :meth:`add_rule`.
            level: Severity of this occurrence.
            message: Result message text.
            locations: At least one location, in source order.
            related_locations: Optional secondary locations.
            fixes: Optional suggested fixes.
            properties: Optional tool-specific extras.

        Returns:
            Result: The stored result.

        Raises:
            RuleReferenceError: If ``rule_id`` is not registered.
            pydantic.ValidationError: If the result violates model constraints.
        """

        if rule_id not in self._rules:
            raise RuleReferenceError(rule_id)
        result = Result(
            rule_id=rule_id,
            level=level,
            message=Message(text=message),
            locations=list(locations),
            related_locations=list(related_locations) if related_locations else None,
            fixes=list(fixes) if fixes else None,
            properties=dict(properties) if properties else None,
        )
        self._results.append(result)
        return result

    def build(self) -> Run:
        """Return the finished :class:`Run`.

        Results receive their ``ruleIndex`` and the run lists every artifact
        referenced by a primary location, in first-seen order.

        Raises:
            ConversionError: If the assembled run violates model invariants.
        """

        rules = list(self._rules.values())
        index = {rule.id: position for position, rule in enumerate(rules)}
        results = [result.model_copy(update={"rule_index": index[result.rule_id]}) for result in self._results]
        try:
            return Run(
                tool=Tool(
                    driver=ToolComponent(
                        name=self._tool_name,
                        version=self._version,
                        information_uri=self._information_uri,
                        rules=rules,
                    ),
                ),
                results=results,
                artifacts=self._artifacts(results) or None,
                original_uri_base_ids=self._original_uri_base_ids(results),
            )
        except ValidationError as exc:
            raise ConversionError(str(exc), stage=ConversionStage.BUILD, tool=self._tool_name) from exc

    @staticmethod
    def _artifacts(results: Sequence[Result]) -> list[Artifact]:
        seen: dict[tuple[str, str | None], Artifact] = {}
        for result in results:
            for location in result.locations:
                physical = location.physical_location
                if physical is None:
                    continue
                artifact = physical.artifact_location
                key = (artifact.uri, artifact.uri_base_id)
                if key not in seen:
                    seen[key] = Artifact(location=artifact)
        return list(seen.values())

    def _original_uri_base_ids(self, results: Sequence[Result]) -> dict[str, ArtifactLocation] | None:
        if self._base_dir is None:
            return None
        uri = base_uri(self._base_dir)
        if uri is None:
            return None
        referenced = any(
            location.physical_location is not None
            and location.physical_location.artifact_location.uri_base_id == self._uri_base_id
            for result in results
            for location in [*result.locations, *(result.related_locations or [])]
        )
        return {self._uri_base_id: ArtifactLocation(uri=uri)} if referenced else None


def build_document(run: Run) -> SarifLog:
    """Wrap ``run`` in a SARIF log document."""

    return SarifLog(runs=[run])


__all__ = ["DEFAULT_URI_BASE_ID", "RunBuilder", "build_document"]
