# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared conversion pipeline used by every tool converter.

A converter turns raw tool output into tool-native records, maps each record
onto one or more :class:`ResultSpec` values and hands them to a
:class:`~pysarif.sarif.builders.RunBuilder`. Records that cannot be mapped
are skipped and reported as :class:`ConversionWarning` entries; only input
that cannot be read at all aborts the conversion.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from ..config.models import ConversionSettings
from ..core.errors import ConversionStage, ConversionWarning, RecordError
from ..core.serialization import JsonValue, load_json_stream
from ..core.severity import Level
from ..sarif.builders import RunBuilder, build_document
from ..sarif.locations import UriContext
from ..sarif.models import Fix, Location, Result, Run, SarifLog

LOGGER = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class ConversionReport(BaseModel):
    """Converted document plus the non-fatal issues met on the way."""

    model_config = ConfigDict(frozen=True)

    document: SarifLog
    warnings: list[ConversionWarning]

    @property
    def run(self) -> Run:
        """The single run of :attr:`document`."""

        return self.document.runs[0]

    @property
    def results(self) -> list[Result]:
        """Results of :attr:`run`."""

        return self.run.results

    def to_json(self, *, indent: int | None = 2) -> str:
        """Serialise :attr:`document` as SARIF JSON."""

        return self.document.to_json(indent=indent)


@dataclass(slots=True)
class RuleSpec:
    """Rule metadata derived from a single record."""

    rule_id: str
    short_description: str
    full_description: str | None = None
    default_level: Level | None = None
    help_uri: str | None = None


@dataclass(slots=True)
class ResultSpec:
    """Everything needed to add one result and its rule to a run."""

    rule: RuleSpec
    level: Level
    message: str
    locations: list[Location]
    related_locations: list[Location] = field(default_factory=list)
    fixes: list[Fix] = field(default_factory=list)
    properties: dict[str, Any] | None = None


class WarningLog:
    """Accumulate skipped-record warnings for one conversion."""

    def __init__(self, tool: str) -> None:
        self._tool = tool
        self._warnings: list[ConversionWarning] = []

    @property
    def warnings(self) -> list[ConversionWarning]:
        """Warnings recorded so far."""

        return list(self._warnings)

    def skip(self, message: str, *, record: int | None = None, stage: ConversionStage = ConversionStage.MAP) -> None:
        """Record that ``record`` was dropped because of ``message``."""

        LOGGER.debug("%s: skipping record %s: %s", self._tool, record, message)
        self._warnings.append(ConversionWarning(tool=self._tool, stage=stage, message=message, record=record))


def describe_validation_error(exc: ValidationError) -> str:
    """Return the first validation problem as ``field: message``."""

    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    where = ".".join(str(part) for part in first.get("loc", ())) or "record"
    return f"{where}: {first.get('msg', 'invalid value')}"


class Converter(Generic[RecordT], ABC):
    """Base class implementing the record-by-record conversion loop.

    Subclasses declare :attr:`tool_name`, turn raw items into records in
    :meth:`parse_record` and map them in :meth:`map_record`. Instances only
    hold immutable settings, so one converter may serve concurrent calls.
    """

    tool_name: ClassVar[str]
    information_uri: ClassVar[str | None] = None

    def __init__(self, *, settings: ConversionSettings | None = None, tool_version: str | None = None) -> None:
        self._settings = settings.model_copy() if settings is not None else ConversionSettings()
        self._tool_version = tool_version

    @property
    def settings(self) -> ConversionSettings:
        """Settings applied to every conversion."""

        return self._settings

    @abstractmethod
    def convert(self, text: str) -> ConversionReport:
        """Convert raw tool output into a SARIF report."""

    def convert_records(self, records: Iterable[RecordT | Mapping[str, Any]]) -> ConversionReport:
        """Convert already-decoded records.

        Args:
            records: Record models or mappings shaped like the tool's JSON.

        Returns:
            ConversionReport: Document and warnings.
        """

        return self._convert(list(records), WarningLog(self.tool_name))

    @abstractmethod
    def parse_record(self, item: object) -> RecordT:
        """Validate one decoded item.

        Raises:
            ValidationError: If the item does not have the tool's record shape.
            RecordError: If the item is unusable for another reason.
        """

    @abstractmethod
    def map_record(self, record: RecordT, context: UriContext) -> Sequence[ResultSpec]:
        """Return the results ``record`` contributes.

        Raises:
            RecordError: If the record cannot be mapped.
        """

    def accepts(self, record: RecordT) -> bool:
        """Return ``False`` for records that carry no diagnostic at all."""

        return True

    def uri_context(self, records: Sequence[RecordT]) -> UriContext:
        """Return the path settings for a run over ``records``."""

        return UriContext(base_dir=self._settings.base_dir, uri_base_id=self._settings.uri_base_id)

    def _parse_all(self, items: Sequence[object], log: WarningLog) -> list[tuple[int, RecordT]]:
        parsed: list[tuple[int, RecordT]] = []
        for index, item in enumerate(items):
            try:
                record = self.parse_record(item)
            except ValidationError as exc:
                log.skip(f"invalid record ({describe_validation_error(exc)})", record=index, stage=ConversionStage.PARSE)
                continue
            except RecordError as exc:
                log.skip(str(exc), record=index, stage=ConversionStage.PARSE)
                continue
            if self.accepts(record):
                parsed.append((index, record))
        return parsed

    def _convert(self, items: Sequence[object], log: WarningLog) -> ConversionReport:
        parsed = self._parse_all(items, log)
        context = self.uri_context([record for _, record in parsed])
        builder = RunBuilder(
            self.tool_name,
            version=self._tool_version,
            information_uri=self.information_uri,
            base_dir=context.base_dir,
            uri_base_id=self._settings.uri_base_id,
        )
        for index, record in parsed:
            try:
                specs = list(self.map_record(record, context))
                for spec in specs:
                    if not spec.rule.rule_id.strip():
                        raise RecordError("diagnostic has no rule identifier")
                    if not spec.message.strip():
                        raise RecordError("diagnostic has an empty message")
                    if not spec.locations:
                        raise RecordError("diagnostic has no location")
            except RecordError as exc:
                log.skip(str(exc), record=self.record_number(index, record))
                continue
            except ValidationError as exc:
                log.skip(describe_validation_error(exc), record=self.record_number(index, record))
                continue
            for spec in specs:
                self._emit(builder, spec)
        return ConversionReport(document=build_document(builder.build()), warnings=log.warnings)

    def record_number(self, index: int, record: RecordT) -> int:
        """Return the identifier reported in warnings for ``record``."""

        return index

    @staticmethod
    def _emit(builder: RunBuilder, spec: ResultSpec) -> None:
        rule = spec.rule
        builder.add_rule(
            rule.rule_id,
            short_description=rule.short_description,
            full_description=rule.full_description,
            default_level=rule.default_level,
            help_uri=rule.help_uri,
        )
        builder.add_result(
            rule_id=rule.rule_id,
            level=spec.level,
            message=spec.message,
            locations=spec.locations,
            related_locations=spec.related_locations,
            fixes=spec.fixes,
            properties=spec.properties,
        )


class JsonConverter(Converter[RecordT], ABC):
    """Converter for tools that print JSON documents or JSON lines."""

    def convert(self, text: str) -> ConversionReport:
        """Decode ``text`` and convert every record it contains.

        Raises:
            ConversionError: If ``text`` contains no valid JSON at all.
        """

        stream = load_json_stream(text, tool=self.tool_name)
        log = WarningLog(self.tool_name)
        for line in stream.invalid_lines:
            log.skip("line is not valid JSON", record=line, stage=ConversionStage.PARSE)
        return self._convert(self.expand_items(stream.items), log)

    def expand_items(self, items: list[JsonValue]) -> list[JsonValue]:
        """Return the record payloads contained in the decoded top-level values."""

        return items


__all__ = [
    "ConversionReport",
    "Converter",
    "JsonConverter",
    "ResultSpec",
    "RuleSpec",
    "WarningLog",
    "describe_validation_error",
]
