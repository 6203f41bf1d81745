# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate tool-neutral positions and paths into SARIF location objects."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.errors import RecordError
from ..filesystem.paths import is_absolute_path, normalize_path
from .models import ArtifactContent, ArtifactLocation, Location, Message, PhysicalLocation, Region


def _positive_int(value: object) -> int | None:
    """Return ``value`` as an ``int`` when it is a positive integer, else ``None``."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 1 else None
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return None
        return parsed if parsed >= 1 else None
    return None


def region_from(
    line: object,
    column: object = None,
    *,
    end_line: object = None,
    end_column: object = None,
    snippet: str | None = None,
) -> Region:
    """Build a :class:`Region` from 1-based tool positions.

    The start line is mandatory and a missing, non-numeric or non-positive
    value marks the record as malformed. An invalid start column is treated
    the same way. End positions are advisory: values that are missing,
    invalid, or precede the start are dropped.

    Args:
        line: 1-based start line.
        column: Optional 1-based start column.
        end_line: Optional 1-based end line.
        end_column: Optional 1-based end column.
        snippet: Optional source text excerpt.

    Returns:
        Region: Region describing the span.

    Raises:
        RecordError: If ``line`` or a supplied ``column`` is not a positive integer.
    """

    start_line = _positive_int(line)
    if start_line is None:
        raise RecordError(f"invalid line number {line!r}")
    start_column = _positive_int(column)
    if column is not None and start_column is None:
        raise RecordError(f"invalid column number {column!r}")

    stop_line = _positive_int(end_line)
    if stop_line is not None and stop_line < start_line:
        stop_line = None
    stop_column = _positive_int(end_column)
    if stop_column is not None and start_column is not None:
        single_line = stop_line is None or stop_line == start_line
        if single_line and stop_column < start_column:
            stop_column = None

    return Region(
        start_line=start_line,
        start_column=start_column,
        end_line=stop_line,
        end_column=stop_column,
        snippet=ArtifactContent(text=snippet) if snippet else None,
    )


@dataclass(frozen=True, slots=True)
class UriContext:
    """Path normalisation settings shared by every location in a run."""

    base_dir: str | None = None
    uri_base_id: str | None = None

    def artifact_location(self, path: object) -> ArtifactLocation:
        """Return an :class:`ArtifactLocation` for a tool-reported ``path``.

        Args:
            path: File path exactly as the tool reported it.

        Returns:
            ArtifactLocation: Location with a normalised URI. Relative URIs are
            tagged with :attr:`uri_base_id` whenever :attr:`base_dir` is known.

        Raises:
            RecordError: If ``path`` is missing or blank.
        """

        if path is None or not str(path).strip():
            raise RecordError("diagnostic has no file path")
        raw = str(path).strip()
        uri = normalize_path(raw, self.base_dir)
        anchored = self.base_dir is not None and not is_absolute_path(uri)
        base_id = self.uri_base_id if anchored and self.uri_base_id else None
        return ArtifactLocation(uri=uri, uri_base_id=base_id)

    def location(self, path: object, region: Region | None, *, message: str | None = None) -> Location:
        """Return a :class:`Location` pointing at ``region`` within ``path``."""

        return Location(
            physical_location=PhysicalLocation(artifact_location=self.artifact_location(path), region=region),
            message=Message(text=message) if message and message.strip() else None,
        )


__all__ = ["UriContext", "region_from"]
