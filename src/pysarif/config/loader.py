# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered settings loader with provenance tracking."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .models import ConfigError, ConversionSettings
from .sources import ConfigSource, DefaultConfigSource, OverrideConfigSource, PyProjectConfigSource, TomlConfigSource

LOGGER = logging.getLogger(__name__)

PROJECT_CONFIG_NAME: Final[str] = ".pysarif.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"


class FieldUpdate(BaseModel):
    """Description of a single settings field set by a source."""

    model_config = ConfigDict(validate_assignment=True)

    field: str
    source: str
    value: Any


class SettingsLoadResult(BaseModel):
    """Container bundling resolved settings with provenance metadata."""

    model_config = ConfigDict(validate_assignment=True)

    settings: ConversionSettings
    sources: list[str] = Field(default_factory=list)
    updates: list[FieldUpdate] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class SettingsLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, *, sources: Sequence[ConfigSource]) -> None:
        """Initialise a loader that merges ``sources`` in order.

        Args:
            sources: Configuration sources, lowest precedence first.

        Raises:
            ValueError: If ``sources`` is empty.
        """

        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)

    @classmethod
    def for_root(
        cls,
        project_root: Path,
        *,
        config_file: Path | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> SettingsLoader:
        """Build a loader honouring defaults, project files and overrides.

        Args:
            project_root: Directory searched for ``pyproject.toml`` and ``.pysarif.toml``.
            config_file: Optional explicit settings file; it must exist.
            overrides: Optional values that take precedence over every file.

        Returns:
            SettingsLoader: Loader configured with default precedence ordering.
        """

        sources: list[ConfigSource] = [DefaultConfigSource()]
        pyproject = project_root / PYPROJECT_NAME
        if pyproject.is_file():
            sources.append(PyProjectConfigSource(pyproject))
        project_file = project_root / PROJECT_CONFIG_NAME
        if project_file.is_file():
            sources.append(TomlConfigSource(project_file))
        if config_file is not None:
            sources.append(TomlConfigSource(config_file, required=True))
        if overrides:
            sources.append(OverrideConfigSource(overrides))
        return cls(sources=sources)

    def load_with_trace(self, *, strict: bool = False) -> SettingsLoadResult:
        """Return the resolved settings with trace metadata.

        Args:
            strict: When ``True`` raise if warnings were emitted during merge.

        Returns:
            SettingsLoadResult: Resolved settings and provenance details.

        Raises:
            ConfigError: If a source is unreadable, a value is invalid, or
                ``strict`` is set and unknown keys were found.
        """

        known = set(ConversionSettings.model_fields)
        merged: dict[str, Any] = {}
        contributed: list[str] = []
        updates: list[FieldUpdate] = []
        warnings: list[str] = []
        for source in self._sources:
            fragment = source.load()
            if not fragment:
                continue
            contributed.append(source.name)
            for key, value in fragment.items():
                if key not in known:
                    warnings.append(f"Unknown setting '{key}' in {source.describe()}")
                    continue
                merged[key] = value
                if source.name != DefaultConfigSource.name:
                    updates.append(FieldUpdate(field=key, source=source.name, value=value))
        if strict and warnings:
            raise ConfigError("; ".join(warnings))
        for message in warnings:
            LOGGER.debug(message)
        try:
            settings = ConversionSettings.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc
        return SettingsLoadResult(settings=settings, sources=contributed, updates=updates, warnings=warnings)


__all__ = [
    "PROJECT_CONFIG_NAME",
    "FieldUpdate",
    "SettingsLoadResult",
    "SettingsLoader",
]
